"""URL validation."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from isitvalid.shared.constants import PROTOCOLS
from isitvalid.shared.exceptions import FailureKind
from isitvalid.shared.outcome import Outcome, Success, fail
from isitvalid.shared.patterns import compile_prefix_alternation, resolve_options

logger = logging.getLogger(__name__)

_URL_SHAPE = re.compile(rf"(?:{'|'.join(PROTOCOLS)})://\S+", re.IGNORECASE)


class UrlOptions(BaseModel):
    """Options for URL validation.

    protocols is mandatory in practice: leaving it unset or empty makes every
    URL fail. format, when given, is searched for anywhere in the URL.
    """

    model_config = ConfigDict(frozen=True)

    protocols: list[str] | None = None
    format: re.Pattern[str] | None = None


def validate_url(url: str, options: UrlOptions | Mapping[str, Any] | None = None) -> Outcome[str]:
    """Validate a URL against the recognized schemes, a custom format and a protocol allow-list.

    Protocol matching is a case-insensitive prefix test against ``<protocol>://``,
    not a parsed-URI comparison.

    Args:
        url: URL to validate
        options: UrlOptions, a mapping of its fields, or None for defaults

    Returns:
        Success with the URL unchanged, or Failure with the reason

    Examples:
        >>> validate_url("http://moemen.com", {"protocols": ["http"]}).value
        'http://moemen.com'
        >>> validate_url("http://moemen.com").reason
        'No protocols specified'

    """
    opts = resolve_options(options, UrlOptions)

    if not _URL_SHAPE.fullmatch(url):
        return fail(FailureKind.FORMAT, "URL format is invalid", logger)

    if opts.format is not None and not opts.format.search(url):
        return fail(FailureKind.FORMAT, "URL does not match the required format", logger)

    if not opts.protocols:
        return fail(FailureKind.UNSUPPORTED, "No protocols specified", logger)

    if not compile_prefix_alternation(opts.protocols, suffix="://").match(url):
        allowed = ", ".join(opts.protocols)
        return fail(FailureKind.POLICY, f"URL protocol must be one of: {allowed}", logger)

    return Success(value=url)


def is_valid_url(url: str, options: UrlOptions | Mapping[str, Any] | None = None) -> bool:
    """Boolean projection of validate_url."""
    return validate_url(url, options).to_bool()


__all__ = ["UrlOptions", "is_valid_url", "validate_url"]
