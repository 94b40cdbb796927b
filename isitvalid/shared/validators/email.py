"""Email address validation."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from isitvalid.shared.constants import EMAIL_VALIDATION_PATTERN
from isitvalid.shared.exceptions import FailureKind
from isitvalid.shared.outcome import Outcome, Success, fail
from isitvalid.shared.patterns import resolve_options

logger = logging.getLogger(__name__)

_TLD_PATTERN = re.compile(r"\.[a-zA-Z]{2,}\Z")
_SPECIAL_CHARACTER_PATTERN = re.compile(r"[^a-zA-Z0-9@.]")


class EmailOptions(BaseModel):
    """Options for email validation.

    Domain lists are compared against the domain after case normalization, so
    with the default case-insensitive mode they should be given in lowercase.
    """

    model_config = ConfigDict(frozen=True)

    pattern: re.Pattern[str] = EMAIL_VALIDATION_PATTERN
    min_length: int = 0
    max_length: int | None = None
    allow_special_characters: bool = True
    allowed_domains: list[str] | None = None
    disallowed_domains: list[str] | None = None
    case_sensitive: bool = False
    allow_subdomains: bool = True
    required_tld: bool = True
    is_required: bool = True


def validate_email(email: str, options: EmailOptions | Mapping[str, Any] | None = None) -> Outcome[str]:
    """Validate an email address.

    Checks run in a fixed order and the first failing one decides the outcome:
    required, length, local/domain split, special characters, TLD, subdomains,
    allow-list, deny-list, and finally the full pattern.

    Args:
        email: Email address to validate
        options: EmailOptions, a mapping of its fields, or None for defaults

    Returns:
        Success with the normalized (lowercased unless case-sensitive) email,
        or Failure with the reason

    Examples:
        >>> validate_email("User@Example.com").value
        'user@example.com'
        >>> validate_email("user@example.com", {"max_length": 10}).reason
        'Email must be at most 10 characters long'

    """
    opts = resolve_options(options, EmailOptions)

    if not email:
        if opts.is_required:
            return fail(FailureKind.REQUIRED, "Email is required", logger)
        return Success(value=email)

    normalized = email if opts.case_sensitive else email.lower()

    if len(normalized) < opts.min_length:
        return fail(FailureKind.LENGTH, f"Email must be at least {opts.min_length} characters long", logger)
    if opts.max_length is not None and len(normalized) > opts.max_length:
        return fail(FailureKind.LENGTH, f"Email must be at most {opts.max_length} characters long", logger)

    parts = normalized.split("@")
    if len(parts) != 2 or not all(parts):
        return fail(FailureKind.COMPOSITION, "Email must have exactly one local part and one domain", logger)
    local_part, domain = parts

    if not opts.allow_special_characters and _SPECIAL_CHARACTER_PATTERN.search(local_part):
        return fail(FailureKind.FORMAT, "Email local part must not contain special characters", logger)

    if opts.required_tld and not _TLD_PATTERN.search(domain):
        return fail(FailureKind.FORMAT, "Email domain must end with a top-level domain", logger)

    # More than two labels (e.g. mail.example.com) counts as a subdomain
    if not opts.allow_subdomains and len(domain.split(".")) > 2:
        return fail(FailureKind.POLICY, "Email domain must not contain subdomains", logger)

    if opts.allowed_domains is not None and domain not in opts.allowed_domains:
        return fail(FailureKind.POLICY, f"Email domain '{domain}' is not allowed", logger)
    if opts.disallowed_domains is not None and domain in opts.disallowed_domains:
        return fail(FailureKind.POLICY, f"Email domain '{domain}' is disallowed", logger)

    if not opts.pattern.search(normalized):
        return fail(FailureKind.FORMAT, "Email format is invalid", logger)

    return Success(value=normalized)


def is_valid_email(email: str, options: EmailOptions | Mapping[str, Any] | None = None) -> bool:
    """Boolean projection of validate_email."""
    return validate_email(email, options).to_bool()


__all__ = ["EmailOptions", "is_valid_email", "validate_email"]
