"""Password validation functions."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from isitvalid.shared.constants import DEFAULT_SPECIAL_CHARS
from isitvalid.shared.exceptions import FailureKind
from isitvalid.shared.outcome import Outcome, Success, fail
from isitvalid.shared.patterns import compile_character_class, resolve_options

logger = logging.getLogger(__name__)

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")


class PasswordOptions(BaseModel):
    """Options for password validation. Every count defaults to 0 (no requirement)."""

    model_config = ConfigDict(frozen=True)

    min_length: int = 0
    max_length: int | None = None
    require_uppercase: int = 0
    require_lowercase: int = 0
    require_numbers: int = 0
    require_special_chars: int = 0
    special_chars: str = DEFAULT_SPECIAL_CHARS
    min_unique_chars: int = 0


def validate_password(password: str, options: PasswordOptions | Mapping[str, Any] | None = None) -> Outcome[str]:
    """Validate password strength requirements.

    Requirements, checked in order:
    - Length between min_length and max_length
    - At least require_uppercase uppercase letters (A-Z)
    - At least require_lowercase lowercase letters (a-z)
    - At least require_numbers digits (0-9)
    - At least require_special_chars characters from special_chars
    - At least min_unique_chars distinct characters

    Args:
        password: Password string to validate
        options: PasswordOptions, a mapping of its fields, or None for defaults

    Returns:
        Success with the password unchanged, or Failure with the reason

    Examples:
        >>> validate_password("SecurePass123", {"require_uppercase": 1}).value
        'SecurePass123'
        >>> validate_password("securepass123", {"require_uppercase": 1}).reason
        'Password must contain at least 1 uppercase letter(s)'

    """
    opts = resolve_options(options, PasswordOptions)

    if len(password) < opts.min_length:
        return fail(FailureKind.LENGTH, f"Password must be at least {opts.min_length} characters long", logger)
    if opts.max_length is not None and len(password) > opts.max_length:
        return fail(FailureKind.LENGTH, f"Password must be at most {opts.max_length} characters long", logger)

    if len(_UPPERCASE.findall(password)) < opts.require_uppercase:
        return fail(
            FailureKind.COUNT, f"Password must contain at least {opts.require_uppercase} uppercase letter(s)", logger
        )
    if len(_LOWERCASE.findall(password)) < opts.require_lowercase:
        return fail(
            FailureKind.COUNT, f"Password must contain at least {opts.require_lowercase} lowercase letter(s)", logger
        )
    if len(_DIGIT.findall(password)) < opts.require_numbers:
        return fail(FailureKind.COUNT, f"Password must contain at least {opts.require_numbers} digit(s)", logger)

    special = compile_character_class(opts.special_chars)
    special_count = len(special.findall(password)) if special is not None else 0
    if special_count < opts.require_special_chars:
        return fail(
            FailureKind.COUNT,
            f"Password must contain at least {opts.require_special_chars} special character(s)",
            logger,
        )

    if len(set(password)) < opts.min_unique_chars:
        return fail(
            FailureKind.COUNT, f"Password must contain at least {opts.min_unique_chars} unique characters", logger
        )

    return Success(value=password)


def is_valid_password(password: str, options: PasswordOptions | Mapping[str, Any] | None = None) -> bool:
    """Boolean projection of validate_password."""
    return validate_password(password, options).to_bool()


__all__ = ["PasswordOptions", "is_valid_password", "validate_password"]
