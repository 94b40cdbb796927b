"""Shared validators package.

This package contains independent, side-effect-free validation functions.
Each returns an Outcome (Success or Failure) and never raises for well-formed
options.

Available validators:
- email.py: Email address validation (case folding, domain policies, pattern)
- password.py: Password strength validation (length, character-class counts)
- date.py: Date validation for YYYY-MM-DD, MM/DD/YYYY and DD/MM/YYYY
- number.py: Numeric range and decimal-place validation
- url.py: URL scheme, custom format and protocol allow-list validation
- types.py: Pydantic field types built on the validators above
"""

from .date import DateFormat, days_in_month, is_valid_date, validate_date
from .email import EmailOptions, is_valid_email, validate_email
from .number import NumberOptions, is_valid_number, validate_number
from .password import PasswordOptions, is_valid_password, validate_password
from .url import UrlOptions, is_valid_url, validate_url

__all__ = [
    "DateFormat",
    "EmailOptions",
    "NumberOptions",
    "PasswordOptions",
    "UrlOptions",
    "days_in_month",
    "is_valid_date",
    "is_valid_email",
    "is_valid_number",
    "is_valid_password",
    "is_valid_url",
    "validate_date",
    "validate_email",
    "validate_number",
    "validate_password",
    "validate_url",
]
