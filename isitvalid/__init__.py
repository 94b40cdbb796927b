"""isitvalid: stateless validators for emails, passwords, dates, numbers and URLs.

Every validator returns an Outcome:

```python
from isitvalid import validate_email

outcome = validate_email("User@Example.com")
if outcome.is_valid:
    print(outcome.value)   # user@example.com
else:
    print(outcome.reason)
```
"""

from isitvalid.config import Settings, configure_logging, get_settings
from isitvalid.shared.constants import EMAIL_VALIDATION_PATTERN, PROTOCOLS
from isitvalid.shared.exceptions import FailureKind, ValidationFailed
from isitvalid.shared.outcome import Failure, Outcome, Success
from isitvalid.shared.validators import (
    DateFormat,
    EmailOptions,
    NumberOptions,
    PasswordOptions,
    UrlOptions,
    is_valid_date,
    is_valid_email,
    is_valid_number,
    is_valid_password,
    is_valid_url,
    validate_date,
    validate_email,
    validate_number,
    validate_password,
    validate_url,
)

__version__ = "0.1.0"

__all__ = [
    "EMAIL_VALIDATION_PATTERN",
    "PROTOCOLS",
    "DateFormat",
    "EmailOptions",
    "Failure",
    "FailureKind",
    "NumberOptions",
    "Outcome",
    "PasswordOptions",
    "Settings",
    "Success",
    "UrlOptions",
    "ValidationFailed",
    "configure_logging",
    "get_settings",
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
