"""Pydantic field types backed by the validators.

Failures are raised as ValidationFailed (a ValueError), so pydantic reports
them as ordinary field validation errors:

```python
from pydantic import BaseModel

class SignupRequest(BaseModel):
    email: Email
    password: StrongPassword
    birthday: IsoDate
```

The ``*_field`` factories build the same kind of type with custom options.
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator

from .date import DateFormat, validate_date
from .email import EmailOptions, validate_email
from .number import NumberOptions, validate_number
from .password import PasswordOptions, validate_password
from .url import UrlOptions, validate_url


def email_field(options: EmailOptions | Mapping[str, Any] | None = None) -> Any:
    """Build an email field type validated with ``options``."""

    def _validate(value: str) -> str:
        return validate_email(value, options).unwrap()

    return Annotated[str, AfterValidator(_validate)]


def password_field(options: PasswordOptions | Mapping[str, Any] | None = None) -> Any:
    """Build a password field type validated with ``options``."""

    def _validate(value: str) -> str:
        return validate_password(value, options).unwrap()

    return Annotated[str, AfterValidator(_validate)]


def date_field(format: DateFormat | str) -> Any:
    """Build a date string field type for one of the supported formats."""

    def _validate(value: str) -> str:
        return validate_date(value, format).unwrap()

    return Annotated[str, AfterValidator(_validate)]


def number_field(options: NumberOptions | Mapping[str, Any] | None = None) -> Any:
    """Build a numeric field type; numeric strings are parsed strictly before validation."""

    def _validate(value: Any) -> int | float:
        return validate_number(value, options).unwrap()

    return Annotated[int | float, BeforeValidator(_validate)]


def url_field(options: UrlOptions | Mapping[str, Any] | None = None) -> Any:
    """Build a URL field type validated with ``options``."""

    def _validate(value: str) -> str:
        return validate_url(value, options).unwrap()

    return Annotated[str, AfterValidator(_validate)]


Email = email_field()
StrongPassword = password_field(
    PasswordOptions(min_length=8, require_uppercase=1, require_lowercase=1, require_numbers=1)
)
IsoDate = date_field(DateFormat.YYYY_MM_DD)
UsDate = date_field(DateFormat.MM_DD_YYYY)
EuDate = date_field(DateFormat.DD_MM_YYYY)
Number = number_field()
WebUrl = url_field(UrlOptions(protocols=["http", "https"]))


__all__ = [
    "Email",
    "EuDate",
    "IsoDate",
    "Number",
    "StrongPassword",
    "UsDate",
    "WebUrl",
    "date_field",
    "email_field",
    "number_field",
    "password_field",
    "url_field",
]
