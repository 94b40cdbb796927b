"""Validation outcome: a tagged Success/Failure result.

Every validator returns an ``Outcome``. Callers that only need a boolean or a
nullable value use the projections instead of re-implementing the checks:

```python
outcome = validate_email("User@Example.com")
outcome.to_bool()        # True
outcome.value_or_none()  # "user@example.com"
outcome.unwrap()         # "user@example.com", or raises ValidationFailed
```
"""

import logging
from typing import Generic, NoReturn, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field
from typing_extensions import TypeAliasType

from isitvalid.shared.exceptions import FailureKind, ValidationFailed

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Success(BaseModel, Generic[T]):
    """Successful validation carrying the (possibly normalized) value."""

    model_config = ConfigDict(frozen=True)

    value: T

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return True

    def to_bool(self) -> bool:
        return True

    def value_or_none(self) -> T | None:
        return self.value

    def unwrap(self) -> T:
        return self.value


class Failure(BaseModel):
    """Failed validation carrying a human-readable reason."""

    model_config = ConfigDict(frozen=True)

    reason: str
    kind: FailureKind

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return False

    def to_bool(self) -> bool:
        return False

    def value_or_none(self) -> None:
        return None

    def unwrap(self) -> NoReturn:
        """Raise the failure as an exception.

        Raises:
            ValidationFailed: Always, carrying this failure's reason and kind.

        """
        raise ValidationFailed(self.reason, self.kind)


Outcome = TypeAliasType("Outcome", Success[T] | Failure, type_params=(T,))


def fail(kind: FailureKind, reason: str, log: logging.Logger = logger) -> Failure:
    """Build a Failure and record the rejection at DEBUG level on ``log``."""
    log.debug(f"Rejected ({kind}): {reason}")
    return Failure(reason=reason, kind=kind)


__all__ = ["Failure", "Outcome", "Success", "fail"]
