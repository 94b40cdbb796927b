"""Validation failure taxonomy and exceptions."""

from enum import StrEnum


class FailureKind(StrEnum):
    """Why a value was rejected.

    REQUIRED: Value was empty but required.
    LENGTH: Value is too short or too long.
    FORMAT: Value does not have the expected shape or pattern.
    COMPOSITION: A structural part is missing (e.g. email local part or domain).
    POLICY: Value breaks a caller policy (subdomains, allow-list, deny-list, protocol).
    COUNT: Not enough characters of a required class.
    RANGE: A number or date field is out of bounds.
    UNSUPPORTED: The options themselves cannot be honored (unknown date format, no protocols).
    TYPE: Value cannot be coerced to the expected type.
    """

    REQUIRED = "required"
    LENGTH = "length"
    FORMAT = "format"
    COMPOSITION = "composition"
    POLICY = "policy"
    COUNT = "count"
    RANGE = "range"
    UNSUPPORTED = "unsupported"
    TYPE = "type"


class ValidationFailed(ValueError):
    """Raised when a failed outcome is unwrapped.

    Subclasses ValueError so it can be raised from pydantic validators directly.
    """

    def __init__(self, reason: str = "Validation failed", kind: FailureKind = FailureKind.FORMAT):
        super().__init__(reason)
        self.reason = reason
        self.kind = kind


__all__ = ["FailureKind", "ValidationFailed"]
