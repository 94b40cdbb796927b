"""Numeric value validation."""

import logging
import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict

from isitvalid.shared.exceptions import FailureKind
from isitvalid.shared.outcome import Failure, Outcome, Success, fail
from isitvalid.shared.patterns import resolve_options

logger = logging.getLogger(__name__)

# Whole-string decimal literal: sign, digits with optional fraction, optional exponent
_NUMBER_TEXT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class NumberOptions(BaseModel):
    """Options for number validation. Unset bounds are unbounded."""

    model_config = ConfigDict(frozen=True)

    min: int | float | None = None
    max: int | float | None = None
    decimal_places: int | None = None


def parse_number(value: str) -> int | float | None:
    """Strictly parse ``value`` as a decimal number.

    Surrounding whitespace is ignored; anything else that is not part of the
    literal (trailing text, "inf", "nan", hex, underscores) makes it invalid.

    Returns:
        An int for integral literals, a float otherwise, or None if invalid

    """
    text = value.strip()
    if not _NUMBER_TEXT.fullmatch(text):
        return None
    if any(marker in text for marker in ".eE"):
        return float(text)
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's int-to-text digit limit
        return None


def describe(value: Any, limit: int = 40) -> str:
    """Render ``value`` for a failure reason, shortened to ``limit`` characters.

    Huge integers cannot always be converted to text, so they are described
    by their digit count instead.
    """
    try:
        text = repr(value)
    except ValueError:
        return f"an integer of about {int(math.log10(abs(value))) + 1} digits"
    if len(text) > limit:
        return f"{text[: limit - 3]}..."
    return text


def count_decimal_places(value: int | float) -> int:
    """Count fractional digits in the shortest decimal representation of ``value``.

    Works on the decimal string, not on floating point arithmetic, so 3.2449
    has exactly 4 places and 1e-07 has 7.
    """
    if isinstance(value, int) or not math.isfinite(value):
        return 0
    text = format(Decimal(repr(value)), "f")
    _, _, fraction = text.partition(".")
    return len(fraction.rstrip("0"))


def _coerce(value: Any) -> int | float | Failure:
    if isinstance(value, bool):
        return fail(FailureKind.TYPE, f"Expected a number, got boolean {value!r}", logger)
    if isinstance(value, str):
        number = parse_number(value)
        if number is None:
            return fail(FailureKind.TYPE, f"Value {describe(value)} is not a valid number", logger)
        return number
    if isinstance(value, int | float):
        return value
    return fail(FailureKind.TYPE, f"Expected a number, got {type(value).__name__}", logger)


def validate_number(
    value: int | float | str, options: NumberOptions | Mapping[str, Any] | None = None
) -> Outcome[int | float]:
    """Validate a number or numeric string.

    Args:
        value: Number, or text holding a decimal literal
        options: NumberOptions, a mapping of its fields, or None for defaults

    Returns:
        Success with the numeric value, or Failure with the reason

    Examples:
        >>> validate_number(3.2449, {"min": 1, "max": 5, "decimal_places": 4}).value
        3.2449
        >>> validate_number("12abc").reason
        "Value '12abc' is not a valid number"

    """
    opts = resolve_options(options, NumberOptions)

    number = _coerce(value)
    if isinstance(number, Failure):
        return number
    if isinstance(number, float) and math.isnan(number):
        return fail(FailureKind.TYPE, "Value is not a number (NaN)", logger)

    if opts.min is not None and number < opts.min:
        return fail(FailureKind.RANGE, f"Value must be at least {describe(opts.min)}, got {describe(number)}", logger)
    if opts.max is not None and number > opts.max:
        return fail(FailureKind.RANGE, f"Value must be at most {describe(opts.max)}, got {describe(number)}", logger)

    if opts.decimal_places is not None:
        places = count_decimal_places(number)
        if places > opts.decimal_places:
            return fail(
                FailureKind.FORMAT,
                f"Value must have at most {opts.decimal_places} decimal place(s), got {places}",
                logger,
            )

    return Success(value=number)


def is_valid_number(value: int | float | str, options: NumberOptions | Mapping[str, Any] | None = None) -> bool:
    """Boolean projection of validate_number."""
    return validate_number(value, options).to_bool()


__all__ = ["NumberOptions", "count_decimal_places", "describe", "is_valid_number", "parse_number", "validate_number"]
