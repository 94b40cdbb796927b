"""Helpers for building matchers from caller-supplied token sets.

Option strings are interpolated into patterns at call time, so regex
metacharacters are always escaped first. Nothing here is cached.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

# - / \ ^ $ * + ? . ( ) | [ ] { }
M = TypeVar("M", bound=BaseModel)

_METACHARACTERS = re.compile(r"[-/\\^$*+?.()|\[\]{}]")


def escape_metacharacters(tokens: str) -> str:
    """Backslash-escape regex metacharacters in ``tokens``.

    Args:
        tokens: Raw characters supplied by the caller

    Returns:
        The same characters, safe to place in a pattern or character class

    Examples:
        >>> escape_metacharacters("#$-")
        '#\\\\$\\\\-'

    """
    return _METACHARACTERS.sub(lambda match: "\\" + match.group(0), tokens)


def compile_character_class(chars: str) -> re.Pattern[str] | None:
    """Compile a character class matching any one of ``chars``.

    Returns None for an empty set, since ``[]`` is not a valid class.
    """
    if not chars:
        return None
    return re.compile(f"[{escape_metacharacters(chars)}]")


def compile_prefix_alternation(words: Iterable[str], suffix: str = "") -> re.Pattern[str]:
    """Compile a case-insensitive pattern matching any of ``words`` at the start of a string."""
    alternation = "|".join(escape_metacharacters(word) for word in words)
    return re.compile(f"^(?:{alternation}){escape_metacharacters(suffix)}", re.IGNORECASE)


def resolve_options(options: M | Mapping[str, Any] | None, model: type[M]) -> M:
    """Turn caller options into a validated options model.

    Args:
        options: An options model, a plain mapping of its fields, or None for defaults
        model: The options model class

    Returns:
        An instance of ``model``

    Raises:
        pydantic.ValidationError: If a mapping has fields of the wrong type.

    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    return model.model_validate(options)


__all__ = [
    "compile_character_class",
    "compile_prefix_alternation",
    "escape_metacharacters",
    "resolve_options",
]
