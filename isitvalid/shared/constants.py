"""Default patterns and token sets shared by the validators."""

import re

EMAIL_VALIDATION_PATTERN: re.Pattern[str] = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*\Z"
)

# Baseline scheme allow-list for URLs, in display order
PROTOCOLS: tuple[str, ...] = (
    "http",
    "https",
    "ftp",
    "ftps",
    "mailto",
    "file",
    "data",
    "tel",
    "sms",
    "ws",
    "wss",
)

DEFAULT_SPECIAL_CHARS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?`~"


__all__ = ["DEFAULT_SPECIAL_CHARS", "EMAIL_VALIDATION_PATTERN", "PROTOCOLS"]
