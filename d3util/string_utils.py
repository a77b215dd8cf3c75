"""Small string helpers."""

from __future__ import annotations

import string
import time
from typing import Iterable

_C_WHITESPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends."""
    return text.strip(_C_WHITESPACE)


def trim_left(text: str) -> str:
    """Strip ASCII whitespace from the start."""
    return text.lstrip(_C_WHITESPACE)


def trim_right(text: str) -> str:
    """Strip ASCII whitespace from the end."""
    return text.rstrip(_C_WHITESPACE)


def split(text: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter; a trailing empty field is dropped."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def join(strings: Iterable[str], delimiter: str) -> str:
    return delimiter.join(strings)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters only."""
    return text.translate(_TO_UPPER)


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    return text.endswith(suffix)


def replace(text: str, old: str, new: str) -> str:
    """Replace every occurrence of a non-empty substring."""
    if not old:
        raise ValueError("substring to replace must not be empty")
    return text.replace(old, new)


def current_time_string(fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    """Format the current local time with a strftime pattern."""
    return time.strftime(fmt, time.localtime())


def to_hex(value: int, byte_width: int = 4) -> str:
    """Hex digits of a value taken as a 32-bit int, zero-padded to two digits per byte."""
    if byte_width < 1:
        raise ValueError("byte_width must be positive")
    return format(value & 0xFFFFFFFF, f"0{byte_width * 2}x")