"""
Hexadecimal color parsing.

A hex color string holds six hexadecimal digits, two per channel in red,
green, blue order, optionally prefixed with ``#``. Parsing is lenient by
default: a string that fails validation parses to ``0`` (black) instead of
raising. Pass ``strict=True`` to get a ``ValueError`` for those strings.
"""
import re
from typing import Iterable, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HEX_24BIT_MAX

HEX_COLOR_PATTERN = re.compile(r"#?[0-9A-F]{6}", re.IGNORECASE)
_LEADING_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]*")
_VALID_LENGTHS = (6, 7)


def hex_int_to_rgb_ints(hex_value: int) -> Tuple[int, int, int]:
    """Split an integer into red, green and blue bytes; bits above the low 24 are ignored."""
    red = (hex_value >> 16) & 0xFF
    green = (hex_value >> 8) & 0xFF
    blue = hex_value & 0xFF
    return red, green, blue


def np_hex_int_to_rgb_ints(hex_values: Union[NDArray, Iterable[int]]) -> NDArray:
    """
    Vectorized: Split 24-bit integers into red, green and blue bytes.

    Args:
        hex_values: array-like of integers, any shape

    Returns:
        rgb: int64 array of shape (..., 3)
    """
    # mask as python ints, inputs may not fit in int64
    values = np.asarray(np.asarray(hex_values, dtype=object) & HEX_24BIT_MAX, dtype=np.int64)
    return np.stack(
        [(values >> 16) & 0xFF, (values >> 8) & 0xFF, values & 0xFF],
        axis=-1,
    )


def _reject(hex_string: str, reason: str, strict: bool) -> int:
    if strict:
        raise ValueError(f"Invalid hex color string {hex_string!r}: {reason}")
    return 0x000000


def parse_hex_string(hex_string: str, *, strict: bool = False) -> int:
    """
    Parse a hex color string into a 24-bit integer.

    The string must be 6 or 7 characters long and contain a run of six hex
    digits (optionally preceded by ``#``). A 7 character string has its first
    character dropped, then the leading hex digits of the remainder are read.

    Args:
        hex_string: e.g. ``"#00FF00"`` or ``"00ff00"``
        strict: raise ``ValueError`` instead of returning ``0`` for invalid
            input. In strict mode the whole string must be ``#?`` followed by
            exactly six hex digits.

    Returns:
        The parsed integer, or ``0`` for rejected input when not strict.
    """
    size = len(hex_string)
    if size not in _VALID_LENGTHS:
        return _reject(hex_string, f"expected 6 or 7 characters, got {size}", strict)

    if strict:
        if HEX_COLOR_PATTERN.fullmatch(hex_string) is None:
            return _reject(hex_string, "expected '#' followed by six hex digits", strict)
    elif HEX_COLOR_PATTERN.search(hex_string) is None:
        return _reject(hex_string, "no run of six hex digits", strict)

    working = hex_string[1:] if size == 7 else hex_string
    digits = _LEADING_HEX_DIGITS.match(working).group(0)
    return int(digits, 16) if digits else 0x000000


def _as_text(element):
    if isinstance(element, (bytes, np.bytes_)):
        return bytes(element).decode("ascii", errors="replace")
    return element


def np_parse_hex_strings(hex_strings: Union[NDArray, Iterable[str]], *, strict: bool = False) -> NDArray:
    """
    Vectorized: Parse hex color strings into 24-bit integers.

    Args:
        hex_strings: array-like of strings, any shape
        strict: see ``parse_hex_string``

    Returns:
        int64 array with the same shape as ``hex_strings``
    """
    strings = np.asarray(hex_strings, dtype=object)
    parsed = np.fromiter(
        (parse_hex_string(_as_text(s), strict=strict) for s in strings.ravel()),
        dtype=np.int64,
        count=strings.size,
    )
    return parsed.reshape(strings.shape)
