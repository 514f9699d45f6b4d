"""
Color factory: build ``ColorRGBA`` values from common color notations.

Every constructor is a pure function. None of them clamp their input: integer
channels outside 0-255 give unit channels outside ``[0, 1]``, and alpha is
passed through as given. The one validated input is the hex string, which
falls back to black when it cannot be parsed (see ``from_hex_string``).

The ``np_`` variants take batches and return float arrays of shape
``(..., 4)`` in RGBA order.
"""
from __future__ import annotations
from typing import Iterable, Union

import numpy as np
from numpy import ndarray as NDArray

from .colors import ColorRGBA
from .conversions import (
    hex_int_to_rgb_ints,
    hsv_to_unit_rgb,
    np_hex_int_to_rgb_ints,
    np_hsv_to_unit_rgb,
    np_parse_hex_strings,
    parse_hex_string,
)
from .types.format_type import ALPHA_OPAQUE, FormatType, HUE_360, max_non_hue
from .types.color_types import AlphaValue, Scalar

_RGB_MAX = max_non_hue[FormatType.INT]
_PERCENT_MAX = max_non_hue[FormatType.PERCENTAGE]


def from_rgb_ints(red: int, green: int, blue: int, alpha: Scalar = ALPHA_OPAQUE) -> ColorRGBA:
    """
    Build a color from 0-255 channel values.

    Args:
        red, green, blue: channel values, nominally 0-255
        alpha: opacity between 0.0 and 1.0

    Returns:
        ColorRGBA with each channel divided by 255
    """
    return ColorRGBA(red / _RGB_MAX, green / _RGB_MAX, blue / _RGB_MAX, alpha)


def from_rgb_floats(red: float, green: float, blue: float) -> ColorRGBA:
    """Build an opaque color from unit channel values."""
    return ColorRGBA(red, green, blue, ALPHA_OPAQUE)


def from_hex_int(hex_value: int, alpha: Scalar = ALPHA_OPAQUE) -> ColorRGBA:
    """
    Build a color from a 24-bit ``0xRRGGBB`` integer.

    Bits above the low 24 are ignored.
    """
    red, green, blue = hex_int_to_rgb_ints(hex_value)
    return from_rgb_ints(red, green, blue, alpha)


def from_hex_string(hex_string: str, alpha: Scalar = ALPHA_OPAQUE, *, strict: bool = False) -> ColorRGBA:
    """
    Build a color from a ``"#RRGGBB"`` or ``"RRGGBB"`` string.

    Hex digits are case-insensitive. A string that is not 6 or 7 characters
    long, or holds no run of six hex digits, gives black with the requested
    alpha instead of an error.

    Args:
        hex_string: the color string
        alpha: opacity between 0.0 and 1.0
        strict: raise ``ValueError`` for invalid strings instead of
            falling back to black

    Returns:
        ColorRGBA
    """
    return from_hex_int(parse_hex_string(hex_string, strict=strict), alpha)


def from_hsb(
    hue_degrees: Scalar,
    saturation_percent: Scalar,
    brightness_percent: Scalar,
    alpha: Scalar = ALPHA_OPAQUE,
) -> ColorRGBA:
    """
    Build a color from hue, saturation and brightness.

    No bounds checking happens here; out-of-range fractions are treated as
    the nearest bound by the HSB transform.

    Args:
        hue_degrees: hue, 0-359
        saturation_percent: saturation, 0-100
        brightness_percent: brightness, 0-100
        alpha: opacity between 0.0 and 1.0
    """
    red, green, blue = hsv_to_unit_rgb(
        hue_degrees / HUE_360,
        saturation_percent / _PERCENT_MAX,
        brightness_percent / _PERCENT_MAX,
    )
    return ColorRGBA(red, green, blue, alpha)


# ------------------ VECTORIZED ------------------

def _append_alpha(rgb: NDArray, alpha: AlphaValue) -> NDArray:
    alpha_array = np.broadcast_to(np.asarray(alpha, dtype=float), rgb.shape[:-1])
    return np.concatenate([rgb, alpha_array[..., None]], axis=-1)


def _check_channels(arr: NDArray, name: str) -> None:
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"{name} expects last dimension to be 3, got shape {arr.shape}")


def np_from_rgb_ints(rgb: Union[NDArray, Iterable], alpha: AlphaValue = ALPHA_OPAQUE) -> NDArray:
    """
    Vectorized ``from_rgb_ints``.

    Args:
        rgb: array-like of shape (..., 3) with 0-255 channels
        alpha: scalar or array broadcastable to ``rgb.shape[:-1]``

    Returns:
        float array of shape (..., 4)
    """
    arr = np.asarray(rgb, dtype=float)
    _check_channels(arr, "np_from_rgb_ints")
    return _append_alpha(arr / _RGB_MAX, alpha)


def np_from_hex_ints(hex_values: Union[NDArray, Iterable[int]], alpha: AlphaValue = ALPHA_OPAQUE) -> NDArray:
    """Vectorized ``from_hex_int``; output shape is ``hex_values.shape + (4,)``."""
    return np_from_rgb_ints(np_hex_int_to_rgb_ints(hex_values), alpha)


def np_from_hex_strings(
    hex_strings: Union[NDArray, Iterable[str]],
    alpha: AlphaValue = ALPHA_OPAQUE,
    *,
    strict: bool = False,
) -> NDArray:
    """Vectorized ``from_hex_string``; invalid strings become black unless ``strict``."""
    return np_from_hex_ints(np_parse_hex_strings(hex_strings, strict=strict), alpha)


def np_from_hsb(hsb: Union[NDArray, Iterable], alpha: AlphaValue = ALPHA_OPAQUE) -> NDArray:
    """
    Vectorized ``from_hsb``.

    Args:
        hsb: array-like of shape (..., 3): hue degrees, saturation %, brightness %
        alpha: scalar or array broadcastable to ``hsb.shape[:-1]``
    """
    arr = np.asarray(hsb, dtype=float)
    _check_channels(arr, "np_from_hsb")
    rgb = np_hsv_to_unit_rgb(
        arr[..., 0] / HUE_360,
        arr[..., 1] / _PERCENT_MAX,
        arr[..., 2] / _PERCENT_MAX,
    )
    return _append_alpha(rgb, alpha)


ColorRGBA.from_rgb_ints = staticmethod(from_rgb_ints)
ColorRGBA.from_rgb_floats = staticmethod(from_rgb_floats)
ColorRGBA.from_hex_int = staticmethod(from_hex_int)
ColorRGBA.from_hex_string = staticmethod(from_hex_string)
ColorRGBA.from_hsb = staticmethod(from_hsb)
