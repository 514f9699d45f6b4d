"""
HSB (HSV) to unit RGB conversions.

Hue, saturation and brightness are all given as unit fractions. A fraction
below 0 is treated as 0 and one above 1 as 1, which makes a hue of 1.0 land on
the same red as a hue of 0.0. A NaN in any component gives NaN in every
channel.
"""
import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert a unit HSV triple to nonlinear unit RGB.

    Args:
        h: Hue as a fraction of a full turn
        s: Saturation in [0, 1]
        v: Value (brightness) in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if math.isnan(h) or math.isnan(s) or math.isnan(v):
        return math.nan, math.nan, math.nan
    h, s, v = _clamp01(h), _clamp01(s), _clamp01(v)

    chroma = v * s
    h6 = (h * 6.0) % 6.0
    x = chroma * (1.0 - abs(h6 % 2.0 - 1.0))
    m = v - chroma

    sector = int(h6)
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert unit HSV to nonlinear unit RGB.

    Args:
        h, s, v: array-like or scalar unit fractions

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.clip(np.broadcast_to(h, out_shape), 0.0, 1.0)
    s = np.clip(np.broadcast_to(s, out_shape), 0.0, 1.0)
    v = np.clip(np.broadcast_to(v, out_shape), 0.0, 1.0)
    nan_mask = np.isnan(h) | np.isnan(s) | np.isnan(v)
    h = np.where(nan_mask, 0.0, h)

    chroma = v * s
    h6 = (h * 6.0) % 6.0
    x = chroma * (1.0 - np.abs(h6 % 2.0 - 1.0))
    m = v - chroma
    zero = np.zeros(out_shape)

    sector = np.floor(h6).astype(int)
    conditions = [sector == i for i in range(6)]

    r = np.select(conditions, [chroma, x, zero, zero, x, chroma])
    g = np.select(conditions, [x, chroma, chroma, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, chroma, chroma, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1)
    return np.where(nan_mask[..., None], np.nan, rgb)
