import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert nonlinear unit RGB to HSV.

    Returns:
        (hue [0, 360), saturation [0, 1], value [0, 1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        h = 0.0
    elif max_c == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif max_c == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)

    s = delta / max_c if max_c > 0 else 0.0
    return h, s, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert nonlinear unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    with np.errstate(divide="ignore", invalid="ignore"):
        h = np.where(
            max_c == r,
            ((g - b) / delta) % 6.0,
            np.where(max_c == g, (b - r) / delta + 2.0, (r - g) / delta + 4.0),
        )
        s = np.where(max_c > 0, delta / max_c, 0.0)

    h = np.where(delta == 0, 0.0, h * 60.0)
    return np.stack([h, s, max_c], axis=-1)
