import numpy as np
from typing import Tuple, cast

from ..types.format_type import FormatType, max_non_hue, default_format_dtypes
from ..types.color_types import ColorSpace, ScalarVector, SUPPORTED_SPACES, element_to_array, is_hue_space

from .to_hsv import np_unit_rgb_to_hsv


def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = color * maxval
        return np.round(scaled).astype(default_format_dtypes[fmt]) if fmt == FormatType.INT else scaled

    if space == "hsb":
        h = color[..., 0]
        a = color[..., 1] * maxval
        b = color[..., 2] * maxval

        if fmt == FormatType.INT:
            return np.stack([np.round(h), np.round(a), np.round(b)], axis=-1).astype(default_format_dtypes[fmt])

        return np.stack([h, a, b], axis=-1)

    raise ValueError(f"Unknown space: {space}")

def scale_alpha(alpha: np.ndarray, output_fmt: FormatType) -> np.ndarray:
    result = alpha * max_non_hue[output_fmt]
    return np.round(result).astype(default_format_dtypes[output_fmt]) if output_fmt == FormatType.INT else result

def _convert_core(
    rgba: np.ndarray,
    to_space: str,
    output_fmt: FormatType,
) -> np.ndarray:
    if to_space not in SUPPORTED_SPACES:
        raise ValueError(f"Unknown space: {to_space}")
    if rgba.shape[-1] != 4:
        raise ValueError(f"Expected last dimension to be 4 (RGBA), got shape {rgba.shape}")

    base = rgba[..., :3]
    alpha = rgba[..., 3]
    ts = to_space[:3]

    if is_hue_space(ts):
        converted = np_unit_rgb_to_hsv(base[..., 0], base[..., 1], base[..., 2])
    else:
        converted = base

    out = scale(converted, ts, output_fmt)

    if to_space.endswith("a"):
        new_alpha = scale_alpha(alpha, output_fmt)
        return np.concatenate([out, np.asarray(new_alpha)[..., None]], axis=-1)

    return out


def convert(
    rgba: ScalarVector,
    to_space: ColorSpace = "rgba",
    output_type: FormatType = FormatType.FLOAT,
) -> Tuple:
    """
    Express a unit RGBA tuple in another space and format.

    Args:
        rgba: (r, g, b, a) unit floats
        to_space: "rgb", "rgba", "hsb" or "hsba"
        output_type: INT (0-255), FLOAT (0-1) or PERCENTAGE (0-100); hue
            stays in degrees

    Returns:
        Tuple of python numbers
    """
    result = _convert_core(
        element_to_array(rgba),
        to_space.lower(),
        FormatType(output_type),
    )
    return tuple(cast(list, result.tolist()))

def np_convert(
    rgba: np.ndarray,
    to_space: ColorSpace = "rgba",
    output_type: FormatType = FormatType.FLOAT,
) -> np.ndarray:
    return _convert_core(
        np.asarray(rgba, dtype=float),
        to_space.lower(),
        FormatType(output_type),
    )
