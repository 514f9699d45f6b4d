from __future__ import annotations
from typing import Tuple
from boundednumbers import BoundType, bound_type_to_np_function
import numpy as np
from .color_base import ColorRGBA
from ..conversions import convert
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace


def color_convert(self: ColorRGBA, to_space: ColorSpace | None = None, to_format: FormatType | None = None) -> Tuple:
    """
    Express this color in another space and/or format.

    Args:
        to_space: Target color space ("rgb", "rgba", "hsb", "hsba"). Defaults to the color's own mode.
        to_format: Target format type (INT, FLOAT, PERCENTAGE). Defaults to FLOAT.

    Returns:
        Tuple of channel values; hue (if any) in degrees
    """
    to_space = to_space or self.mode
    to_format = to_format or self.format_type
    return convert(self.value, to_space.lower(), to_format)  # type: ignore[arg-type]

def bounded(self: ColorRGBA, bound_type: BoundType = BoundType.CLAMP) -> ColorRGBA:
    """
    Return a copy with every channel brought into ``[0, 1]``.

    Args:
        bound_type: How out-of-range channels are handled. ``BoundType.IGNORE``
            returns the color unchanged.
    """
    if bound_type is BoundType.IGNORE:
        return self
    fn = bound_type_to_np_function[bound_type]
    channels = fn(np.asarray(self.value, dtype=float), 0.0, 1.0)
    return self.__class__(*(float(c) for c in channels))

ColorRGBA.convert = color_convert
ColorRGBA.bounded = bounded
