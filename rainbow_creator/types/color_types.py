from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
AlphaValue = Union[Scalar, ndarray]
ColorSpace = Literal["rgb", "rgba", "hsb", "hsba"]
HUE_SPACES = {"hsb", "hsba"}
SUPPORTED_SPACES = {"rgb", "rgba", "hsb", "hsba"}

def element_to_array(element: Union[Scalar, ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)

def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is hue-based (HSB).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
