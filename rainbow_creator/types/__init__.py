from .format_type import FormatType, max_non_hue, HUE_360, ALPHA_OPAQUE, HEX_24BIT_MAX
from .color_types import ColorSpace, RGBTuple, RGBATuple, is_hue_space

__all__ = [
    "FormatType",
    "max_non_hue",
    "HUE_360",
    "ALPHA_OPAQUE",
    "HEX_24BIT_MAX",
    "ColorSpace",
    "RGBTuple",
    "RGBATuple",
    "is_hue_space",
]
