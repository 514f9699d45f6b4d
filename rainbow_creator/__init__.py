"""
Rainbow Creator - Color Construction Helpers
============================================

Build plain RGBA color values from the notations people actually write
colors in, without any GUI toolkit attached.

Key Features
------------
- RGB from 0-255 integers or 0.0-1.0 floats
- RGB from a 24-bit hex integer or a ``"#RRGGBB"`` string
- HSB from hue degrees and saturation/brightness percentages
- Optional opacity on every constructor
- Vectorized numpy variants for batches of colors
- Immutable color instances for safe sharing

Quick Start
-----------
>>> from rainbow_creator import from_hex_string, from_hsb, from_rgb_ints
>>>
>>> red = from_rgb_ints(255, 0, 0)
>>> red.value
(1.0, 0.0, 0.0, 1.0)
>>>
>>> green = from_hex_string("#00FF00", alpha=0.5)
>>> green.rgb_ints
(0, 255, 0)
>>>
>>> # Invalid hex strings fall back to black
>>> from_hex_string("ZZZZZZ").rgb
(0.0, 0.0, 0.0)
>>>
>>> from_hsb(0, 100, 100).rgb
(1.0, 0.0, 0.0)
"""

from .colors.color_base import ColorRGBA
from .colors.color import color_convert, bounded
from .factory import (
    from_rgb_ints,
    from_rgb_floats,
    from_hex_int,
    from_hex_string,
    from_hsb,
    np_from_rgb_ints,
    np_from_hex_ints,
    np_from_hex_strings,
    np_from_hsb,
)
from .conversions import (
    hex_int_to_rgb_ints,
    np_hex_int_to_rgb_ints,
    parse_hex_string,
    np_parse_hex_strings,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    convert,
    np_convert,
)
from .types.format_type import FormatType

__all__ = [
    # core color type
    "ColorRGBA",
    "color_convert",
    "bounded",
    "FormatType",
    # factory
    "from_rgb_ints",
    "from_rgb_floats",
    "from_hex_int",
    "from_hex_string",
    "from_hsb",
    "np_from_rgb_ints",
    "np_from_hex_ints",
    "np_from_hex_strings",
    "np_from_hsb",
    # conversions
    "hex_int_to_rgb_ints",
    "np_hex_int_to_rgb_ints",
    "parse_hex_string",
    "np_parse_hex_strings",
    "hsv_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "unit_rgb_to_hsv",
    "np_unit_rgb_to_hsv",
    "convert",
    "np_convert",
]
