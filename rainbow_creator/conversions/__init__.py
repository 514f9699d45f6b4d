"""
Rainbow Creator Conversions
===========================

Pure converters behind the color factory, each with a scalar and a
vectorized (numpy) implementation.

Hex:
    hex_int_to_rgb_ints(hex_value) / np_hex_int_to_rgb_ints(hex_values)
        24-bit integer -> (red, green, blue) bytes
    parse_hex_string(hex_string, strict=False) / np_parse_hex_strings(...)
        "#RRGGBB" / "RRGGBB" -> 24-bit integer, 0 on invalid input unless strict

HSB → RGB:
    hsv_to_unit_rgb(h, s, v) / np_hsv_to_unit_rgb(h, s, v)
        unit fractions in, unit RGB out

RGB → HSB:
    unit_rgb_to_hsv(r, g, b) / np_unit_rgb_to_hsv(r, g, b)
        unit RGB in, (hue degrees, saturation, brightness) out

High-Level API
--------------
    convert(rgba, to_space, output_type) / np_convert(...)
        Express unit RGBA in rgb/rgba/hsb/hsba with INT, FLOAT or PERCENTAGE scaling

Examples
--------
>>> from rainbow_creator.conversions import hsv_to_unit_rgb, parse_hex_string
>>> hsv_to_unit_rgb(0.0, 1.0, 1.0)
(1.0, 0.0, 0.0)
>>> hex(parse_hex_string("#00ff00"))
'0xff00'
"""

from .hex_codes import (
    HEX_COLOR_PATTERN,
    hex_int_to_rgb_ints,
    np_hex_int_to_rgb_ints,
    parse_hex_string,
    np_parse_hex_strings,
)
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .wrapper import convert, np_convert

from ..types.format_type import FormatType

__all__ = [
    # Hex
    'HEX_COLOR_PATTERN',
    'hex_int_to_rgb_ints',
    'np_hex_int_to_rgb_ints',
    'parse_hex_string',
    'np_parse_hex_strings',

    # HSB → RGB
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # RGB → HSB
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'FormatType',
]
