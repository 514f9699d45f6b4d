"""
Rainbow Creator Color Type
==========================

``ColorRGBA`` is an immutable RGBA value with unit float channels. It carries
no GUI binding; adapters to a toolkit's own color type live outside this
package.

Usage
-----
>>> from rainbow_creator.colors import ColorRGBA
>>> from rainbow_creator.types import FormatType
>>> orange = ColorRGBA(1.0, 0.5, 0.0)
>>> orange.alpha
1.0
>>> orange.rgb_ints
(255, 128, 0)
>>> orange.convert("hsb", FormatType.PERCENTAGE)
(30.0, 100.0, 100.0)
>>> orange.with_alpha(0.25).value
(1.0, 0.5, 0.0, 0.25)

Notes
-----
- Channels are not clamped on construction; ``bounded()`` clamps on request
- ``convert`` and ``bounded`` are attached in ``color.py``
"""

from .color_base import ColorRGBA
from .color import color_convert, bounded


__all__ = ['ColorRGBA', 'color_convert', 'bounded']
