from __future__ import annotations
from typing import Callable, ClassVar, Iterator, Tuple
from ..types.format_type import ALPHA_OPAQUE, FormatType, max_non_hue
from ..types.color_types import ColorSpace, RGBATuple, RGBTuple, Scalar


class ColorRGBA:
    """
    Plain RGBA color value with unit float channels.

    Channels are stored exactly as given: values outside ``[0, 1]`` are kept,
    use ``bounded()`` to bring them back into range.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    convert: Callable[..., Tuple]
    bounded: Callable[..., ColorRGBA]
    from_rgb_ints: Callable[..., ColorRGBA]
    from_rgb_floats: Callable[..., ColorRGBA]
    from_hex_int: Callable[..., ColorRGBA]
    from_hex_string: Callable[..., ColorRGBA]
    from_hsb: Callable[..., ColorRGBA]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = ALPHA_OPAQUE) -> None:
        # safe assignment; __setattr__ still allows it during init
        self._value = (float(red), float(green), float(blue), float(alpha))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBATuple:
        return self._value

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def rgb(self) -> RGBTuple:
        return self._value[:3]

    @property
    def rgb_ints(self) -> Tuple[int, int, int]:
        """Red, green and blue scaled to 0-255 and rounded."""
        maxval = max_non_hue[FormatType.INT]
        r, g, b = (round(c * maxval) for c in self.rgb)
        return r, g, b

    def with_alpha(self, alpha: Scalar) -> ColorRGBA:
        """Return a new color with the same RGB channels and the given alpha."""
        return self.__class__(self.red, self.green, self.blue, alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorRGBA):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(red={r!r}, green={g!r}, blue={b!r}, alpha={a!r})"
