from rainbow_creator.colors import ColorRGBA
from rainbow_creator.types import FormatType
from boundednumbers import BoundType
import pytest

def test_defaults_to_opaque():
    color = ColorRGBA(0.2, 0.4, 0.6)
    assert color.value == (0.2, 0.4, 0.6, 1.0)
    assert color.alpha == 1.0

def test_channel_properties():
    color = ColorRGBA(0.1, 0.2, 0.3, 0.4)
    assert color.red == 0.1
    assert color.green == 0.2
    assert color.blue == 0.3
    assert color.alpha == 0.4
    assert color.rgb == (0.1, 0.2, 0.3)
    assert tuple(color) == (0.1, 0.2, 0.3, 0.4)
    assert len(color) == 4

def test_channels_are_floats():
    color = ColorRGBA(1, 0, 0, 1)
    assert all(type(c) is float for c in color)

def test_no_clamping_on_construction():
    color = ColorRGBA(1.5, -0.25, 0.0, 2.0)
    assert color.value == (1.5, -0.25, 0.0, 2.0)

def test_immutable():
    color = ColorRGBA(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color._value = (0.0, 0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        color.red = 0.5  # type: ignore[misc]
    assert color.value == (0.1, 0.2, 0.3, 1.0)

def test_equality_and_hash():
    a = ColorRGBA(0.1, 0.2, 0.3, 0.5)
    b = ColorRGBA(0.1, 0.2, 0.3, 0.5)
    c = ColorRGBA(0.1, 0.2, 0.3, 1.0)
    assert a == b
    assert a != c
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 2
    assert a != (0.1, 0.2, 0.3, 0.5)

def test_repr():
    assert repr(ColorRGBA(1.0, 0.0, 0.0)) == "ColorRGBA(red=1.0, green=0.0, blue=0.0, alpha=1.0)"

def test_rgb_ints():
    assert ColorRGBA(1.0, 0.5, 0.0).rgb_ints == (255, 128, 0)
    assert ColorRGBA(0.2, 0.4, 0.6).rgb_ints == (51, 102, 153)

def test_with_alpha():
    color = ColorRGBA(0.1, 0.2, 0.3)
    faded = color.with_alpha(0.25)
    assert faded.value == (0.1, 0.2, 0.3, 0.25)
    assert color.alpha == 1.0
    assert isinstance(faded, ColorRGBA)

def test_bounded_clamps_every_channel():
    color = ColorRGBA(1.5, -0.25, 0.5, 2.0)
    assert color.bounded().value == pytest.approx((1.0, 0.0, 0.5, 1.0))
    assert color.bounded(BoundType.CLAMP).value == pytest.approx((1.0, 0.0, 0.5, 1.0))

def test_bounded_ignore_returns_same_color():
    color = ColorRGBA(1.5, -0.25, 0.5, 2.0)
    assert color.bounded(BoundType.IGNORE) is color

def test_convert_defaults_to_float_rgba():
    color = ColorRGBA(1.0, 0.5, 0.0, 0.5)
    assert color.convert() == (1.0, 0.5, 0.0, 0.5)

def test_convert_to_hsb_percentages():
    color = ColorRGBA(1.0, 0.5, 0.0)
    assert color.convert("hsb", FormatType.PERCENTAGE) == pytest.approx((30.0, 100.0, 100.0))
    assert color.convert("HSBA", FormatType.INT) == (30, 255, 255, 255)

def test_convert_defaults_to_own_mode():
    color = ColorRGBA(0.0, 0.0, 1.0, 0.5)
    assert ColorRGBA.mode == "rgba"
    assert color.convert(to_format=FormatType.INT) == (0, 0, 255, 128)
