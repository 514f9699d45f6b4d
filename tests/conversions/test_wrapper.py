from rainbow_creator.conversions import convert, np_convert, FormatType
import numpy as np
import pytest

def test_convert_returns_tuple_of_python_numbers():
    result = convert((1.0, 0.5, 0.0, 1.0), "rgb", FormatType.INT)
    assert result == (255, 128, 0)
    assert all(type(c) is int for c in result)

def test_convert_rgba_keeps_alpha():
    assert convert((1.0, 0.0, 0.0, 0.5), "rgba", FormatType.INT) == (255, 0, 0, 128)
    assert convert((1.0, 0.0, 0.0, 0.5), "rgba", FormatType.PERCENTAGE) == pytest.approx((100.0, 0.0, 0.0, 50.0))
    assert convert((1.0, 0.0, 0.0, 0.5), "RGBA", FormatType.FLOAT) == (1.0, 0.0, 0.0, 0.5)

def test_convert_to_hsb():
    assert convert((1.0, 0.5, 0.0, 1.0), "hsb", FormatType.PERCENTAGE) == pytest.approx((30.0, 100.0, 100.0))
    assert convert((0.0, 0.0, 1.0, 0.25), "hsba", FormatType.FLOAT) == pytest.approx((240.0, 1.0, 1.0, 0.25))
    assert convert((0.4, 0.6, 0.8, 1.0), "hsb", FormatType.INT) == (210, 128, 204)

def test_convert_accepts_format_strings():
    assert convert((1.0, 1.0, 1.0, 1.0), "rgb", "int") == (255, 255, 255)

def test_unknown_space_raises():
    with pytest.raises(ValueError, match="Unknown space"):
        convert((1.0, 0.0, 0.0, 1.0), "hsl")

def test_np_convert():
    colors = np.array([[1.0, 0.0, 0.0, 1.0], [0.0, 1.0, 0.0, 0.5]])
    result = np_convert(colors, "hsba", FormatType.FLOAT)
    assert result.shape == (2, 4)
    assert np.allclose(result, [[0.0, 1.0, 1.0, 1.0], [120.0, 1.0, 1.0, 0.5]])

def test_np_convert_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 3)), "rgb")
