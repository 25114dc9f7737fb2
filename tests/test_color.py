"""Tests for color resolution and normalization."""

import numpy as np
import pytest

from symbolshader.color import (
    ChannelColor,
    TextColor,
    normalize_color,
    parse_color,
    resolve_color,
)
from symbolshader.errors import ColorParseError, InvalidParameterError


class TestParseColor:
    """Tests for text colors resolved through Pillow."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("red", (255, 0, 0, 1)),
            ("white", (255, 255, 255, 1)),
            ("#00ff00", (0, 255, 0, 1)),
            ("rgb(10, 20, 30)", (10, 20, 30, 1)),
        ],
    )
    def test_opaque_colors(self, text, expected):
        assert parse_color(text) == expected

    def test_alpha_is_rescaled(self):
        r, g, b, a = parse_color("#ff000080")
        assert (r, g, b) == (255, 0, 0)
        assert a == pytest.approx(128 / 255)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("rgba(255, 0, 0, 1)", (255, 0, 0, 1.0)),
            ("rgba(255, 0, 0, 0.5)", (255, 0, 0, 0.5)),
            ("RGBA(0, 128, 255, .25)", (0, 128, 255, 0.25)),
            ("rgba(10, 20, 30, 0)", (10, 20, 30, 0.0)),
            ("hsla(0, 100%, 50%, 0.75)", (255, 0, 0, 0.75)),
            ("#ff0000ff", (255, 0, 0, 1.0)),
            ("#00000000", (0, 0, 0, 0.0)),
        ],
    )
    def test_alpha_uses_unit_range(self, text, expected):
        """Functional alpha is already 0-1; only hex alpha is rescaled."""
        assert parse_color(text) == expected

    @pytest.mark.parametrize("text", ["rgba(255, 0, 0, 0.5, 1)", "rgba(red, 0.5)"])
    def test_malformed_alpha_color(self, text):
        with pytest.raises(ColorParseError):
            parse_color(text)

    def test_unknown_color(self):
        with pytest.raises(ColorParseError) as excinfo:
            parse_color("not-a-color")
        assert excinfo.value.text == "not-a-color"
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestResolveColor:
    """Tests for the accepted color input forms."""

    def test_default_is_opaque_white(self):
        assert resolve_color(None) == (255, 255, 255, 1)

    def test_text_forms_agree(self):
        assert resolve_color("blue") == resolve_color(TextColor("blue"))

    def test_channel_color(self):
        assert resolve_color(ChannelColor(1, 2, 3, 0.5)) == (1, 2, 3, 0.5)
        assert resolve_color(ChannelColor(1, 2, 3)) == (1, 2, 3, 1)

    def test_sequences_pass_through(self):
        assert resolve_color([255, 0, 128, 0.5]) == (255, 0, 128, 0.5)
        assert resolve_color(np.array([1.0, 2.0, 3.0, 1.0])) == (1.0, 2.0, 3.0, 1.0)

    def test_out_of_range_channels_pass_through(self):
        assert resolve_color((300, -5, 0, 2)) == (300, -5, 0, 2)

    @pytest.mark.parametrize("color", [(255, 0, 0), (1, 2, 3, 4, 5), 42])
    def test_wrong_shape(self, color):
        with pytest.raises(InvalidParameterError):
            resolve_color(color)

    def test_non_numeric_channels(self):
        with pytest.raises(InvalidParameterError, match="must be numbers"):
            resolve_color(("255", "0", "0", "1"))


class TestNormalizeColor:
    """Tests for channel normalization."""

    def test_rgb_divided_alpha_kept(self):
        assert normalize_color((255, 0, 128, 0.5)) == (1.0, 0.0, 128 / 255, 0.5)

    def test_values_are_not_clamped(self):
        assert normalize_color((510, 0, 0, 2)) == (2.0, 0.0, 0.0, 2.0)

    def test_returns_python_floats(self):
        assert all(type(c) is float for c in normalize_color((1, 2, 3, 1)))
