import pytest

from chromokinesis.core.space import ColorParseError, UniformColor, format_color, to_uniform_space


class TestToUniformSpace:
    def test_hex_red(self):
        red = to_uniform_space("#ff0000")
        assert isinstance(red, UniformColor)
        assert red.l == pytest.approx(0.628, abs=1e-3)
        assert red.c == pytest.approx(0.258, abs=1e-3)
        assert not red.achromatic

    def test_notations_agree(self):
        expected = to_uniform_space("#ff0000")
        for text in ["red", "rgb(255, 0, 0)", "hsl(0, 100%, 50%)", "hwb(0 0% 0%)"]:
            got = to_uniform_space(text)
            assert tuple(got) == pytest.approx(tuple(expected), abs=1e-6)

    def test_oklch_input_is_kept_verbatim(self):
        assert to_uniform_space("oklch(0.9 0.4 140)") == UniformColor(0.9, 0.4, 140.0)

    def test_gray_is_achromatic(self):
        assert to_uniform_space("#808080").achromatic

    def test_parse_failure(self):
        with pytest.raises(ColorParseError) as excinfo:
            to_uniform_space("definitely-not-a-color")
        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.value == "definitely-not-a-color"
        assert "definitely-not-a-color" in str(excinfo.value)


class TestFormatColor:
    @pytest.mark.parametrize(
        "hex_code",
        ["#ff0000", "#00ff00", "#0000ff", "#123456", "#abcdef", "#000000", "#ffffff", "#808080"],
    )
    def test_hex_round_trip(self, hex_code):
        assert format_color(to_uniform_space(hex_code), "hex") == hex_code

    def test_hex_is_lowercase(self):
        assert format_color(to_uniform_space("#ABCDEF"), "hex") == "#abcdef"

    def test_rgb(self):
        assert format_color(to_uniform_space("#ff0000"), "rgb") == "rgb(255, 0, 0)"
        assert format_color(to_uniform_space("#102030"), "rgb") == "rgb(16, 32, 48)"

    def test_hsl(self):
        assert format_color(to_uniform_space("#ff0000"), "hsl") == "hsl(0, 100%, 50%)"
        assert format_color(to_uniform_space("#ffffff"), "hsl") == "hsl(0, 0%, 100%)"
        assert format_color(to_uniform_space("#000000"), "hsl") == "hsl(0, 0%, 0%)"

    def test_hsl_round_trip_within_precision(self):
        text = format_color(to_uniform_space("#336699"), "hsl")
        assert text == "hsl(210, 50%, 40%)"
        assert format_color(to_uniform_space(text), "hex") == "#336699"

    def test_out_of_gamut_is_clipped(self):
        value = format_color(UniformColor(0.7, 0.5, 150.0), "hex")
        assert value.startswith("#") and len(value) == 7

    @pytest.mark.parametrize("mode", ["hex", "rgb", "hsl"])
    def test_degenerate_is_none(self, mode):
        assert format_color(UniformColor(float("nan"), 0.0, 0.0), mode) is None
        assert format_color(UniformColor(0.5, float("inf"), 10.0), mode) is None

    @pytest.mark.parametrize("mode", ["hex", "rgb", "hsl"])
    def test_overflowing_chroma_is_none(self, mode):
        assert format_color(to_uniform_space("oklch(0.5 1e200 0)"), mode) is None

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            format_color(UniformColor(0.5, 0.0, 0.0), "lab")
