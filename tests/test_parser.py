import argparse

import pytest

from chromokinesis.shared.parser import parse_color_string
from chromokinesis.shared.sanitizer import INPUT_HANDLERS, normalize_hex


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#abc", "AABBCC"),
        ("abc", "AABBCC"),
        ("#abcd", "AABBCC"),
        ("#a1b2c3", "A1B2C3"),
        ("  #11223344 ", "112233"),
        ("#12345", ""),
        ("#1234567", ""),
        ("zzz", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_hex(raw, expected):
    assert normalize_hex(raw) == expected


class TestParseColorString:
    def test_named_color(self):
        assert parse_color_string("red") == ("rgb", (255.0, 0.0, 0.0))
        assert parse_color_string("  RebeccaPurple ") == ("rgb", (102.0, 51.0, 153.0))

    def test_hex(self):
        assert parse_color_string("#00ff00") == ("rgb", (0.0, 255.0, 0.0))

    def test_quoted_value(self):
        assert parse_color_string('"#00ff00"') == ("rgb", (0.0, 255.0, 0.0))

    def test_rgb_legacy_and_modern(self):
        assert parse_color_string("rgb(255, 128, 0)") == ("rgb", (255.0, 128.0, 0.0))
        space, (r, g, b) = parse_color_string("rgb(100% 50% 0% / 0.5)")
        assert space == "rgb"
        assert (r, g, b) == pytest.approx((255.0, 127.5, 0.0))
        assert parse_color_string("rgba(10, 20, 30, 0.4)") == ("rgb", (10.0, 20.0, 30.0))

    def test_hsl(self):
        assert parse_color_string("hsl(120, 100%, 50%)") == ("hsl", (120.0, 1.0, 0.5))
        space, (h, s, l) = parse_color_string("hsl(0.5turn 40% 60%)")
        assert space == "hsl"
        assert (h, s, l) == pytest.approx((180.0, 0.4, 0.6))

    def test_hwb(self):
        assert parse_color_string("hwb(90deg 10% 20%)") == ("hwb", (90.0, 0.1, 0.2))

    def test_oklch(self):
        assert parse_color_string("oklch(0.7 0.1 200)") == ("oklch", (0.7, 0.1, 200.0))
        space, (L, C, h) = parse_color_string("oklch(70% 25% 200deg)")
        assert space == "oklch"
        assert (L, C, h) == pytest.approx((0.7, 0.1, 200.0))

    def test_oklch_none_hue(self):
        assert parse_color_string("oklch(0.5 0 none)") == ("oklch", (0.5, 0.0, 0.0))

    def test_oklab(self):
        assert parse_color_string("oklab(0.5 0.1 -0.1)") == ("oklab", (0.5, 0.1, -0.1))

    @pytest.mark.parametrize(
        "raw",
        [
            "notacolor",
            "",
            "   ",
            "rgb(1, 2)",
            "rgb(1, 2, 3, 4, 5)",
            "rgb(1 2 3 4)",
            "foo(1 2 3)",
            "#12345",
            "hsl(10%, 5%, 5%)",
            "rgb(1px, 2, 3)",
            "oklch(0.5 0.1 1e999)",
            "oklch(0.5 0.1 1e308turn)",
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_color_string(raw)

    def test_non_string(self):
        with pytest.raises(ValueError):
            parse_color_string(123)


class TestInputHandlers:
    @pytest.mark.parametrize("raw", ["0", "101", "-3", "abc", "2.5"])
    def test_count_rejected(self, raw):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["count"](raw)

    def test_count_accepted(self):
        assert INPUT_HANDLERS["count"]("7") == 7
        assert INPUT_HANDLERS["count"]("100") == 100

    @pytest.mark.parametrize("raw", ["0", "1", "-0.2", "1.5", "nan", "inf", "half"])
    def test_mix_rejected(self, raw):
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["mix"](raw)

    def test_mix_accepted(self):
        assert INPUT_HANDLERS["mix"]("0.3") == 0.3

    def test_output_mode(self):
        assert INPUT_HANDLERS["output_mode"]("HSL") == "hsl"
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["output_mode"]("lab")

    def test_variant_aliases(self):
        assert INPUT_HANDLERS["variant"]("Tints") == "tint"
        assert INPUT_HANDLERS["variant"]("shade") == "shade"
        with pytest.raises(argparse.ArgumentTypeError):
            INPUT_HANDLERS["variant"]("tinge")

    def test_named_color(self):
        assert INPUT_HANDLERS["named_color"]("brand = #336699") == ("brand", "#336699")
        assert INPUT_HANDLERS["named_color"]("x=rgb(1, 2, 3)") == ("x", "rgb(1, 2, 3)")
        for raw in ["brand", "=#fff", "brand="]:
            with pytest.raises(argparse.ArgumentTypeError):
                INPUT_HANDLERS["named_color"](raw)
