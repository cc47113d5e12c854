"""Tests for the color space kernel."""

import math

import pytest

from chromalab.core import conversions as conv
from chromalab.core.types import PaletteSlot
from chromalab.core.utility import hue_distance


def test_hex_to_rgb_accepts_short_long_and_alpha_forms():
    assert conv.hex_to_rgb("#3B82F6") == (59, 130, 246)
    assert conv.hex_to_rgb("abc") == (170, 187, 204)
    assert conv.hex_to_rgb("#3b82f680") == (59, 130, 246)


def test_hex_to_rgb_rejects_garbage():
    assert conv.hex_to_rgb("zzzzzz") is None
    assert conv.hex_to_rgb("#12345") is None
    assert conv.hex_to_rgb("") is None


def test_rgb_to_hex_rounds_and_clamps():
    assert conv.rgb_to_hex(255.4, -3, 300) == "#FF00FF"
    assert conv.rgb_to_hex(59, 130, 246) == "#3B82F6"
    assert conv.rgb_to_hex(float("nan"), 0, 0) == "#000000"


def test_hsl_known_values():
    assert conv.rgb_to_hsl(255, 0, 0) == (0.0, 100.0, 50.0)
    assert conv.hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert conv.rgb_to_hsl(128, 128, 128).s == 0.0


def test_hsl_and_hsv_survive_a_trip_through_rgb():
    for rgb in [(59, 130, 246), (16, 185, 129), (245, 158, 11), (10, 10, 10)]:
        back_hsl = conv.hsl_to_rgb(*conv.rgb_to_hsl(*rgb))
        back_hsv = conv.hsv_to_rgb(*conv.rgb_to_hsv(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(back_hsl, rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(back_hsv, rgb))


def test_cmyk_black_and_full_key():
    assert conv.rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 100.0)
    assert conv.cmyk_to_rgb(20, 30, 40, 100) == (0, 0, 0)
    assert conv.cmyk_to_rgb(0, 0, 0, 0) == (255, 255, 255)


def test_oklab_white_is_neutral():
    L, a, b = conv.rgb_to_oklab(255, 255, 255)
    assert L == pytest.approx(1.0, abs=1e-3)
    assert abs(a) < 1e-3
    assert abs(b) < 1e-3


def test_oklch_of_srgb_color_is_in_gamut():
    lch = conv.hex_to_oklch("#3B82F6")
    assert conv.is_in_srgb_gamut(*lch)
    assert conv.oklch_to_hex(*lch) == "#3B82F6"


def test_oklch_to_rgb_gray_white_and_black():
    r, g, b = conv.oklch_to_rgb(0.5, 0.0, 123.0)
    assert r == g == b
    assert conv.oklch_to_rgb(1.2, 0.2, 30) == (255, 255, 255)
    assert conv.oklch_to_rgb(-0.1, 0.2, 30) == (0, 0, 0)


def test_oklch_to_rgb_maps_out_of_gamut_chroma_at_fixed_lightness():
    assert not conv.is_in_srgb_gamut(0.7, 0.4, 150.0)
    rgb = conv.oklch_to_rgb(0.7, 0.4, 150.0)
    lch = conv.rgb_to_oklch(*rgb)
    assert lch.L == pytest.approx(0.7, abs=0.01)
    assert lch.C < 0.4
    assert hue_distance(lch.H, 150.0) <= 0.5


def test_gamut_mapping_holds_lightness_and_hue_across_mid_tones():
    for L in (0.40, 0.45, 0.50, 0.55, 0.60, 0.65, 0.70, 0.75, 0.80):
        for hue in range(0, 360, 5):
            lch = conv.rgb_to_oklch(*conv.oklch_to_rgb(L, 0.4, hue))
            drift = hue_distance(lch.H, hue)
            assert lch.L == pytest.approx(L, abs=0.01)
            # 8-bit rounding moves a/b by about 0.002 at most
            assert lch.C * math.radians(drift) <= 0.0025
            if lch.C >= 0.18:
                assert drift <= 0.5


def test_parse_color_handles_css_functions():
    assert conv.parse_color("rgb(59, 130, 246)") == (59, 130, 246)
    assert conv.parse_color("rgba(59 130 246 / 50%)") == (59, 130, 246)
    assert conv.parse_color("hsl(0, 100%, 50%)") == (255, 0, 0)
    assert conv.parse_color("not a color") is None


def test_color_stop_reads_alpha_from_eight_digit_hex():
    stop = conv.color_stop("#ff000080")
    assert stop.hex == "#FF0000"
    assert stop.rgb == (255, 0, 0)
    assert stop.alpha == 50


def test_color_stop_opaque_alpha_is_none():
    assert conv.color_stop("#FF0000").alpha is None
    assert conv.color_stop("#FF0000", alpha=100).alpha is None
    assert conv.color_stop("#FF0000", alpha=250).alpha is None
    assert conv.color_stop("#FF0000", alpha=25).alpha == 25
    assert conv.color_stop("nope") is None


def test_hex_of_unwraps_slots_and_stops():
    stop = conv.color_stop("#abc")
    assert conv.hex_of(PaletteSlot(stop)) == "#AABBCC"
    assert conv.hex_of(stop) == "#AABBCC"
    assert conv.hex_of("#abc") == "#AABBCC"
    assert conv.hex_of(42) is None
    assert conv.hex_of(["#abc"]) is None


def test_hex_survives_rgb_round_trip():
    for hex_code in ("#000000", "#FFFFFF", "#3B82F6", "#10B981", "#7F7F7F", "#01FE80"):
        assert conv.rgb_to_hex(*conv.hex_to_rgb(hex_code)) == hex_code


def test_oklch_output_stays_in_byte_range():
    for L in (0.0, 0.25, 0.5, 0.75, 1.0):
        for chroma in (0.0, 0.1, 0.3, 0.5):
            for hue in (0, 90, 180, 270, 359):
                assert all(0 <= ch <= 255 for ch in conv.oklch_to_rgb(L, chroma, hue))


def test_hex_wrappers():
    assert conv.hex_to_hsl("#FF0000") == (0.0, 100.0, 50.0)
    assert conv.hex_to_hsv("#FF0000") == (0.0, 100.0, 100.0)
    assert conv.hex_to_cmyk("#FF0000") == (0.0, 100.0, 100.0, 0.0)
    assert conv.hex_to_oklab("#FFFFFF").L == pytest.approx(1.0, abs=1e-3)
    for wrapper in (conv.hex_to_hsl, conv.hex_to_hsv, conv.hex_to_cmyk, conv.hex_to_oklab, conv.hex_to_oklch):
        assert wrapper("nope") is None
    assert conv.hsl_to_hex(0, 100, 50) == "#FF0000"
    assert conv.hsv_to_hex(240, 100, 100) == "#0000FF"
    assert conv.cmyk_to_hex(0, 100, 100, 0) == "#FF0000"
    assert conv.oklab_to_hex(*conv.hex_to_oklab("#10B981")) == "#10B981"
