"""Tests for WCAG/APCA contrast and contrast repair."""

import pytest

from chromalab.core.contrast import (
    BLACK,
    WHITE,
    apca_contrast,
    apca_level,
    contrast_ratio,
    get_wcag_contrast,
    suggest_contrast_fix,
    text_color,
    wcag_level,
)
from chromalab.core.conversions import hex_to_rgb
from chromalab.core.luminance import relative_luminance


def test_black_on_white_is_21():
    assert contrast_ratio(WHITE, BLACK) == pytest.approx(21.0)
    assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)
    assert contrast_ratio(WHITE, WHITE) == pytest.approx(1.0)


def test_wcag_levels():
    assert wcag_level(7.0) == "AAA"
    assert wcag_level(4.5) == "AA"
    assert wcag_level(3.0) == "AA Large"
    assert wcag_level(2.99) == "Fail"


def test_get_wcag_contrast_against_white_and_black():
    data = get_wcag_contrast(relative_luminance(255, 255, 255))
    assert data["white"]["ratio"] == pytest.approx(1.0)
    assert data["white"]["level"] == "Fail"
    assert data["black"]["ratio"] == pytest.approx(21.0)
    assert data["black"]["level"] == "AAA"


def test_text_color_picks_readable_side():
    assert text_color(hex_to_rgb("#1E3A8A")) == "#FFFFFF"
    assert text_color(hex_to_rgb("#FDE68A")) == "#000000"


def test_apca_polarity_and_magnitude():
    assert apca_contrast(BLACK, WHITE) == pytest.approx(111.3)
    assert apca_contrast(WHITE, BLACK) == pytest.approx(-111.3)
    assert apca_contrast(WHITE, WHITE) == 0.0


def test_apca_levels_use_magnitude():
    assert apca_level(-80.0) == "Preferred"
    assert apca_level(61.0) == "Body"
    assert apca_level(45.0) == "Large"
    assert apca_level(30.0) == "UI"
    assert apca_level(12.0) == "Fail"


def test_fix_darkens_on_light_background():
    fix = suggest_contrast_fix("#777777", "#FFFFFF")
    assert fix is not None
    assert fix.direction == "darken"
    assert fix.ratio >= 4.5
    assert contrast_ratio(hex_to_rgb(fix.hex), WHITE) >= 4.5
    # Only a small nudge is needed from a color that nearly passes
    assert relative_luminance(*hex_to_rgb(fix.hex)) < relative_luminance(119, 119, 119)
    assert fix.ratio < 5.5


def test_fix_lightens_on_dark_background_and_accepts_rgb_tuple():
    fix = suggest_contrast_fix("#333366", (0, 0, 0), target_ratio=7.0)
    assert fix is not None
    assert fix.direction == "lighten"
    assert fix.ratio >= 7.0


def test_fix_returns_none_when_already_passing_or_impossible():
    assert suggest_contrast_fix("#000000", "#FFFFFF") is None
    assert suggest_contrast_fix("#777777", "#808080", target_ratio=21) is None
    assert suggest_contrast_fix("nope", "#FFFFFF") is None
    assert suggest_contrast_fix("#777777", "nope") is None


def test_contrast_ratio_is_symmetric():
    pairs = [((59, 130, 246), (255, 255, 255)), ((16, 185, 129), (10, 10, 10)), ((1, 2, 3), (250, 200, 100))]
    for a, b in pairs:
        assert contrast_ratio(a, b) == contrast_ratio(b, a)
