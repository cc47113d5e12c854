"""Tests for the Display P3 estimator."""

import pytest

from chromalab.core.conversions import hex_to_oklch
from chromalab.core.wide_gamut import expand_to_p3, is_wide_gamut, p3_css_color, srgb_to_p3


def test_saturated_red_is_wide_gamut_candidate():
    assert is_wide_gamut("#FF0000")
    assert not is_wide_gamut("#808080")
    assert not is_wide_gamut("#3B82F6")
    assert not is_wide_gamut("garbage")


def test_srgb_red_sits_inside_p3():
    r, g, b = srgb_to_p3(255, 0, 0)
    assert r == pytest.approx(0.9175, abs=0.01)
    assert g == pytest.approx(0.2003, abs=0.01)
    assert 0.0 <= b < 0.2


def test_expand_keeps_modest_colors():
    assert expand_to_p3("#808080") == "#808080"
    assert expand_to_p3("3b82f6") == "#3B82F6"
    assert expand_to_p3("nope") is None


def test_expand_holds_lightness_for_wide_colors():
    expanded = expand_to_p3("#FF0000")
    assert expanded.startswith("#") and len(expanded) == 7
    assert hex_to_oklch(expanded).L == pytest.approx(hex_to_oklch("#FF0000").L, abs=0.02)


def test_p3_css_color():
    assert p3_css_color("#000000") == "color(display-p3 0.0000 0.0000 0.0000)"
    assert p3_css_color("#FFFFFF").startswith("color(display-p3 ")
    assert p3_css_color("nope") is None
