"""Tests for CSS and display formatting."""

from chromalab.shared.formatting import (
    format_colorspace,
    to_css_hsl,
    to_css_hsv,
    to_css_oklab,
    to_css_oklch,
    to_css_rgb,
    to_hex_alpha,
)


def test_css_rgb_with_and_without_alpha():
    assert to_css_rgb((59, 130, 246)) == "rgb(59 130 246)"
    assert to_css_rgb((59, 130, 246), 50) == "rgb(59 130 246 / 0.5)"
    assert to_css_rgb((59, 130, 246), None) == "rgb(59 130 246)"


def test_css_hsl_and_oklch():
    assert to_css_hsl((217.2, 91.2, 59.8)) == "hsl(217 91% 60%)"
    assert to_css_oklch((0.6, 0.19, 259.7)) == "oklch(60.0% 0.1900 259.7)"
    assert to_css_hsv((120, 50, 80), 25) == "hsv(120 50% 80% / 0.25)"
    assert to_css_oklab((0.5, -0.1, 0.05)) == "oklab(50.0% -0.1000 0.0500)"


def test_hex_alpha():
    assert to_hex_alpha("#ff0000", 50) == "#FF000080"
    assert to_hex_alpha("#ff0000") == "#FF0000"
    assert to_hex_alpha("nope", 50) is None


def test_format_colorspace():
    assert format_colorspace("rgb", 1, 2, 3) == "rgb(1, 2, 3)"
    assert format_colorspace("hsl", 217, 91.2, 59.8) == "hsl(217.00deg, 91.20%, 59.80%)"
    assert format_colorspace("cmyk", 0, 0, 0, 100) == "cmyk(0.00%, 0.00%, 0.00%, 100.00%)"
    assert format_colorspace("p3", 1, 0.5, 0) == "color(display-p3 1.0000 0.5000 0.0000)"
    assert format_colorspace("xyz", 1, 2, 3) == ""
