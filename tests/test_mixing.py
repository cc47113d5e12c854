"""Tests for color mixing and multi-stop gradients."""

from chromalab.core.mixing import build_gradient, mix_hsl, mix_oklab, mix_oklch, mix_rgb


def test_two_step_gradient_is_its_endpoints():
    assert build_gradient(["#000000", "#FFFFFF"], 2) == ["#000000", "#FFFFFF"]


def test_stops_land_exactly_on_their_positions():
    grad = build_gradient(["#FF0000", "#00FF00", "#0000FF"], 5, "oklch")
    assert len(grad) == 5
    assert grad[0] == "#FF0000"
    assert grad[2] == "#00FF00"
    assert grad[4] == "#0000FF"


def test_gradient_drops_invalid_stops():
    assert build_gradient(["#FF0000", "nope"], 5) == []
    assert build_gradient(["#FF0000", "xyz", "#0000FF"], 3) == build_gradient(["#FF0000", "#0000FF"], 3)


def test_single_step_and_unknown_space():
    assert build_gradient(["#FF0000", "#0000FF"], 1) == ["#FF0000"]
    assert build_gradient(["#FF0000", "#0000FF"], 7, "cmyk") == build_gradient(["#FF0000", "#0000FF"], 7, "oklab")


def test_every_colorspace_produces_valid_hexes():
    for space in ("srgb", "srgblinear", "hsl", "oklab", "oklch"):
        grad = build_gradient(["#3B82F6", "#F59E0B"], 6, space)
        assert len(grad) == 6
        assert all(h.startswith("#") and len(h) == 7 for h in grad)


def test_mix_rgb_midpoint():
    assert mix_rgb((0, 0, 0), (255, 255, 255), 0.5) == (128, 128, 128)


def test_mix_hsl_takes_short_way_round():
    r, g, b = mix_hsl((255, 0, 0), (255, 0, 255), 0.5)
    assert r == 255
    assert g == 0
    assert 100 < b < 160


def test_mix_clamps_t():
    assert mix_oklab((0, 0, 0), (255, 255, 255), 5) == (255, 255, 255)
    assert mix_oklch((10, 20, 30), (200, 100, 50), -1) == (10, 20, 30)
