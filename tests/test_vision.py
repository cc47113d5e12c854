"""Tests for color vision deficiency simulation."""

from chromalab.core.vision import apply_sim_matrix, simulate_hex, simulate_palette


def test_normal_vision_is_identity():
    assert simulate_hex("#3B82F6", "normal") == "#3B82F6"
    assert apply_sim_matrix((12, 200, 99), "normal") == (12, 200, 99)


def test_achromatopsia_is_gray():
    r, g, b = apply_sim_matrix((220, 40, 60), "achromatopsia")
    assert r == g == b


def test_zero_severity_leaves_color_untouched():
    assert simulate_hex("#E11D48", "protanopia", severity=0.0) == "#E11D48"


def test_partial_severity_sits_between_original_and_full():
    original = apply_sim_matrix((255, 0, 0), "normal")
    full = apply_sim_matrix((255, 0, 0), "deuteranopia")
    half = apply_sim_matrix((255, 0, 0), "deuteranopia", severity=0.5)
    assert min(original.g, full.g) <= half.g <= max(original.g, full.g)
    assert full != original


def test_unknown_type_passes_through():
    assert apply_sim_matrix((1, 2, 3), "martian") == (1, 2, 3)


def test_red_and_green_collapse_for_protanopia():
    red = apply_sim_matrix((255, 0, 0), "protanopia")
    # Red-blind viewers see red shifted heavily toward yellow-olive
    assert red.r < 150
    assert red.g > 60


def test_simulate_palette_keeps_unparsable_entries():
    out = simulate_palette(["#FF0000", "nope", "#00FF00"], "tritanopia")
    assert out[1] == "nope"
    assert len(out) == 3
    assert out[0].startswith("#") and len(out[0]) == 7
