"""Tests for the 11-step tint/shade scale."""

import math

from chromalab.core import config as c
from chromalab.core.conversions import hex_to_oklch
from chromalab.core.scale import _step_chroma, generate_scale
from chromalab.core.utility import hue_distance


SWEEP_BASES = [
    "#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#00FFFF", "#FF00FF",
    "#3B82F6", "#10B981", "#F59E0B", "#E11D48", "#8B5CF6", "#EC4899",
    "#14B8A6", "#F97316", "#84CC16", "#6366F1", "#A16207", "#7C2D12",
    "#0EA5E9", "#22C55E", "#EAB308", "#EF4444", "#111827", "#FDE68A",
    "#C4B5FD", "#800000", "#008080", "#808000", "#4B0082", "#FFC0CB",
] + [
    "#%02X%02X%02X" % (r, g, b)
    for r in range(0, 256, 51)
    for g in range(0, 256, 51)
    for b in range(0, 256, 51)
]


def test_scale_ends_stay_under_the_tent_ceiling():
    # 8-bit rounding can add about 0.001 on top of the tent value
    for base in SWEEP_BASES:
        steps = generate_scale(base)
        for s in (steps[0], steps[-1]):
            ceiling = _step_chroma(c.SCALE_C_CAP, s.step / c.SCALE_STEP_DIVISOR)
            assert hex_to_oklch(s.hex).C <= ceiling + 0.002, (base, s.step)


def test_scale_holds_base_hue_on_every_step():
    for base in SWEEP_BASES:
        base_lch = hex_to_oklch(base)
        if base_lch.C <= 0.02:
            continue
        for s in generate_scale(base):
            lch = hex_to_oklch(s.hex)
            drift = hue_distance(lch.H, base_lch.H)
            # off-hue offset stays within 8-bit rounding on every step
            assert lch.C * math.radians(drift) <= 0.004, (base, s.step)
            if lch.C >= 0.1:
                assert drift <= 1.0, (base, s.step)


def test_scale_has_all_steps_in_order():
    steps = generate_scale("#3B82F6")
    assert [s.step for s in steps] == list(c.SCALE_STEPS)
    for s in steps:
        assert s.hex.startswith("#") and len(s.hex) == 7
        assert s.hex == s.hex.upper()


def test_scale_lightness_falls_from_50_to_950():
    lightness = [hex_to_oklch(s.hex).L for s in generate_scale("#3B82F6")]
    assert all(a > b for a, b in zip(lightness, lightness[1:]))
    assert lightness[0] > 0.85
    assert lightness[-1] < 0.2


def test_scale_rgb_and_hsl_match_hex():
    for s in generate_scale("#10B981"):
        assert "#%02X%02X%02X" % tuple(s.rgb) == s.hex
        assert 0.0 <= s.hsl.l <= 100.0


def test_scale_of_gray_stays_gray():
    for s in generate_scale("#808080"):
        r, g, b = s.rgb
        assert max(r, g, b) - min(r, g, b) <= 1


def test_scale_rejects_bad_input():
    assert generate_scale("not-a-color") is None


def test_blue_scale_peaks_mid_and_fades_at_the_ends():
    base = hex_to_oklch("#3B82F6")
    steps = {s.step: hex_to_oklch(s.hex) for s in generate_scale("#3B82F6")}
    assert hue_distance(steps[500].H, base.H) <= 0.5
    assert steps[500].C > 0.18
    assert steps[50].C < 0.05
    assert steps[950].C < 0.05
