#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/scale.py

from typing import List, Optional

from . import config as c
from .conversions import hex_to_rgb, oklch_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_oklch
from .types import ScaleStep
from chromalab.shared.clamping import clamp


def _step_lightness(t: float) -> float:
    l_val = c.SCALE_L_MAX - (c.SCALE_L_MAX - c.SCALE_L_MIN) * (t ** c.SCALE_L_GAMMA)
    return clamp(l_val, *c.SCALE_L_CLAMP)


def _step_chroma(base_c: float, t: float) -> float:
    # Tent peaks mid-scale; the skew keeps a little more color on the light side
    tent = c.SCALE_TENT_FACTOR * t * (c.UNIT - t)
    skew = c.SCALE_SKEW_BASE - c.SCALE_SKEW_SLOPE * abs(t - c.SCALE_SKEW_CENTER)
    return clamp(min(base_c, c.SCALE_C_CAP) * tent * skew, *c.SCALE_C_CLAMP)


def generate_scale(hex_code: str) -> Optional[List[ScaleStep]]:
    """
    Build the 50-950 tint/shade scale of a base color.

    Lightness falls along a power curve from near-white to near-black while
    chroma swells toward the middle steps. Hue is held at the base hue and each
    step is mapped into sRGB at fixed lightness and hue.
    """
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        return None

    _, base_c, base_h = rgb_to_oklch(*rgb)
    steps = []
    for step in c.SCALE_STEPS:
        t = step / c.SCALE_STEP_DIVISOR
        step_rgb = oklch_to_rgb(_step_lightness(t), _step_chroma(base_c, t), base_h)
        steps.append(ScaleStep(step, rgb_to_hex(*step_rgb), step_rgb, rgb_to_hsl(*step_rgb)))
    return steps
