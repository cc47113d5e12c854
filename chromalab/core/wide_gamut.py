#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/wide_gamut.py

from typing import Optional, Tuple

from . import config as c
from .conversions import hex_to_oklch, hex_to_rgb, oklch_to_hex, srgb_to_linear
from chromalab.shared.clamping import _clamp01, clamp
from chromalab.shared.sanitizer import parse_hex


def _p3_gamma(v: float) -> float:
    if v <= c.P3_LINEAR_TH:
        return v * c.SRGB_SLOPE
    return c.SRGB_DIVISOR * (v ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def srgb_to_p3(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Express an sRGB color in encoded Display P3 coordinates (0-1)."""
    r_lin, g_lin, b_lin = srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)
    m = c.M_SRGB_TO_P3
    return tuple(
        _p3_gamma(_clamp01(row[0] * r_lin + row[1] * g_lin + row[2] * b_lin))
        for row in m
    )


def is_wide_gamut(hex_code: str) -> bool:
    """
    Heuristic: colors above OKLCH chroma 0.25 sit near the sRGB edge on most
    hues and gain visibly from P3 rendering.
    """
    lch = hex_to_oklch(hex_code)
    return lch is not None and lch.C > c.P3_CHROMA_THRESHOLD


def expand_to_p3(hex_code: str) -> Optional[str]:
    """Push chroma toward the P3 ceiling at fixed lightness and hue; non-wide colors are returned as is."""
    lch = hex_to_oklch(hex_code)
    if lch is None:
        return None
    if lch.C <= c.P3_CHROMA_THRESHOLD:
        return parse_hex(hex_code)
    expanded_c = clamp(lch.C * c.P3_CHROMA_EXPANSION, lch.C, c.P3_CHROMA_CEILING)
    return oklch_to_hex(lch.L, expanded_c, lch.H)


def p3_css_color(hex_code: str) -> Optional[str]:
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        return None
    r_p3, g_p3, b_p3 = srgb_to_p3(*rgb)
    return f"color(display-p3 {r_p3:.4f} {g_p3:.4f} {b_p3:.4f})"
