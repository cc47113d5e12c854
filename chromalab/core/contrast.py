#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/contrast.py

from typing import Optional, Tuple, Union

from . import config as c
from .conversions import hex_to_rgb, oklch_to_rgb, rgb_to_hex, rgb_to_oklch
from .luminance import apca_luminance, relative_luminance
from .types import ContrastFix, RGB
from chromalab.shared.clamping import _finite, clamp

WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)


def contrast_ratio(c1: tuple, c2: tuple) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two specific RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = relative_luminance(*c1)
    y2 = relative_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def wcag_level(ratio: float) -> str:
    for threshold, label in c.WCAG_LEVELS:
        if ratio >= threshold:
            return label
    return c.WCAG_FAIL


def get_wcag_contrast(lum: float) -> dict:
    """
    Calculate WCAG contrast ratios against pure white and pure black.

    Source: Web Content Accessibility Guidelines (WCAG) 2.1
    Formula: (L1 + 0.05) / (L2 + 0.05), where L is the relative luminance.
    """
    contrast_white = (c.UNIT + c.WCAG_LUMINANCE_OFFSET) / (lum + c.WCAG_LUMINANCE_OFFSET)
    contrast_black = (lum + c.WCAG_LUMINANCE_OFFSET) / c.WCAG_LUMINANCE_OFFSET

    return {
        "white": {"ratio": round(contrast_white, 2), "level": wcag_level(contrast_white)},
        "black": {"ratio": round(contrast_black, 2), "level": wcag_level(contrast_black)},
    }


def text_color(bg: tuple) -> str:
    """White when white text is readable (AA) on bg, otherwise black."""
    return "#FFFFFF" if contrast_ratio(WHITE, bg) >= c.WCAG_AA else "#000000"


def apca_contrast(fg: tuple, bg: tuple) -> float:
    """
    APCA lightness contrast (Lc) of text fg on background bg.

    Positive for dark text on a light background, negative for light text on a
    dark background. Source: APCA-W3 0.0.98G.
    """
    y_txt = apca_luminance(*fg)
    y_bg = apca_luminance(*bg)

    if y_bg > y_txt:
        sapc = y_bg ** c.APCA_NORM_BG - y_txt ** c.APCA_NORM_TXT
        out = 0.0 if sapc < c.APCA_LOW_CLIP else sapc * c.APCA_SCALE - c.APCA_OFFSET
    else:
        sapc = y_bg ** c.APCA_REV_BG - y_txt ** c.APCA_REV_TXT
        out = 0.0 if sapc > -c.APCA_LOW_CLIP else sapc * c.APCA_SCALE + c.APCA_OFFSET

    return round(out * c.APCA_LC_SCALE, 1)


def apca_level(lc: float) -> str:
    mag = abs(lc)
    for threshold, label in c.APCA_LEVELS:
        if mag >= threshold:
            return label
    return c.APCA_FAIL


def suggest_contrast_fix(
    hex_code: str,
    bg: Union[str, Tuple[int, int, int]],
    target_ratio: float = c.WCAG_AA,
) -> Optional[ContrastFix]:
    """
    Smallest OKLCH lightness change that makes hex_code reach target_ratio on bg.

    Foregrounds on light backgrounds are darkened, on dark ones lightened.
    Chroma eases off as lightness moves so the hue stays recognizable.
    Returns None when the color already passes, cannot be parsed, or no
    lightness in that direction reaches the target.
    """
    rgb = hex_to_rgb(hex_code)
    bg_rgb = hex_to_rgb(bg) if isinstance(bg, str) else bg
    if rgb is None or bg_rgb is None:
        return None

    target = clamp(_finite(target_ratio, c.WCAG_AA), c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO)
    if contrast_ratio(rgb, bg_rgb) >= target:
        return None

    L, C, H = rgb_to_oklch(*rgb)
    darken = relative_luminance(*bg_rgb) > c.LIGHT_BACKGROUND_LUMINANCE
    direction = "darken" if darken else "lighten"

    def candidate(l_val: float) -> Tuple[RGB, float]:
        chroma = C * (c.UNIT - abs(l_val - L) * c.CONTRAST_FIX_CHROMA_FALLOFF)
        cand = oklch_to_rgb(l_val, max(chroma, 0.0), H)
        return cand, contrast_ratio(cand, bg_rgb)

    near, far = L, (0.0 if darken else c.UNIT)
    best, best_ratio = candidate(far)
    if best_ratio < target:
        return None

    for _ in range(c.CONTRAST_FIX_MAX_ITERATIONS):
        if abs(far - near) < c.CONTRAST_FIX_EPS:
            break
        mid = (near + far) / c.DIV_2
        cand, ratio = candidate(mid)
        if ratio >= target:
            best, best_ratio = cand, ratio
            far = mid
        else:
            near = mid

    return ContrastFix(rgb_to_hex(*best), direction, round(best_ratio, 2))
