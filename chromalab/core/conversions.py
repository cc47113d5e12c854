#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/conversions.py

import functools
import math
from typing import Optional, Tuple

from . import config as c
from .types import CMYK, HSL, HSV, OKLCH, RGB, ColorStop, OKLab, PaletteSlot
from chromalab.shared.clamping import _clamp01, _finite, clamp
from chromalab.shared.sanitizer import (
    parse_hex,
    parse_hex_alpha,
    parse_hsl_string,
    parse_rgb_string,
)


def hex_to_rgb(hex_code: str) -> Optional[RGB]:
    """Convert hex string to RGB tuple."""
    h = parse_hex(hex_code)
    if not h:
        return None
    return RGB(int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to hex string."""
    r_clamped = int(clamp(round(_finite(r)), 0, c.RGB_MAX))
    g_clamped = int(clamp(round(_finite(g)), 0, c.RGB_MAX))
    b_clamped = int(clamp(round(_finite(b)), 0, c.RGB_MAX))
    return f"#{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def _to_rgb(r: float, g: float, b: float) -> RGB:
    return RGB(
        int(clamp(round(r), 0, c.RGB_MAX)),
        int(clamp(round(g), 0, c.RGB_MAX)),
        int(clamp(round(b), 0, c.RGB_MAX)),
    )


def srgb_to_linear(color_comp: float) -> float:
    """Linearize an 8-bit sRGB component into 0-1."""
    c_norm = _clamp01(_finite(color_comp) / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component; result clamped to 0-1."""
    return _clamp01(_encode_signed(_clamp01(_finite(l_val))))


def _encode_signed(l_val: float) -> float:
    """sRGB encode without clamping; negative input mirrors the curve."""
    sign = -1.0 if l_val < 0 else 1.0
    mag = abs(l_val)
    if mag <= c.LINEAR_TO_SRGB_TH:
        return sign * c.SRGB_SLOPE * mag
    return sign * (c.SRGB_DIVISOR * (mag ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET)


def _hue_from_rgb(r_f: float, g_f: float, b_f: float, cmax: float, delta: float) -> float:
    if cmax == r_f:
        h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
    elif cmax == g_f:
        h = c.HUE_SECTOR * ((b_f - r_f) / delta + 2.0)
    else:
        h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
    return (h + c.HUE_MAX) % c.HUE_MAX


def _sector_to_rgb(h: float, chroma: float, m: float) -> RGB:
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    if 0 <= h < 60:
        r_p, g_p, b_p = chroma, x, 0
    elif 60 <= h < 120:
        r_p, g_p, b_p = x, chroma, 0
    elif 120 <= h < 180:
        r_p, g_p, b_p = 0, chroma, x
    elif 180 <= h < 240:
        r_p, g_p, b_p = 0, x, chroma
    elif 240 <= h < 300:
        r_p, g_p, b_p = x, 0, chroma
    else:
        r_p, g_p, b_p = chroma, 0, x
    return _to_rgb(
        _clamp01(r_p + m) * c.RGB_MAX,
        _clamp01(g_p + m) * c.RGB_MAX,
        _clamp01(b_p + m) * c.RGB_MAX,
    )


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB to HSL (s and l in percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return HSL(0.0, 0.0, L * c.PERCENT)
    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = 0.0 if abs(denom) < c.EPS else delta / denom
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSL(h, s * c.PERCENT, L * c.PERCENT)


def hsl_to_rgb(h: float, s: float, L: float) -> RGB:
    """Convert HSL (s and l in percent) to RGB."""
    h = _finite(h) % c.HUE_MAX
    s = _clamp01(_finite(s) / c.PERCENT)
    L = _clamp01(_finite(L) / c.PERCENT)
    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    return _sector_to_rgb(h, chroma, L - chroma / c.DIV_2)


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    """Convert RGB to HSV (s and v in percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    if delta == 0:
        return HSV(0.0, 0.0, cmax * c.PERCENT)
    s = delta / cmax
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSV(h, s * c.PERCENT, cmax * c.PERCENT)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (s and v in percent) to RGB."""
    h = _finite(h) % c.HUE_MAX
    s = _clamp01(_finite(s) / c.PERCENT)
    v = _clamp01(_finite(v) / c.PERCENT)
    chroma = v * s
    return _sector_to_rgb(h, chroma, v - chroma)


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    """Convert RGB to CMYK (all in percent)."""
    if r == 0 and g == 0 and b == 0:
        return CMYK(0.0, 0.0, 0.0, c.PERCENT)
    r_norm, g_norm, b_norm = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    k = c.UNIT - max(r_norm, g_norm, b_norm)
    denom = c.UNIT - k
    cy = (c.UNIT - r_norm - k) / denom
    m = (c.UNIT - g_norm - k) / denom
    y = (c.UNIT - b_norm - k) / denom
    return CMYK(cy * c.PERCENT, m * c.PERCENT, y * c.PERCENT, k * c.PERCENT)


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK (percent) to RGB."""
    k = _clamp01(_finite(k) / c.PERCENT)
    if k >= c.UNIT:
        return RGB(0, 0, 0)
    r = c.RGB_MAX * (c.UNIT - _clamp01(_finite(cy) / c.PERCENT)) * (c.UNIT - k)
    g = c.RGB_MAX * (c.UNIT - _clamp01(_finite(m) / c.PERCENT)) * (c.UNIT - k)
    b = c.RGB_MAX * (c.UNIT - _clamp01(_finite(y) / c.PERCENT)) * (c.UNIT - k)
    return _to_rgb(r, g, b)


def _cbrt(v: float) -> float:
    return v ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def _mat3(m, v0: float, v1: float, v2: float) -> Tuple[float, float, float]:
    return (
        m[0][0] * v0 + m[0][1] * v1 + m[0][2] * v2,
        m[1][0] * v0 + m[1][1] * v1 + m[1][2] * v2,
        m[2][0] * v0 + m[2][1] * v1 + m[2][2] * v2,
    )


def rgb_to_oklab(r: int, g: int, b: int) -> OKLab:
    """Convert RGB to OKLab."""
    lms = _mat3(c.M1_OKLAB, srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    l_, m_, s_ = (_cbrt(v) for v in lms)
    return OKLab(*_mat3(c.M2_OKLAB, l_, m_, s_))


def _oklab_to_linear(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """OKLab to unclamped linear sRGB; channels may fall outside 0-1."""
    inv = c.M2_OKLAB_INV
    l_ = L + inv[0][0] * a + inv[0][1] * b
    m_ = L + inv[1][0] * a + inv[1][1] * b
    s_ = L + inv[2][0] * a + inv[2][1] * b
    return _mat3(c.M1_OKLAB_INV, l_ ** 3, m_ ** 3, s_ ** 3)


def _linear_in_gamut(r_lin: float, g_lin: float, b_lin: float) -> bool:
    for v in (r_lin, g_lin, b_lin):
        encoded = _encode_signed(v) * c.RGB_MAX
        if not (c.RGB_CLAMP_TOLERANCE_LOWER <= encoded <= c.RGB_CLAMP_TOLERANCE_UPPER):
            return False
    return True


def oklab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert OKLab to RGB (clamped and rounded)."""
    r_lin, g_lin, b_lin = _oklab_to_linear(_finite(L), _finite(a), _finite(b))
    return _to_rgb(
        linear_to_srgb(r_lin) * c.RGB_MAX,
        linear_to_srgb(g_lin) * c.RGB_MAX,
        linear_to_srgb(b_lin) * c.RGB_MAX,
    )


def oklab_to_oklch(L: float, a: float, b: float) -> OKLCH:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return OKLCH(L, chroma, hue)


def oklch_to_oklab(L: float, chroma: float, hue: float) -> OKLab:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return OKLab(L, a, b)


def rgb_to_oklch(r: int, g: int, b: int) -> OKLCH:
    """Direct RGB to OKLCH conversion."""
    return oklab_to_oklch(*rgb_to_oklab(r, g, b))


def is_in_srgb_gamut(L: float, chroma: float, hue: float) -> bool:
    """True when the OKLCH color rounds into 8-bit sRGB without clamping."""
    return _linear_in_gamut(*_oklab_to_linear(*oklch_to_oklab(L, chroma, hue)))


def oklch_to_rgb(L: float, chroma: float, hue: float) -> RGB:
    """
    Gamut-safe OKLCH to RGB.

    Lightness and hue are held fixed; when the color is outside sRGB the
    chroma is binary-searched down to the largest value that still fits.
    """
    L = _finite(L)
    chroma = max(_finite(chroma), 0.0)
    hue = _finite(hue) % c.HUE_MAX

    if chroma < c.ACHROMATIC_CHROMA_EPS:
        v = round(linear_to_srgb(_clamp01(L ** 3)) * c.RGB_MAX)
        return RGB(v, v, v)
    if L >= c.UNIT:
        return RGB(255, 255, 255)
    if L <= 0.0:
        return RGB(0, 0, 0)

    if is_in_srgb_gamut(L, chroma, hue):
        return oklab_to_rgb(*oklch_to_oklab(L, chroma, hue))

    lo, hi = 0.0, chroma
    for _ in range(c.GAMUT_MAP_MAX_ITERATIONS):
        if hi - lo < c.GAMUT_MAP_EPS:
            break
        mid = (lo + hi) / c.DIV_2
        if is_in_srgb_gamut(L, mid, hue):
            lo = mid
        else:
            hi = mid
    return oklab_to_rgb(*oklch_to_oklab(L, lo, hue))


# ==========================================
# Hex Wrappers
# ==========================================

def hex_to_hsl(hex_code: str) -> Optional[HSL]:
    rgb = hex_to_rgb(hex_code)
    return rgb_to_hsl(*rgb) if rgb else None


def hex_to_hsv(hex_code: str) -> Optional[HSV]:
    rgb = hex_to_rgb(hex_code)
    return rgb_to_hsv(*rgb) if rgb else None


def hex_to_cmyk(hex_code: str) -> Optional[CMYK]:
    rgb = hex_to_rgb(hex_code)
    return rgb_to_cmyk(*rgb) if rgb else None


def hex_to_oklab(hex_code: str) -> Optional[OKLab]:
    rgb = hex_to_rgb(hex_code)
    return rgb_to_oklab(*rgb) if rgb else None


def hex_to_oklch(hex_code: str) -> Optional[OKLCH]:
    rgb = hex_to_rgb(hex_code)
    return rgb_to_oklch(*rgb) if rgb else None


def hsl_to_hex(h: float, s: float, L: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, L))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def cmyk_to_hex(cy: float, m: float, y: float, k: float) -> str:
    return rgb_to_hex(*cmyk_to_rgb(cy, m, y, k))


def oklab_to_hex(L: float, a: float, b: float) -> str:
    return rgb_to_hex(*oklab_to_rgb(L, a, b))


def oklch_to_hex(L: float, chroma: float, hue: float) -> str:
    return rgb_to_hex(*oklch_to_rgb(L, chroma, hue))


# ==========================================
# Parsing & Color Stops
# ==========================================

def parse_color(value: str) -> Optional[RGB]:
    """Parse a hex, rgb() or hsl() string into RGB; None when nothing matches."""
    rgb = hex_to_rgb(value)
    if rgb:
        return rgb
    rgb = parse_rgb_string(value)
    if rgb:
        return rgb
    hsl = parse_hsl_string(value)
    return hsl_to_rgb(*hsl) if hsl else None


def color_stop(hex_code: str, alpha: Optional[float] = None) -> Optional[ColorStop]:
    """
    Build a ColorStop from a hex string.

    Alpha comes from the argument, or from the last byte of an 8-digit hex;
    fully opaque colors store None.
    """
    h = parse_hex(hex_code)
    if not h:
        return None
    if alpha is None:
        alpha = parse_hex_alpha(hex_code)
    if alpha is not None:
        alpha = int(clamp(round(_finite(alpha, c.PERCENT)), 0, c.PERCENT))
        if alpha >= c.PERCENT:
            alpha = None
    rgb = hex_to_rgb(h)
    return ColorStop(h, rgb, rgb_to_hsl(*rgb), alpha)


def hex_of(item) -> Optional[str]:
    """Canonical hex of a hex string, ColorStop or PaletteSlot; cached rgb/hsl are ignored."""
    if isinstance(item, PaletteSlot):
        item = item.color
    if isinstance(item, ColorStop):
        item = item.hex
    if not isinstance(item, str):
        return None
    return parse_hex(item)


# Wrap every pure conversion defined above in an LRU cache.
# hex_of accepts arbitrary (possibly unhashable) objects.
_UNCACHED = ("hex_of",)

for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and _name not in _UNCACHED:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
