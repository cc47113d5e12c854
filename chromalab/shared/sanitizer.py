#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/sanitizer.py

import argparse
import math
import re
from typing import Optional

from chromalab.core import config as c
from chromalab.core.types import HSL, RGB
from .clamping import clamp

# 3, 6 or 8 hex digits; the optional leading '#' is stripped before matching
_HEX_RE = re.compile(r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8}")

# rgb(59, 130, 246) / rgba(59,130,246,0.5) / rgb(59 130 246 / 50%)
_RGB_RE = re.compile(
    r"rgba?\(\s*([\d.]+)\s*[,\s]\s*([\d.]+)\s*[,\s]\s*([\d.]+)",
    re.IGNORECASE,
)

# hsl(217, 91%, 60%) / hsl(217deg 91% 60%)
_HSL_RE = re.compile(
    r"hsla?\(\s*([\d.]+)(?:deg)?\s*[,\s]\s*([\d.]+)%?\s*[,\s]\s*([\d.]+)%?",
    re.IGNORECASE,
)


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _strip_hex(value: str) -> str:
    value = str(value).strip()
    return value[1:] if value.startswith("#") else value


def parse_hex(value: str) -> Optional[str]:
    """
    Normalizes a hex color into canonical uppercase '#RRGGBB'.

    Accepts 3-digit shorthand (expanded), 6-digit, and 8-digit '#RRGGBBAA'
    (the alpha byte is dropped; read it with parse_hex_alpha). Returns None for
    any other length or for non-hex characters.
    """
    if value is None:
        return None
    s = _strip_hex(value)
    if not _HEX_RE.fullmatch(s):
        return None
    s = s.upper()
    if len(s) == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        s = "".join(ch * 2 for ch in s)
    return f"#{s[:6]}"


def parse_hex_alpha(value: str) -> Optional[int]:
    """Alpha (0-100) of an 8-digit hex, or None when the input carries no alpha byte."""
    if value is None:
        return None
    s = _strip_hex(value)
    if len(s) != 8 or not _HEX_RE.fullmatch(s):
        return None
    return int(round(int(s[6:], 16) / c.RGB_MAX * c.PERCENT))


def opaque_hex(value: str) -> Optional[str]:
    """Drop any alpha byte and expand shorthand, yielding a 6-digit hex."""
    return parse_hex(value)


def parse_rgb_string(value: str) -> Optional[RGB]:
    """Parse a CSS rgb()/rgba() string; channels are rounded and clamped to 0-255."""
    if not value:
        return None
    m = _RGB_RE.search(str(value))
    if not m:
        return None
    try:
        channels = [float(x) for x in m.groups()]
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in channels):
        return None
    r, g, b = (int(clamp(round(v), 0, c.RGB_MAX)) for v in channels)
    return RGB(r, g, b)


def parse_hsl_string(value: str) -> Optional[HSL]:
    """Parse a CSS hsl()/hsla() string into HSL with hue wrapped and s/l clamped to 0-100."""
    if not value:
        return None
    m = _HSL_RE.search(str(value))
    if not m:
        return None
    try:
        h, s, l_val = (float(x) for x in m.groups())
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in (h, s, l_val)):
        return None
    return HSL(h % c.HUE_MAX, clamp(s, 0.0, c.PERCENT), clamp(l_val, 0.0, c.PERCENT))


def _extract_signed_int(value: str) -> Optional[int]:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None
    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None
    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> Optional[float]:
    """
    Extracts a floating-point number from a string, preserving the sign and
    handling multiple decimal points by keeping only the first one encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == ".":
            if dot_seen:
                continue
            dot_seen = True
        clean_str += char

    if not clean_str or clean_str == ".":
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_name(value: str) -> str:
    """Extracts only letters and digits from a string, lowercasing them."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z0-9]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = parse_hex(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_color(v: str) -> str:
    """Validator for any supported color string (hex, rgb(), hsl())."""
    raw = _sanitize_for_log(v)
    if parse_hex(raw) or parse_rgb_string(raw) or parse_hsl_string(raw):
        return raw
    raise argparse.ArgumentTypeError(f"invalid color value: '{raw}'")


def handle_string_clean(v: str) -> str:
    """Validator for name options (format names, colorspaces, roles)."""
    cleaned = _extract_name(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid string value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid integer value: '{_sanitize_for_log(v)}'")
        return int(clamp(val, min_v, max_v))
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid float value: '{_sanitize_for_log(v)}'")
        return clamp(val, min_v, max_v)
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "color": handle_color,
    "format": handle_string_clean,
    "colorspace": handle_string_clean,

    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),

    "count": handle_int_range(2, c.MAX_COUNT),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
    "steps": handle_int_range(1, c.MAX_STEPS),
    "intensity": handle_int_range(0, 100),
}
