#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/formatting.py

from typing import Optional

from chromalab.core import config as c
from .clamping import clamp
from .sanitizer import parse_hex


def _alpha_suffix(alpha: Optional[float]) -> str:
    if alpha is None or alpha >= c.PERCENT:
        return ""
    return f" / {clamp(alpha, 0.0, c.PERCENT) / c.PERCENT:g}"


def to_css_rgb(rgb: tuple, alpha: Optional[float] = 100) -> str:
    r, g, b = rgb
    return f"rgb({r} {g} {b}{_alpha_suffix(alpha)})"


def to_css_hsl(hsl: tuple, alpha: Optional[float] = 100) -> str:
    h, s, l_val = hsl
    return f"hsl({round(h)} {round(s)}% {round(l_val)}%{_alpha_suffix(alpha)})"


def to_css_hsv(hsv: tuple, alpha: Optional[float] = 100) -> str:
    # Not a CSS function; kept in the same shape for display
    h, s, v = hsv
    return f"hsv({round(h)} {round(s)}% {round(v)}%{_alpha_suffix(alpha)})"


def to_css_oklch(oklch: tuple, alpha: Optional[float] = 100) -> str:
    L, C, H = oklch
    return f"oklch({L * c.PERCENT:.1f}% {C:.4f} {H:.1f}{_alpha_suffix(alpha)})"


def to_css_oklab(oklab: tuple, alpha: Optional[float] = 100) -> str:
    L, a, b = oklab
    return f"oklab({L * c.PERCENT:.1f}% {a:.4f} {b:.4f}{_alpha_suffix(alpha)})"


def to_hex_alpha(hex_code: str, alpha: Optional[float] = 100) -> Optional[str]:
    """'#RRGGBBAA' when alpha is below 100, otherwise the plain '#RRGGBB'."""
    h = parse_hex(hex_code)
    if h is None:
        return None
    if alpha is None or alpha >= c.PERCENT:
        return h
    byte = round(clamp(alpha, 0.0, c.PERCENT) / c.PERCENT * c.RGB_MAX)
    return f"{h}{byte:02X}"


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return str(args[0])
    elif fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l_val = args
        return f"hsl({h:.2f}deg, {s:.2f}%, {l_val:.2f}%)"
    elif fmt == 'hsv':
        h, s, v = args
        return f"hsv({h:.2f}deg, {s:.2f}%, {v:.2f}%)"
    elif fmt == 'cmyk':
        cy, m, y, k = args
        return f"cmyk({cy:.2f}%, {m:.2f}%, {y:.2f}%, {k:.2f}%)"
    elif fmt == 'oklab':
        return f"oklab({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"
    elif fmt == 'oklch':
        return f"oklch({args[0]:.4f} {args[1]:.4f} {args[2]:.4f}deg)"
    elif fmt == 'p3':
        return f"color(display-p3 {args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"

    return ""
