#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/color/engine.py

import argparse
from typing import Any, Dict

from chromalab.core import config as c
from chromalab.core import conversions as conv
from chromalab.core.contrast import BLACK, WHITE, apca_contrast, apca_level, get_wcag_contrast
from chromalab.core.luminance import relative_luminance
from chromalab.core.wide_gamut import is_wide_gamut, p3_css_color
from .resolver import resolve_color_input
from .renderer import render_color_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the color command"""

    if getattr(args, "all_tech_infos", False):
        for key in c.TECH_INFO_KEYS:
            setattr(args, key, True)

    base_hex, title = resolve_color_input(args)
    r, g, b = conv.hex_to_rgb(base_hex)
    l_rel = relative_luminance(r, g, b)

    tech_data = get_color_data(r, g, b, args)

    wcag_data = get_wcag_contrast(l_rel) if getattr(args, "contrast", False) else None

    apca_data = None
    if getattr(args, "apca", False):
        apca_data = {}
        for name, bg in (("white", WHITE), ("black", BLACK)):
            lc = apca_contrast((r, g, b), bg)
            apca_data[name] = {"lc": lc, "level": apca_level(lc)}

    render_color_info(
        hex_code=base_hex,
        title=title,
        args=args,
        rgb=(r, g, b),
        luminance=l_rel,
        tech_data=tech_data,
        wcag_data=wcag_data,
        apca_data=apca_data,
        as_json=getattr(args, "json", False),
    )


def get_color_data(r: int, g: int, b: int, args: argparse.Namespace) -> Dict[str, Any]:
    """Helper to extract technical conversion data with flat logic."""
    data = {}

    if getattr(args, "hsl", False):
        data["hsl"] = conv.rgb_to_hsl(r, g, b)
    if getattr(args, "hsv", False):
        data["hsv"] = conv.rgb_to_hsv(r, g, b)
    if getattr(args, "cmyk", False):
        data["cmyk"] = conv.rgb_to_cmyk(r, g, b)
    if getattr(args, "oklab", False):
        data["oklab"] = conv.rgb_to_oklab(r, g, b)
    if getattr(args, "oklch", False):
        data["oklch"] = conv.rgb_to_oklch(r, g, b)
    if getattr(args, "p3", False):
        hex_code = conv.rgb_to_hex(r, g, b)
        data["p3"] = {"css": p3_css_color(hex_code), "wide_gamut": is_wide_gamut(hex_code)}

    return data
