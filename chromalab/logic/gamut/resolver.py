#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/gamut/resolver.py

import argparse

from chromalab.core.conversions import hex_to_oklch
from chromalab.core.wide_gamut import expand_to_p3, is_wide_gamut, p3_css_color
from chromalab.shared.inputs import resolve_hex_list
from .renderer import render_gamut


def resolve_gamut_input(args: argparse.Namespace) -> None:
    hexes = resolve_hex_list(args, "gamut", minimum=1, default_count=3)
    rows = []
    for hex_code in hexes:
        wide = is_wide_gamut(hex_code)
        rows.append({
            "hex": hex_code,
            "chroma": round(hex_to_oklch(hex_code).C, 4),
            "wide_gamut": wide,
            "expanded": expand_to_p3(hex_code),
            "p3": p3_css_color(hex_code),
        })
    render_gamut(rows, as_json=args.json)
