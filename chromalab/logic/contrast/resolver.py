#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/contrast/resolver.py

import argparse

from chromalab.core import conversions as conv
from chromalab.core.contrast import (
    BLACK,
    WHITE,
    apca_contrast,
    apca_level,
    contrast_ratio,
    get_wcag_contrast,
    suggest_contrast_fix,
    wcag_level,
)
from chromalab.core.luminance import relative_luminance
from chromalab.shared.inputs import resolve_hex_list
from chromalab.shared.logger import log
from .renderer import render_contrast, render_contrast_pair


def _apca_pair(fg, bg) -> dict:
    lc = apca_contrast(fg, bg)
    return {"lc": lc, "level": apca_level(lc)}


def resolve_contrast_input(args: argparse.Namespace) -> None:
    fg_hex = resolve_hex_list(args, "contrast", minimum=1, default_count=1, flag="-fg")[0]
    fg = conv.hex_to_rgb(fg_hex)

    if args.background is None:
        if args.fix:
            log("warning", "--fix needs a background; use -bg HEX")
        data = {
            "foreground": fg_hex,
            "luminance": round(relative_luminance(*fg), 6),
            "wcag": get_wcag_contrast(relative_luminance(*fg)),
            "apca": {
                # Text in the given color on white and on black
                "white": _apca_pair(fg, WHITE),
                "black": _apca_pair(fg, BLACK),
            },
        }
        render_contrast(data, as_json=args.json)
        return

    bg_hex = args.background
    bg = conv.hex_to_rgb(bg_hex)
    ratio = contrast_ratio(fg, bg)
    data = {
        "foreground": fg_hex,
        "background": bg_hex,
        "wcag": {"ratio": round(ratio, 2), "level": wcag_level(ratio)},
        "apca": _apca_pair(fg, bg),
        "target": args.target,
    }

    if args.fix:
        fix = suggest_contrast_fix(fg_hex, bg, args.target)
        if fix is not None:
            data["fix"] = fix._asdict()
        else:
            data["fix"] = None
            if ratio < args.target:
                log("warning", f"no {fg_hex} variant reaches {args.target:g}:1 on {bg_hex}")

    render_contrast_pair(data, as_json=args.json)
