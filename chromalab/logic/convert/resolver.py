#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/convert/resolver.py

import argparse
import random
import sys
from typing import Dict, Optional, Tuple

from chromalab.core import config as c
from chromalab.core import conversions as conv
from chromalab.core.wide_gamut import srgb_to_p3
from chromalab.shared.inputs import random_hex
from chromalab.shared.logger import log
from chromalab.shared.sanitizer import parse_hex_alpha
from .renderer import render_convert_info


def to_components(r: int, g: int, b: int, fmt: str) -> Tuple:
    """Components of an RGB color in one of the convert formats."""
    maps = {
        "hex": lambda: (conv.rgb_to_hex(r, g, b),),
        "rgb": lambda: (r, g, b),
        "hsl": lambda: conv.rgb_to_hsl(r, g, b),
        "hsv": lambda: conv.rgb_to_hsv(r, g, b),
        "cmyk": lambda: conv.rgb_to_cmyk(r, g, b),
        "oklab": lambda: conv.rgb_to_oklab(r, g, b),
        "oklch": lambda: conv.rgb_to_oklch(r, g, b),
        "p3": lambda: srgb_to_p3(r, g, b),
    }
    return tuple(maps[fmt]())


def resolve_convert_input(args: argparse.Namespace) -> None:
    if args.seed is not None:
        random.seed(args.seed)

    alpha: Optional[int] = None
    if args.random:
        rgb = conv.hex_to_rgb(random_hex())
    else:
        rgb = conv.parse_color(args.value)
        alpha = parse_hex_alpha(args.value)
        if rgb is None:
            log("error", f"could not parse color '{args.value}'")
            log("info", "use a hex code, rgb(r, g, b) or hsl(h, s%, l%)")
            sys.exit(2)

    formats = c.CONVERT_FORMATS if args.to_format == "all" else (args.to_format,)
    values: Dict[str, Tuple] = {fmt: to_components(*rgb, fmt) for fmt in formats}

    render_convert_info(conv.rgb_to_hex(*rgb), values, alpha, as_json=args.json)
