#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/utility/resolver.py

import argparse
import random
from typing import Dict, List

from chromalab.core import config as c
from chromalab.core.conversions import color_stop
from chromalab.core.types import UtilityColor
from chromalab.core.utility import generate_utility_colors, merge_utility_colors
from chromalab.shared.inputs import random_hex
from chromalab.shared.logger import log
from chromalab.shared.sanitizer import parse_hex
from .renderer import render_utility


def parse_keep_entries(entries: List[str]) -> Dict[str, str]:
    """Parse ROLE=HEX pairs; malformed entries are reported and skipped."""
    kept: Dict[str, str] = {}
    for entry in entries or []:
        role, sep, value = str(entry).partition("=")
        role = role.strip().lower()
        hex_code = parse_hex(value) if sep else None
        if role not in c.UTILITY_ROLES:
            log("warning", f"unknown utility role in --keep '{entry}', ignoring")
            continue
        if hex_code is None:
            log("warning", f"invalid hex in --keep '{entry}', ignoring")
            continue
        kept[role] = hex_code
    return kept


def resolve_utility_input(args: argparse.Namespace) -> None:
    if args.seed is not None:
        random.seed(args.seed)

    # An empty palette is valid: the canonical role hues are used
    if args.random:
        count = args.count or 5
        hexes = [random_hex() for _ in range(max(1, min(c.MAX_COUNT, count)))]
    else:
        hexes = list(args.hex or [])

    generated = generate_utility_colors(hexes)

    existing = {}
    for role, hex_code in parse_keep_entries(args.keep).items():
        label, description, anchor_hue = c.UTILITY_DEFS[role]
        existing[role] = UtilityColor(role, label, description, anchor_hue, color_stop(hex_code), locked=True)

    render_utility(hexes, merge_utility_colors(existing, generated), as_json=args.json)
