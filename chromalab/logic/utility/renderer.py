#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/utility/renderer.py

import json
from typing import List

from chromalab.core import config as c
from chromalab.core.contrast import apca_contrast, contrast_ratio, text_color
from chromalab.core.conversions import hex_to_rgb
from chromalab.core.types import UtilityColorSet
from chromalab.shared.preview import label, print_color_block


def render_utility(hexes: List[str], colors: UtilityColorSet, as_json: bool = False) -> None:
    if as_json:
        payload = {
            "palette": hexes,
            "utility": {
                role: {
                    "label": u.label,
                    "description": u.description,
                    "hex": u.color.hex,
                    "locked": u.locked,
                }
                for role, u in colors.items()
            },
        }
        print(json.dumps(payload, indent=2))
        return

    print()
    for i, hex_code in enumerate(hexes):
        print_color_block(hex_code, label(f"palette{i + 1:>11}"))
    if hexes:
        print()

    for role in c.UTILITY_ROLES:
        u = colors[role]
        rgb = u.color.rgb
        on = hex_to_rgb(text_color(rgb))
        lock = f" {c.MSG_BOLD_COLORS['warning']}locked{c.RESET}" if u.locked else ""
        extra = (
            f"{c.BOLD_WHITE}{contrast_ratio(rgb, on):5.2f}:1{c.RESET} "
            f"Lc {apca_contrast(on, rgb):6.1f}  \033[90m{u.description}{c.RESET}{lock}"
        )
        print_color_block(u.color.hex, label(role), extra=extra)
    print()
