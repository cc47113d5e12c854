#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/score/renderer.py

import json
from typing import List

from chromalab.core import config as c
from chromalab.core.types import PaletteScore
from chromalab.shared.preview import label, print_color_block


def _draw_bar(val: float, max_val: float = 100.0) -> str:
    """Draw an ANSI bar for a 0-100 score, colored by how good it is."""
    total_len = 20
    filled = max(0, min(total_len, int(total_len * val / max_val)))
    if val >= 75:
        color = c.MSG_COLORS["success"]
    elif val >= 50:
        color = c.MSG_COLORS["warning"]
    else:
        color = c.MSG_COLORS["error"]
    return f"{color}{'█' * filled}{c.RESET}\033[90m{'░' * (total_len - filled)}{c.RESET}"


def render_score(hexes: List[str], score: PaletteScore, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps({"colors": hexes, "score": score._asdict()}, indent=2))
        return

    print()
    for i, hex_code in enumerate(hexes):
        print_color_block(hex_code, label(f"color{i + 1:>13}"))
    print()
    for name, val in score._asdict().items():
        padding = " " * max(0, 18 - len(name))
        print(f"{label(name)}{padding}{c.BOLD_WHITE}: {val:>3}{c.RESET}  {_draw_bar(val)}")
    print()
