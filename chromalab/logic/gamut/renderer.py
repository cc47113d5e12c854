#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/gamut/renderer.py

import json
from typing import List

from chromalab.core import config as c
from chromalab.shared.preview import label, print_color_block, print_field


def render_gamut(rows: List[dict], as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(rows, indent=2))
        return

    print()
    for row in rows:
        print_color_block(row["hex"], f"{c.BOLD_WHITE}srgb{c.RESET}", extra=f"C {row['chroma']:.4f}")
        if row["wide_gamut"]:
            print_color_block(row["expanded"], label("p3 preview"))
        print_field("wide gamut", label("yes", "success") if row["wide_gamut"] else label("no", "dim"))
        print_field("css", row["p3"])
        print()
