#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/gradient/renderer.py

import json
from typing import List

from chromalab.shared.preview import label, print_color_block


def render_gradient(gradient_colors: List[str], as_json: bool = False) -> None:
    """Print the generated gradient steps to the terminal."""
    if as_json:
        print(json.dumps(gradient_colors, indent=2))
        return

    print()
    for i, hex_code in enumerate(gradient_colors):
        print_color_block(hex_code, label(f"step{i + 1:>11}"))
    print()
