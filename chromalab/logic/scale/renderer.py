#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/scale/renderer.py

import json
from typing import List

from chromalab.core import config as c
from chromalab.core.conversions import rgb_to_oklch
from chromalab.core.types import ScaleStep
from chromalab.shared.formatting import to_css_oklch
from chromalab.shared.preview import label, print_color_block


def render_scale(base_hex: str, steps: List[ScaleStep], as_json: bool = False) -> None:
    if as_json:
        payload = {
            "base": base_hex,
            "steps": [
                {"step": s.step, "hex": s.hex, "rgb": list(s.rgb), "hsl": [round(v, 2) for v in s.hsl]}
                for s in steps
            ],
        }
        print(json.dumps(payload, indent=2))
        return

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}base{c.RESET}")
    print()
    for s in steps:
        print_color_block(s.hex, label(f"{s.step:>4}"), extra=to_css_oklch(rgb_to_oklch(*s.rgb)))
    print()
