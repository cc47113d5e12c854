#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/vision/renderer.py

import json
from typing import Dict

from chromalab.core import config as c
from chromalab.shared.preview import label, print_color_block


def render_vision(base_hex: str, simulations: Dict[str, str], intensity: int, as_json: bool = False) -> None:
    if as_json:
        payload = {
            "base": base_hex,
            "intensity": intensity,
            "simulations": {
                sim_id: {"name": c.SIM_TYPES[sim_id][0], "hex": hx}
                for sim_id, hx in simulations.items()
            },
        }
        print(json.dumps(payload, indent=2))
        return

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}base color{c.RESET}")
    if simulations:
        print()
    for sim_id, sim_hex in simulations.items():
        name, desc = c.SIM_TYPES[sim_id]
        print_color_block(
            sim_hex,
            label(f"{sim_id[:7]}{f'{intensity}%':>11}"),
            extra=f"\033[90m{name}: {desc}{c.RESET}",
        )
    print()
