#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/vision/resolver.py

import argparse

from chromalab.core import config as c
from chromalab.core.vision import simulate_hex
from chromalab.shared.inputs import resolve_hex_list
from .renderer import render_vision


def resolve_vision_input(args: argparse.Namespace) -> None:
    base_hex = resolve_hex_list(args, "vision", minimum=1, default_count=1)[0]
    severity = max(0, min(100, args.intensity)) / 100.0

    selected = [
        sim_id for sim_id in c.SIM_MATRICES
        if sim_id != "normal" and (args.all_types or getattr(args, sim_id, False))
    ]
    simulations = {sim_id: simulate_hex(base_hex, sim_id, severity) for sim_id in selected}

    render_vision(base_hex, simulations, args.intensity, as_json=args.json)
