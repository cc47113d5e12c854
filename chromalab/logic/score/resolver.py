#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/score/resolver.py

import argparse

from chromalab.core.scoring import score_palette
from chromalab.shared.inputs import resolve_hex_list
from .renderer import render_score


def resolve_score_input(args: argparse.Namespace) -> None:
    hexes = resolve_hex_list(args, "score", minimum=2, default_count=5)
    render_score(hexes, score_palette(hexes), as_json=args.json)
