#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/scale/resolver.py

import argparse

from chromalab.core.scale import generate_scale
from chromalab.shared.inputs import resolve_hex_list
from .renderer import render_scale


def resolve_scale_input(args: argparse.Namespace) -> None:
    base_hex = resolve_hex_list(args, "scale", minimum=1, default_count=1)[0]
    render_scale(base_hex, generate_scale(base_hex), as_json=args.json)
