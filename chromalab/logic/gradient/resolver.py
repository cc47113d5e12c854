#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/gradient/resolver.py

import argparse

from chromalab.core import config as c
from chromalab.core.mixing import build_gradient
from chromalab.shared.inputs import resolve_hex_list
from .renderer import render_gradient


def resolve_gradient_input(args: argparse.Namespace) -> None:
    """Orchestrate input resolution and gradient generation."""
    colors_hex = resolve_hex_list(args, "gradient", minimum=2, default_count=2)

    num_steps = max(1, min(c.MAX_STEPS, args.steps))
    render_gradient(build_gradient(colors_hex, num_steps, args.colorspace), as_json=args.json)
