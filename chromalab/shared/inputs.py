#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/inputs.py

import argparse
import random
import sys
from typing import List

from chromalab.core import config as c
from .logger import log


def random_hex() -> str:
    return f"#{random.randint(0, c.MAX_DEC):06X}"


def resolve_hex_list(
    args: argparse.Namespace,
    command: str,
    minimum: int = 1,
    default_count: int = 2,
    flag: str = "-H",
) -> List[str]:
    """
    Collect the input colors of a subcommand from -H/--hex or -r/--random.

    Exits with status 2 (after an error and a hint) when fewer than
    `minimum` colors were supplied.
    """
    if getattr(args, "seed", None) is not None:
        random.seed(args.seed)

    if getattr(args, "random", False):
        count = getattr(args, "count", 0) or default_count
        count = max(minimum, min(c.MAX_COUNT, count))
        return [random_hex() for _ in range(count)]

    hexes = args.hex or []
    if isinstance(hexes, str):
        hexes = [hexes]
    hexes = list(hexes)

    if len(hexes) < minimum:
        if minimum == 1:
            log("error", "a hex code is required")
            log("info", f"use 'chromalab {command} {flag} HEX' or -r for a random color")
        else:
            log("error", f"at least {minimum} hex codes are required for '{command}'")
            log("info", f"use {flag} HEX multiple times or -r")
        sys.exit(2)

    return hexes
