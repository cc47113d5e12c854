#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/color/resolver.py

import argparse
import random
import sys
from typing import Tuple

from chromalab.shared.inputs import random_hex
from chromalab.shared.logger import log


def resolve_color_input(args: argparse.Namespace) -> Tuple[str, str]:
    """Resolve raw CLI input into a base hex"""

    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        return random_hex(), "random"
    if args.hex:
        return args.hex, "current"

    log("error", "one of the arguments -H/--hex -r/--random is required")
    log("info", "use 'chromalab --help' for more information")
    sys.exit(2)
