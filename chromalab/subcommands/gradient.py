#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/gradient.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from chromalab.logic.gradient.resolver import resolve_gradient_input


def get_gradient_parser() -> argparse.ArgumentParser:
    """Create argument parser for gradient command."""
    parser = ChromalabArgumentParser(
        prog="chromalab gradient",
        description="chromalab gradient: generate color gradients between multiple hex codes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX multiple times for inputs"
    )
    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use random colors"
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=0,
        help=f"number of random colors (default: 2, max: {c.MAX_COUNT})"
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=10,
        help=f"total steps in gradient (default: 10, max: {c.MAX_STEPS})",
    )
    parser.add_argument(
        "-cs",
        "--colorspace",
        default="oklab",
        type=INPUT_HANDLERS["colorspace"],
        choices=c.GRADIENT_SPACES,
        help="colorspace interpolation (default: oklab)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print machine-readable JSON",
    )
    return parser


def main() -> None:
    """Main entry point for gradient command."""
    parser = get_gradient_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_gradient_input(args)


if __name__ == "__main__":
    main()
