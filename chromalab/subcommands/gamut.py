#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/gamut.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from chromalab.logic.gamut.resolver import resolve_gamut_input


def get_gamut_parser() -> argparse.ArgumentParser:
    """Create argument parser for gamut command."""
    parser = ChromalabArgumentParser(
        prog="chromalab gamut",
        description="chromalab gamut: Display P3 capability, expanded preview and display-p3 CSS",
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
        help=f"number of random colors (default: 3, max: {c.MAX_COUNT})"
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print machine-readable JSON",
    )
    return parser


def main() -> None:
    """Main entry point for gamut command."""
    parser = get_gamut_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_gamut_input(args)


if __name__ == "__main__":
    main()
