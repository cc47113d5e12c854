#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/scale.py

import argparse
import sys

from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from chromalab.logic.scale.resolver import resolve_scale_input


def get_scale_parser() -> argparse.ArgumentParser:
    """Create argument parser for scale command."""
    parser = ChromalabArgumentParser(
        prog="chromalab scale",
        description="chromalab scale: 11-step tint and shade scale (50 to 950)",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        help="base hex code",
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random base",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print machine-readable JSON",
    )
    return parser


def main() -> None:
    """Main entry point for scale command."""
    parser = get_scale_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_scale_input(args)


if __name__ == "__main__":
    main()
