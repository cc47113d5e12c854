#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/utility.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from chromalab.logic.utility.resolver import resolve_utility_input


def get_utility_parser() -> argparse.ArgumentParser:
    """Create argument parser for utility command."""
    parser = ChromalabArgumentParser(
        prog="chromalab utility",
        description="chromalab utility: derive info, success, warning, error, neutral and focus colors from a palette",
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
        help=f"number of random colors (default: 5, max: {c.MAX_COUNT})"
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-k",
        "--keep",
        action="append",
        default=[],
        metavar="ROLE=HEX",
        help=f"lock a role to a color; roles: {', '.join(c.UTILITY_ROLES)}"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print machine-readable JSON",
    )
    return parser


def main() -> None:
    """Main entry point for utility command."""
    parser = get_utility_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_utility_input(args)


if __name__ == "__main__":
    main()
