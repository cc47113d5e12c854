#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/convert.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from chromalab.logic.convert.resolver import resolve_convert_input


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ChromalabArgumentParser(
        prog="chromalab convert",
        description="chromalab convert: show a color in every supported format",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-v",
        "--value",
        type=INPUT_HANDLERS["color"],
        help=(
            "color value to convert, in quotes\n"
            "examples:\n"
            '  -v "#3B82F6"\n'
            '  -v "#3B82F680"\n'
            '  -v "rgb(59, 130, 246)"\n'
            '  -v "hsl(217, 91%%, 60%%)"'
        ),
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="convert a random color",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        type=INPUT_HANDLERS["format"],
        default="all",
        choices=c.CONVERT_FORMATS + ("all",),
        help=f"target format (default: all)\nall formats: {' '.join(c.CONVERT_FORMATS)}",
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
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_convert_input(args)


if __name__ == "__main__":
    main()
