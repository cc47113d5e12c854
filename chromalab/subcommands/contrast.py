#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/contrast.py

import argparse
import sys

from chromalab.core import config as c
from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from chromalab.logic.contrast.resolver import resolve_contrast_input


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ChromalabArgumentParser(
        prog="chromalab contrast",
        description="chromalab contrast: WCAG 2 and APCA contrast with optional repair",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="text (foreground) hex code",
    )
    parser.add_argument(
        "-bg",
        "--background",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="background hex code (default: compare against white and black)",
    )
    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random foreground",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-T",
        "--target",
        type=INPUT_HANDLERS["ratio"],
        default=c.WCAG_AA,
        help=f"target WCAG ratio for --fix ({c.WCAG_MIN_RATIO:g} to {c.WCAG_MAX_RATIO:g}, default: {c.WCAG_AA:g})",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="suggest the nearest foreground that reaches the target ratio",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print machine-readable JSON",
    )
    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_contrast_input(args)


if __name__ == "__main__":
    main()
