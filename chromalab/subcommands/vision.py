#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/vision.py

import argparse
import sys

from chromalab.shared.logger import ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor
from chromalab.logic.vision.resolver import resolve_vision_input


def get_vision_parser() -> argparse.ArgumentParser:
    """Create argument parser for vision command."""
    parser = ChromalabArgumentParser(
        prog="chromalab vision",
        description="chromalab vision: simulate color vision deficiencies",
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
        "-i",
        "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=100,
        help="simulation intensity: 0 to 100 (default: 100)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print machine-readable JSON",
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        "-all",
        "--all-types",
        action="store_true",
        help="show all simulation types",
    )
    simulate_group.add_argument(
        "-p",
        "--protanopia",
        action="store_true",
        help="simulate protanopia red-blind",
    )
    simulate_group.add_argument(
        "-d",
        "--deuteranopia",
        action="store_true",
        help="simulate deuteranopia green-blind",
    )
    simulate_group.add_argument(
        "-t",
        "--tritanopia",
        action="store_true",
        help="simulate tritanopia blue-yellow blind",
    )
    simulate_group.add_argument(
        "-a",
        "--achromatopsia",
        action="store_true",
        help="simulate achromatopsia total color blindness",
    )
    simulate_group.add_argument(
        "-dm",
        "--deuteranomaly",
        action="store_true",
        help="simulate deuteranomaly reduced green sensitivity",
    )
    return parser


def main() -> None:
    """Main entry point for vision command."""
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_vision_input(args)


if __name__ == "__main__":
    main()
