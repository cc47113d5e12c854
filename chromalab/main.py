#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/main.py

import argparse
import sys

from chromalab import __version__
from chromalab.core import config as c
from chromalab.logic.color import engine
from chromalab.subcommands.command_registry import SUBCOMMANDS
from chromalab.shared.logger import log, ChromalabArgumentParser
from chromalab.shared.sanitizer import INPUT_HANDLERS
from chromalab.shared.truecolor import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Parser for the bare `chromalab` invocation, which inspects a single color."""
    parser = ChromalabArgumentParser(
        prog="chromalab",
        description="chromalab: color science for palettes, contrast and accessibility",
        epilog=f"subcommands: {', '.join(SUBCOMMANDS)}",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"chromalab {__version__}",
        help="print the chromalab version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="print this help followed by the help of every subcommand",
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="hex color code (#RGB, #RRGGBB or #RRGGBBAA)",
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="inspect a random color",
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

    info_group = parser.add_argument_group("readouts")
    info_group.add_argument(
        "-all",
        "--all-tech-infos",
        action="store_true",
        help=f"show every readout: {', '.join(c.TECH_INFO_KEYS)}",
    )
    info_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide the per-channel bars",
    )
    info_group.add_argument(
        "-rgb",
        "--red-green-blue",
        action="store_true",
        dest="rgb",
        help="show RGB values",
    )
    info_group.add_argument(
        "-l",
        "--luminance",
        action="store_true",
        help="show WCAG relative luminance",
    )
    info_group.add_argument(
        "-hsl",
        "--hue-saturation-lightness",
        action="store_true",
        dest="hsl",
        help="show HSL values",
    )
    info_group.add_argument(
        "-hsv",
        "--hue-saturation-value",
        action="store_true",
        dest="hsv",
        help="show HSV values",
    )
    info_group.add_argument(
        "-cmyk",
        "--cyan-magenta-yellow-key",
        action="store_true",
        dest="cmyk",
        help="show CMYK values",
    )
    info_group.add_argument(
        "--oklab",
        action="store_true",
        dest="oklab",
        help="show OKLAB values",
    )
    info_group.add_argument(
        "--oklch",
        action="store_true",
        dest="oklch",
        help="show OKLCH values",
    )
    info_group.add_argument(
        "-wcag",
        "--contrast",
        action="store_true",
        help="show WCAG contrast ratio against white and black",
    )
    info_group.add_argument(
        "-apca",
        "--apca",
        action="store_true",
        dest="apca",
        help="show APCA lightness contrast against white and black",
    )
    info_group.add_argument(
        "-p3",
        "--display-p3",
        action="store_true",
        dest="p3",
        help="show Display P3 coordinates and wide gamut status",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Handle -hf, reject misplaced subcommand names, then run the inspector."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("warning", f"subcommand '{name}' has no parser to describe")
        sys.exit(0)

    # A subcommand name placed after options ends up here
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args)


def main() -> None:
    """Main entry point for chromalab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
