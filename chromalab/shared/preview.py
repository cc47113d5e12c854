#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/preview.py

import re

from chromalab.core import config as c
from chromalab.core.conversions import hex_to_rgb

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def label(text: str, level: str = "info") -> str:
    return f"{c.MSG_BOLD_COLORS[level]}{text}{c.RESET}"


def print_color_block(hex_code: str, title: str = "color", extra: str = "", end: str = "\n") -> None:
    """One swatch line: title, a truecolor block, the hex and optional trailing text."""
    r, g, b = hex_to_rgb(hex_code)
    padding = " " * max(0, 18 - get_visible_len(title))
    tail = f"  {extra}" if extra else ""

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}"
        f"  {c.BOLD_WHITE}{hex_code}{c.RESET}{tail}",
        end=end,
    )


def print_field(name: str, value: str) -> None:
    padding = " " * max(0, 18 - len(name))
    print(f"{label(name)}{padding}{c.BOLD_WHITE}: {value}{c.RESET}")
