#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/contrast/renderer.py

import json

from chromalab.core import config as c
from chromalab.core import conversions as conv
from chromalab.shared.preview import label, print_color_block, print_field


def _level(text: str) -> str:
    level = "error" if text == c.WCAG_FAIL else "success"
    return label(text, level)


def _sample(fg_hex: str, bg_hex: str, text: str = "Aa sample") -> str:
    fr, fg_, fb = conv.hex_to_rgb(fg_hex)
    br, bg_, bb = conv.hex_to_rgb(bg_hex)
    return f"\033[48;2;{br};{bg_};{bb}m\033[1;38;2;{fr};{fg_};{fb}m{text:^16}{c.RESET}"


def render_contrast(data: dict, as_json: bool = False) -> None:
    """Foreground against pure white and pure black."""
    if as_json:
        print(json.dumps(data, indent=2))
        return

    fg_hex = data["foreground"]
    print()
    print_color_block(fg_hex, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print()
    print_field("luminance", f"{data['luminance']:.6f}")
    for side, bg_hex in (("white", "#FFFFFF"), ("black", "#000000")):
        wcag = data["wcag"][side]
        apca = data["apca"][side]
        print(
            f"{label(f'on {side}')}          {c.BOLD_WHITE}:{c.RESET}   {_sample(fg_hex, bg_hex)}  "
            f"{c.BOLD_WHITE}{wcag['ratio']:5.2f}:1{c.RESET} {_level(wcag['level'])}  "
            f"{c.BOLD_WHITE}Lc {apca['lc']:6.1f}{c.RESET} {_level(apca['level'])}"
        )
    print()


def render_contrast_pair(data: dict, as_json: bool = False) -> None:
    """Foreground on a specific background, with the repair suggestion if any."""
    if as_json:
        print(json.dumps(data, indent=2))
        return

    fg_hex, bg_hex = data["foreground"], data["background"]
    wcag, apca = data["wcag"], data["apca"]

    print()
    print_color_block(fg_hex, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(bg_hex, f"{c.BOLD_WHITE}background{c.RESET}")
    print()
    print_field("sample", _sample(fg_hex, bg_hex))
    print_field("wcag", f"{wcag['ratio']:.2f}:1 {_level(wcag['level'])}")
    print_field("apca", f"Lc {apca['lc']:.1f} {_level(apca['level'])}")

    fix = data.get("fix")
    if fix:
        print()
        print_color_block(
            fix["hex"],
            label(f"{fix['direction']}"),
            extra=f"{c.BOLD_WHITE}{fix['ratio']:.2f}:1{c.RESET}",
        )
        print_field("fixed sample", _sample(fix["hex"], bg_hex))
    print()
