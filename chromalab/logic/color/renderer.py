#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/color/renderer.py

import argparse
import json
from typing import Any, Dict, Optional

from chromalab.core import config as c
from chromalab.shared.formatting import format_colorspace
from chromalab.shared.preview import print_color_block


def _zero_small(v: float, threshold: float = 1e-4) -> float:
    """Zero out small floating-point values below a threshold."""
    return 0.0 if abs(v) <= threshold else v


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    abs_val = min(abs(val), max_val)
    filled = max(0, min(total_len, int(total_len * abs_val / max_val)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = "\033[90m"
    filled_str = f"{color_ansi}{'█' * filled}{c.RESET}"
    empty_str = f"{empty_ansi}{'░' * empty}{c.RESET}"

    # Negative values grow from the right
    return empty_str + filled_str if val < 0 else filled_str + empty_str


def _heading(name: str, value: str) -> None:
    padding = " " * max(0, 18 - len(name))
    print(f"\n{c.MSG_BOLD_COLORS['info']}{name}{c.RESET}{padding}{c.BOLD_WHITE}: {value}{c.RESET}")


def _bar_line(letter: str, bar: str, tail: str = "") -> None:
    print(f"                    {c.BOLD_WHITE}{letter}{c.RESET} {bar}{tail}")


def _json_payload(hex_code, rgb, luminance, args, tech_data, wcag_data, apca_data) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"hex": hex_code}
    if getattr(args, "rgb", False):
        payload["rgb"] = list(rgb)
    if getattr(args, "luminance", False):
        payload["luminance"] = luminance
    for key, value in tech_data.items():
        payload[key] = value if isinstance(value, dict) else list(value)
    if wcag_data:
        payload["wcag"] = wcag_data
    if apca_data:
        payload["apca"] = apca_data
    return payload


def render_color_info(
    hex_code: str,
    title: str,
    args: argparse.Namespace,
    rgb: tuple,
    luminance: Optional[float] = None,
    tech_data: Optional[Dict[str, Any]] = None,
    wcag_data: Optional[Dict[str, Any]] = None,
    apca_data: Optional[Dict[str, Any]] = None,
    as_json: bool = False,
) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    data = tech_data or {}

    if as_json:
        print(json.dumps(_json_payload(hex_code, rgb, luminance, args, data, wcag_data, apca_data), indent=2))
        return

    print()
    print_color_block(hex_code, f"{c.BOLD_WHITE}{title}{c.RESET}")

    hide_bars = getattr(args, "hide_bars", False)
    r, g, b = rgb

    if luminance is not None and getattr(args, "luminance", False):
        _heading("luminance", f"{luminance:.6f}")
        if not hide_bars:
            _bar_line("L", _draw_bar(luminance, 1.0, 200, 200, 200))

    if getattr(args, "rgb", False):
        _heading("rgb", format_colorspace("rgb", r, g, b))
        if not hide_bars:
            for letter, val, bar_rgb in (("R", r, (255, 60, 60)), ("G", g, (60, 255, 60)), ("B", b, (60, 80, 255))):
                _bar_line(letter, _draw_bar(val, 255, *bar_rgb), f" {c.BOLD_WHITE}{val / 255 * 100:6.2f}%{c.RESET}")

    if "hsl" in data:
        h, s, l_hsl = data["hsl"]
        _heading("hsl", format_colorspace("hsl", h, s, l_hsl))
        if not hide_bars:
            _bar_line("H", _draw_bar(h, 360, 255, 200, 0))
            _bar_line("S", _draw_bar(s, 100, 0, 200, 255))
            _bar_line("L", _draw_bar(l_hsl, 100, 200, 200, 200))

    if "hsv" in data:
        h, s, v = data["hsv"]
        _heading("hsv", format_colorspace("hsv", h, s, v))
        if not hide_bars:
            _bar_line("H", _draw_bar(h, 360, 255, 200, 0))
            _bar_line("S", _draw_bar(s, 100, 0, 200, 255))
            _bar_line("V", _draw_bar(v, 100, 200, 200, 200))

    if "cmyk" in data:
        cy, m, y_cmyk, k = data["cmyk"]
        _heading("cmyk", format_colorspace("cmyk", cy, m, y_cmyk, k))
        if not hide_bars:
            _bar_line("C", _draw_bar(cy, 100, 0, 255, 255))
            _bar_line("M", _draw_bar(m, 100, 255, 0, 255))
            _bar_line("Y", _draw_bar(y_cmyk, 100, 255, 255, 0))
            _bar_line("K", _draw_bar(k, 100, 100, 100, 100))

    if "oklab" in data:
        l_ok, a_ok, b_ok = data["oklab"]
        a_comp, b_comp = _zero_small(a_ok), _zero_small(b_ok)
        _heading("oklab", format_colorspace("oklab", l_ok, a_comp, b_comp))
        if not hide_bars:
            _bar_line("L", _draw_bar(l_ok, 1.0, 200, 200, 200))
            _bar_line("A", _draw_bar(a_comp, 0.4, 60, 255, 60))
            _bar_line("B", _draw_bar(b_comp, 0.4, 60, 60, 255))

    if "oklch" in data:
        l_oklch, c_oklch, h_oklch = data["oklch"]
        _heading("oklch", format_colorspace("oklch", l_oklch, c_oklch, h_oklch))
        if not hide_bars:
            _bar_line("L", _draw_bar(l_oklch, 1.0, 200, 200, 200))
            _bar_line("C", _draw_bar(c_oklch / 0.4, 1.0, 255, 60, 255))
            _bar_line("H", _draw_bar(h_oklch, 360, 255, 200, 0))

    if "p3" in data:
        p3 = data["p3"]
        gamut_note = "wide gamut candidate" if p3["wide_gamut"] else "within sRGB comfort zone"
        _heading("p3", f"{p3['css']}  {c.MSG_BOLD_COLORS['dim']}{gamut_note}{c.RESET}")

    if wcag_data or apca_data:
        bg_ansi = f"\033[48;2;{r};{g};{b}m"
        info_c = c.MSG_BOLD_COLORS["info"]

        def fmt_level(level: str) -> str:
            color = c.MSG_BOLD_COLORS["error"] if level == c.WCAG_FAIL else c.MSG_BOLD_COLORS["success"]
            return f"{color}{level}{info_c}"

        lines = []
        for side, text_rgb in (("white", "255;255;255"), ("black", "0;0;0")):
            parts = []
            if wcag_data:
                w = wcag_data[side]
                parts.append(f"{w['ratio']:5.2f}:1 {info_c}({fmt_level(w['level'])})")
            if apca_data:
                a = apca_data[side]
                parts.append(f"{c.BOLD_WHITE}Lc {a['lc']:6.1f} {info_c}({fmt_level(a['level'])})")
            block = f"{bg_ansi}\033[1;38;2;{text_rgb}m{side:^16}{c.RESET}"
            lines.append(f"{block}  {c.BOLD_WHITE}{'  '.join(parts)}{c.RESET}")

        print(f"\n                      {lines[0]}")
        print(f"{info_c}contrast{c.RESET}          {c.BOLD_WHITE}:{c.RESET}   {bg_ansi}{' ' * 16}{c.RESET}")
        print(f"                      {lines[1]}")

    print()
