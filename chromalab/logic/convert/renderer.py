#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/convert/renderer.py

import json
from typing import Dict, Optional, Tuple

from chromalab.core import config as c
from chromalab.shared.formatting import format_colorspace, to_hex_alpha
from chromalab.shared.preview import print_color_block, print_field


def render_convert_info(
    hex_code: str, values: Dict[str, Tuple], alpha: Optional[int] = None, as_json: bool = False
) -> None:
    """Print every requested format of one color."""
    if as_json:
        payload = {fmt: format_colorspace(fmt, *vals) for fmt, vals in values.items()}
        payload["alpha"] = alpha if alpha is not None else 100
        print(json.dumps(payload, indent=2))
        return

    print()
    print_color_block(hex_code, f"{c.BOLD_WHITE}color{c.RESET}")
    print()
    for fmt, vals in values.items():
        text = format_colorspace(fmt, *vals)
        if fmt == "hex" and alpha is not None:
            text = to_hex_alpha(hex_code, alpha)
        print_field(fmt, text)
    if alpha is not None:
        print_field("alpha", f"{alpha}%")
    print()
