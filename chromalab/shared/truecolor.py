#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Advertise 24-bit color support so swatch previews render."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"
