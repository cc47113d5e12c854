#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/types.py

from typing import Dict, NamedTuple, Optional


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: float
    s: float
    l: float


class HSV(NamedTuple):
    h: float
    s: float
    v: float


class CMYK(NamedTuple):
    c: float
    m: float
    y: float
    k: float


class OKLab(NamedTuple):
    L: float
    a: float
    b: float


class OKLCH(NamedTuple):
    L: float
    C: float
    H: float


class ColorStop(NamedTuple):
    """A canonical hex plus its derived RGB/HSL; alpha (0-100) only when translucent."""
    hex: str
    rgb: RGB
    hsl: HSL
    alpha: Optional[int] = None


class PaletteSlot(NamedTuple):
    color: ColorStop
    locked: bool = False


class ScaleStep(NamedTuple):
    step: int
    hex: str
    rgb: RGB
    hsl: HSL


class PaletteScore(NamedTuple):
    balance: int
    accessibility: int
    harmony: int
    uniqueness: int
    overall: int


class ContrastFix(NamedTuple):
    hex: str
    direction: str
    ratio: float


class UtilityColor(NamedTuple):
    role: str
    label: str
    description: str
    anchor_hue: float
    color: ColorStop
    locked: bool = False


UtilityColorSet = Dict[str, UtilityColor]
