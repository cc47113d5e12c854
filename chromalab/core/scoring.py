#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/scoring.py

import math
from itertools import combinations
from typing import Iterable, List

from . import config as c
from .contrast import BLACK, WHITE, contrast_ratio
from .conversions import hex_of, hex_to_rgb, rgb_to_oklch
from .difference import color_distance
from .types import PaletteScore, RGB


def _pstdev(values: List[float], center: float) -> float:
    return math.sqrt(sum((v - center) ** 2 for v in values) / len(values))


def _hue_balance(hues: List[float]) -> int:
    hues = sorted(hues)
    n = len(hues)
    gaps = [(hues[(i + 1) % n] - h + c.HUE_MAX) % c.HUE_MAX for i, h in enumerate(hues)]
    ideal_gap = c.HUE_MAX / n
    gap_dev = _pstdev(gaps, ideal_gap)
    return round(max(0.0, c.SCORE_MAX - (gap_dev / ideal_gap) * c.SCORE_MAX))


def _accessibility(rgbs: List[RGB]) -> int:
    # Each color on its own: can it carry readable text on white or on black?
    passing = sum(
        1 for rgb in rgbs
        if max(contrast_ratio(rgb, WHITE), contrast_ratio(rgb, BLACK)) >= c.SCORE_AA_RATIO
    )
    return round(passing / len(rgbs) * c.SCORE_MAX)


def _chroma_harmony(chromas: List[float]) -> int:
    avg_c = sum(chromas) / len(chromas)
    chroma_dev = _pstdev(chromas, avg_c)
    return round(max(0.0, c.SCORE_MAX - (chroma_dev / c.SCORE_CHROMA_DEV_MAX) * c.SCORE_MAX))


def _uniqueness(rgbs: List[RGB]) -> int:
    pairs = list(combinations(rgbs, 2))
    avg_dist = sum(color_distance(a, b) for a, b in pairs) / len(pairs)
    return round(min(c.SCORE_MAX, avg_dist * c.SCORE_UNIQUENESS_SCALE))


def score_palette(colors: Iterable) -> PaletteScore:
    """
    Score a palette on hue balance, accessibility, chroma harmony and uniqueness.

    Accepts hex strings, ColorStops or PaletteSlots; only the hex is read and
    everything else is derived from it. Unparsable entries are skipped, and
    fewer than two usable colors yields all zeros.
    """
    rgbs = []
    for item in colors:
        h = hex_of(item)
        if h:
            rgbs.append(hex_to_rgb(h))

    if len(rgbs) < c.SCORE_MIN_COLORS:
        return PaletteScore(0, 0, 0, 0, 0)

    oklchs = [rgb_to_oklch(*rgb) for rgb in rgbs]

    balance = _hue_balance([o.H for o in oklchs])
    accessibility = _accessibility(rgbs)
    harmony = _chroma_harmony([o.C for o in oklchs])
    uniqueness = _uniqueness(rgbs)
    overall = round((balance + accessibility + harmony + uniqueness) / 4)

    return PaletteScore(balance, accessibility, harmony, uniqueness, overall)
