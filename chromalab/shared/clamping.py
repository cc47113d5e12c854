#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/clamping.py

import math


def clamp(v: float, lo: float, hi: float) -> float:
    if v != v:
        return lo
    return max(lo, min(hi, v))


def _clamp01(v: float) -> float:
    return clamp(v, 0.0, 1.0)


def _finite(v: float, default: float = 0.0) -> float:
    """Replace NaN/inf with a default so it never reaches the color math."""
    try:
        v = float(v)
    except (TypeError, ValueError):
        return default
    return v if math.isfinite(v) else default
