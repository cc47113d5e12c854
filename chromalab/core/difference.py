#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/difference.py

import math
from typing import Tuple

from .conversions import rgb_to_oklab


def delta_e_euclidean_oklab(
    oklab1: Tuple[float, float, float], oklab2: Tuple[float, float, float]
) -> float:
    """
    Calculate the Euclidean distance between two OKLab colors.
    OKLab Euclidean distance provides a fast and accurate perceptual metric.
    """
    l1, a1, b1 = oklab1
    l2, a2, b2 = oklab2
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def color_distance(rgb1: Tuple[int, int, int], rgb2: Tuple[int, int, int]) -> float:
    """Perceptual distance between two RGB colors, measured in OKLab."""
    return delta_e_euclidean_oklab(rgb_to_oklab(*rgb1), rgb_to_oklab(*rgb2))
