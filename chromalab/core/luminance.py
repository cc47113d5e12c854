#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/luminance.py

from . import config as c
from .conversions import srgb_to_linear


def relative_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * srgb_to_linear(r) +
        c.LUMA_G * srgb_to_linear(g) +
        c.LUMA_B * srgb_to_linear(b)
    )


def apca_luminance(r: int, g: int, b: int) -> float:
    """Screen luminance for APCA: a plain 2.4 power curve, not the piecewise sRGB one."""
    return (
        c.APCA_R * (r / c.RGB_MAX) ** c.APCA_TRC_EXP +
        c.APCA_G * (g / c.RGB_MAX) ** c.APCA_TRC_EXP +
        c.APCA_B * (b / c.RGB_MAX) ** c.APCA_TRC_EXP
    )
