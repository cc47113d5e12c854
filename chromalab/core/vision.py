#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/vision.py

from typing import Iterable, List, Optional, Tuple

from . import config as c
from .conversions import hex_to_rgb, linear_to_srgb, rgb_to_hex, srgb_to_linear
from .types import RGB
from chromalab.shared.clamping import _clamp01, _finite


def apply_sim_matrix(rgb: Tuple[int, int, int], matrix_id: str, severity: float = 1.0) -> RGB:
    """
    Simulate a color vision deficiency on one RGB color.

    The matrix is applied in linear sRGB; severity blends linearly between the
    original (0.0) and the full simulation (1.0). Unknown ids leave the color as is.
    """
    matrix = c.SIM_MATRICES.get(matrix_id)
    r, g, b = rgb
    if matrix is None:
        return RGB(r, g, b)

    f = _clamp01(_finite(severity, 1.0))
    r_lin, g_lin, b_lin = srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)

    rr_sim = r_lin * matrix[0] + g_lin * matrix[1] + b_lin * matrix[2]
    gg_sim = r_lin * matrix[3] + g_lin * matrix[4] + b_lin * matrix[5]
    bb_sim = r_lin * matrix[6] + g_lin * matrix[7] + b_lin * matrix[8]

    rr_lin = _clamp01((1 - f) * r_lin + f * rr_sim)
    gg_lin = _clamp01((1 - f) * g_lin + f * gg_sim)
    bb_lin = _clamp01((1 - f) * b_lin + f * bb_sim)

    return RGB(
        round(linear_to_srgb(rr_lin) * c.RGB_MAX),
        round(linear_to_srgb(gg_lin) * c.RGB_MAX),
        round(linear_to_srgb(bb_lin) * c.RGB_MAX),
    )


def simulate_hex(hex_code: str, matrix_id: str, severity: float = 1.0) -> Optional[str]:
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        return None
    return rgb_to_hex(*apply_sim_matrix(rgb, matrix_id, severity))


def simulate_palette(hexes: Iterable[str], matrix_id: str, severity: float = 1.0) -> List[str]:
    """Simulate every color of a palette; unparsable entries pass through untouched."""
    out = []
    for h in hexes:
        sim = simulate_hex(h, matrix_id, severity)
        out.append(sim if sim is not None else h)
    return out
