#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/mixing.py

from typing import Iterable, List, Tuple

from . import config as c
from . import conversions as conv
from .types import RGB
from chromalab.shared.clamping import _clamp01, _finite, clamp


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _lerp_hue(h1: float, h2: float, t: float) -> float:
    h1, h2 = h1 % c.HUE_MAX, h2 % c.HUE_MAX
    h_diff = h2 - h1
    if h_diff > c.HUE_HALF:
        h2 -= c.HUE_MAX
    elif h_diff < -c.HUE_HALF:
        h2 += c.HUE_MAX
    return _lerp(h1, h2, t) % c.HUE_MAX


def convert_rgb_to_space(r: int, g: int, b: int, colorspace: str) -> Tuple[float, ...]:
    """Convert RGB to components in the specified colorspace."""
    if colorspace == "srgblinear":
        return (conv.srgb_to_linear(r), conv.srgb_to_linear(g), conv.srgb_to_linear(b))
    if colorspace == "hsl":
        return tuple(conv.rgb_to_hsl(r, g, b))
    if colorspace == "oklab":
        return tuple(conv.rgb_to_oklab(r, g, b))
    if colorspace == "oklch":
        return tuple(conv.rgb_to_oklch(r, g, b))
    return (float(r), float(g), float(b))


def get_interpolated_color(c1, c2, t: float, colorspace: str) -> RGB:
    """Interpolate between two colors already expressed in the given colorspace."""
    if colorspace == "srgblinear":
        return RGB(*(
            round(conv.linear_to_srgb(_lerp(a, b, t)) * c.RGB_MAX) for a, b in zip(c1, c2)
        ))

    if colorspace == "hsl":
        return conv.hsl_to_rgb(_lerp_hue(c1[0], c2[0], t), _lerp(c1[1], c2[1], t), _lerp(c1[2], c2[2], t))

    if colorspace == "oklab":
        return conv.oklab_to_rgb(_lerp(c1[0], c2[0], t), _lerp(c1[1], c2[1], t), _lerp(c1[2], c2[2], t))

    if colorspace == "oklch":
        return conv.oklch_to_rgb(_lerp(c1[0], c2[0], t), _lerp(c1[1], c2[1], t), _lerp_hue(c1[2], c2[2], t))

    return RGB(*(int(clamp(round(_lerp(a, b, t)), 0, c.RGB_MAX)) for a, b in zip(c1, c2)))


def _mix(a, b, t: float, colorspace: str) -> RGB:
    t = _clamp01(_finite(t))
    return get_interpolated_color(
        convert_rgb_to_space(*a, colorspace),
        convert_rgb_to_space(*b, colorspace),
        t,
        colorspace,
    )


def mix_rgb(a, b, t: float) -> RGB:
    return _mix(a, b, t, "srgb")


def mix_hsl(a, b, t: float) -> RGB:
    """Mix in HSL along the shorter way around the hue wheel."""
    return _mix(a, b, t, "hsl")


def mix_oklab(a, b, t: float) -> RGB:
    return _mix(a, b, t, "oklab")


def mix_oklch(a, b, t: float) -> RGB:
    """Mix in OKLCH; the result is gamut-mapped at fixed lightness and hue."""
    return _mix(a, b, t, "oklch")


def build_gradient(hexes: Iterable[str], steps: int, colorspace: str = "oklab") -> List[str]:
    """
    Evenly spaced multi-stop gradient through the given colors.

    Unparsable stops are dropped and fewer than two usable stops gives an empty
    list. Unknown colorspaces fall back to OKLab.
    """
    rgbs = [rgb for rgb in (conv.hex_to_rgb(h) for h in hexes) if rgb]
    if len(rgbs) < 2:
        return []
    if colorspace not in c.GRADIENT_SPACES:
        colorspace = "oklab"

    num_steps = int(clamp(int(_finite(steps, 1)), 1, c.MAX_STEPS))
    if num_steps == 1:
        return [conv.rgb_to_hex(*rgbs[0])]

    colors_in_space = [convert_rgb_to_space(*rgb, colorspace) for rgb in rgbs]
    num_segments = len(colors_in_space) - 1
    total_intervals = num_steps - 1
    gradient_colors: List[str] = []

    for i in range(num_steps):
        t_scaled = (i / total_intervals) * num_segments
        idx = min(int(t_scaled), num_segments - 1)
        if i == total_intervals:
            # Land exactly on the last stop
            rgb = rgbs[-1]
        elif t_scaled == idx:
            rgb = rgbs[idx]
        else:
            rgb = get_interpolated_color(colors_in_space[idx], colors_in_space[idx + 1], t_scaled - idx, colorspace)
        gradient_colors.append(conv.rgb_to_hex(*rgb))

    return gradient_colors
