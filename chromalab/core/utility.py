#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/utility.py

from typing import Iterable, List, Mapping, Optional

from . import config as c
from .conversions import color_stop, hex_of, hex_to_rgb, oklch_to_hex, rgb_to_oklch
from .types import OKLCH, UtilityColor, UtilityColorSet
from chromalab.shared.clamping import clamp


def hue_distance(a: float, b: float) -> float:
    """Shortest angular distance between two hues, 0-180."""
    d = abs(a - b) % c.HUE_MAX
    return min(d, c.HUE_MAX - d)


def _palette_oklch(palette: Iterable) -> List[OKLCH]:
    out = []
    for item in palette or ():
        h = hex_of(item)
        if h:
            out.append(rgb_to_oklch(*hex_to_rgb(h)))
    return out


def _target_lightness(avg_l: float) -> float:
    if avg_l > c.UTILITY_LIGHT_PALETTE_L:
        avg_l -= c.UTILITY_L_SHIFT
    elif avg_l < c.UTILITY_DARK_PALETTE_L:
        avg_l += c.UTILITY_L_SHIFT
    return clamp(avg_l, *c.UTILITY_TARGET_L)


def _resolve_role_hue(
    role: str, colors: List[OKLCH], target_l: float, target_c: float
) -> float:
    """
    Pick the hue for a semantic role.

    Palette colors inside the role's arc compete on hue fit, lightness fit and
    chroma fit, and the winner's hue is used as is. With no palette color in the
    arc, the nearest palette hue is blended toward the role center; the closer it
    is, the more of the palette hue survives.
    """
    center, arc = c.ROLE_HUES[role]
    if not colors:
        return center

    best = None
    best_score = None
    for col in colors:
        d = hue_distance(col.H, center)
        if d > arc:
            continue
        score = (
            (c.UNIT - d / arc) * c.UTILITY_WEIGHT_HUE
            + (c.UNIT - abs(col.L - target_l)) * c.UTILITY_WEIGHT_L
            + (c.UNIT - abs(col.C - target_c)) * c.UTILITY_WEIGHT_C
        )
        if best_score is None or score > best_score:
            best, best_score = col, score
    if best is not None:
        return best.H

    nearest = min(colors, key=lambda col: hue_distance(col.H, center))
    d = hue_distance(nearest.H, center)
    blend = clamp(c.UNIT - d / c.UTILITY_BLEND_DISTANCE, 0.0, c.UTILITY_BLEND_MAX)
    delta = ((center - nearest.H + 540.0) % c.HUE_MAX) - c.HUE_HALF
    return (nearest.H + delta * (c.UNIT - blend) + c.HUE_MAX) % c.HUE_MAX


def _warning_lightness(target_l: float, hue: float) -> float:
    # Yellow reads brighter than other hues at the same L
    yellowness = max(0.0, c.UNIT - hue_distance(hue, c.WARNING_YELLOW_HUE) / c.WARNING_YELLOW_SPREAD)
    return clamp(target_l - yellowness * c.WARNING_L_PENALTY, *c.WARNING_L_CLAMP)


def _make_utility(role: str, L: float, C: float, H: float) -> UtilityColor:
    label, description, anchor_hue = c.UTILITY_DEFS[role]
    return UtilityColor(role, label, description, anchor_hue, color_stop(oklch_to_hex(L, C, H)))


def generate_utility_colors(palette: Optional[Iterable]) -> UtilityColorSet:
    """
    Derive info/success/warning/error/neutral/focus colors that sit with a palette.

    Lightness and chroma targets follow the palette averages; the most
    chromatic palette color acts as the primary for neutral and focus.
    """
    colors = _palette_oklch(palette)

    if colors:
        avg_l = sum(col.L for col in colors) / len(colors)
        avg_c = sum(col.C for col in colors) / len(colors)
        # max() keeps the first of equally chromatic colors
        primary = max(colors, key=lambda col: col.C)
    else:
        avg_l, avg_c = c.UTILITY_DEFAULT_L, c.UTILITY_DEFAULT_C
        primary = OKLCH(*c.UTILITY_DEFAULT_PRIMARY)

    target_l = _target_lightness(avg_l)
    target_c = clamp(avg_c * c.UTILITY_C_FACTOR + c.UTILITY_C_FLOOR, *c.UTILITY_TARGET_C)

    hues = {
        role: _resolve_role_hue(role, colors, target_l, target_c)
        for role in c.ROLE_HUES
    }

    warning_l = _warning_lightness(target_l, hues["warning"])

    return {
        "info": _make_utility("info", target_l, target_c, hues["info"]),
        "success": _make_utility("success", target_l, target_c, hues["success"]),
        "warning": _make_utility(
            "warning",
            warning_l,
            clamp(target_c * c.WARNING_C_FACTOR, *c.WARNING_C_CLAMP),
            hues["warning"],
        ),
        "error": _make_utility(
            "error",
            target_l,
            clamp(target_c * c.ERROR_C_FACTOR, *c.ERROR_C_CLAMP),
            hues["error"],
        ),
        "neutral": _make_utility(
            "neutral",
            clamp(target_l + c.NEUTRAL_L_SHIFT, *c.NEUTRAL_L_CLAMP),
            clamp(primary.C * c.NEUTRAL_C_FACTOR, *c.NEUTRAL_C_CLAMP),
            primary.H,
        ),
        "focus": _make_utility(
            "focus",
            clamp(primary.L, *c.FOCUS_L_CLAMP),
            clamp(primary.C, *c.FOCUS_C_CLAMP),
            primary.H,
        ),
    }


def merge_utility_colors(
    existing: Optional[Mapping[str, UtilityColor]], generated: UtilityColorSet
) -> UtilityColorSet:
    """Locked roles in existing survive; every other role comes from generated."""
    existing = existing or {}
    result = {}
    for role in c.UTILITY_ROLES:
        current = existing.get(role)
        result[role] = current if current is not None and current.locked else generated[role]
    return result


def set_role_lock(colors: Mapping[str, UtilityColor], role: str, locked: bool = True) -> UtilityColorSet:
    if role not in colors:
        raise KeyError(role)
    result = dict(colors)
    result[role] = result[role]._replace(locked=locked)
    return result
