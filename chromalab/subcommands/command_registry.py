#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/command_registry.py

from . import (
    contrast,
    convert,
    gamut,
    gradient,
    scale,
    score,
    utility,
    vision,
)

SUBCOMMANDS = {
    'convert': convert,
    'contrast': contrast,
    'scale': scale,
    'score': score,
    'utility': utility,
    'vision': vision,
    'gamut': gamut,
    'gradient': gradient,
}
