#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/core/space.py

"""
OKLCH as the working space for variant generation.

`to_uniform_space` turns any supported textual color into an OKLCH
triple and `format_color` renders such a triple back into one of the
output notations (hex, rgb, hsl).
"""

import math
from typing import NamedTuple, Optional

from . import config as c
from . import conversions as conv
from chromokinesis.shared.formatting import format_colorspace
from chromokinesis.shared.parser import parse_color_string

RGB_NOISE_DECIMALS = 4


class ColorParseError(ValueError):
    """Raised when a text is not a recognised color."""

    def __init__(self, value, reason: str = ""):
        self.value = value
        self.reason = reason
        msg = f"invalid color value: '{value}'"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class UniformColor(NamedTuple):
    l: float
    c: float
    h: float

    @property
    def achromatic(self) -> bool:
        return self.c < c.ACHROMATIC_EPS

    def __str__(self) -> str:
        return f"oklch({self.l:.4f} {self.c:.4f} {self.h:.2f}deg)"


def to_uniform_space(value: str) -> UniformColor:
    """Parse a textual color into OKLCH. Raises ColorParseError."""
    try:
        space, channels = parse_color_string(value)
    except ValueError as exc:
        raise ColorParseError(value, str(exc)) from exc

    if space == 'oklch':
        return UniformColor(*channels)
    if space == 'oklab':
        return UniformColor(*conv.oklab_to_oklch(*channels))
    if space == 'hsl':
        channels = conv.hsl_to_rgb(*channels)
    elif space == 'hwb':
        channels = conv.hwb_to_rgb(*channels)
    return UniformColor(*conv.rgb_to_oklch(*channels))


def format_color(color: UniformColor, mode: str) -> Optional[str]:
    """
    Render an OKLCH color in the requested notation.

    Out-of-gamut colors are clipped to sRGB. Returns None when the color
    has no renderable value (a non-finite channel).
    """
    if mode not in c.OUTPUT_MODES:
        raise ValueError(f"unsupported output format: '{mode}'")
    if not all(math.isfinite(v) for v in color):
        return None

    try:
        rgb = conv.oklch_to_rgb(*color)
    except OverflowError:
        return None
    if not all(math.isfinite(v) for v in rgb):
        return None

    if mode == 'hex':
        return format_colorspace('hex', conv.rgb_to_hex(*rgb))
    if mode == 'rgb':
        return format_colorspace('rgb', *rgb)
    # Conversion noise near white/gray would otherwise surface as saturation
    r, g, b = (round(v, RGB_NOISE_DECIMALS) for v in rgb)
    return format_colorspace('hsl', *conv.rgb_to_hsl(r, g, b))
