#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/shared/parser.py

import math
import re
from typing import List, Tuple

from chromokinesis.core import config as c
from chromokinesis.core import conversions as conv
from chromokinesis.core.color_names import COLOR_NAMES
from .clamping import _clamp01
from .sanitizer import normalize_hex

# Chroma that 100% stands for in oklab()/oklch() (Source: CSS Color Module Level 4)
OKLAB_PERCENT_REF = 0.4

_FUNC_RE = re.compile(r"^([a-zA-Z]+)\s*\((.*)\)$", re.DOTALL)
_TOKEN_RE = re.compile(r"^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)(%|deg|grad|rad|turn)?$", re.IGNORECASE)

_HUE_UNITS = {
    None: 1.0,
    "deg": 1.0,
    "grad": 360.0 / 400.0,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}


def _normalize_value_string(s: str) -> str:
    """
    Normalizes the input color string to make matching easier.
    It strips surrounding quotes and whitespace and standardizes
    angle symbols.
    """
    if not s:
        return ""
    s = s.strip()

    # Remove matching surrounding quotes or backticks
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()

    s = s.replace('°', 'deg')
    return s


def _split_arguments(body: str) -> List[str]:
    """
    Splits the inside of a functional notation into its channel tokens.
    Both the legacy comma syntax and the modern space syntax are accepted;
    alpha (after a '/', or the fourth comma-separated value) is dropped.
    """
    if '/' in body:
        return [t for t in re.split(r"\s+", body.split('/', 1)[0].strip()) if t]
    if ',' in body:
        tokens = [t.strip() for t in body.split(',')]
        return tokens[:3] if len(tokens) == 4 else tokens
    return [t for t in re.split(r"\s+", body.strip()) if t]


def _parse_token(token: str) -> Tuple[float, str]:
    """Parses one channel token into its number and its unit (or None)."""
    if token.lower() == "none":
        return 0.0, None
    m = _TOKEN_RE.match(token)
    if not m:
        raise ValueError(f"invalid channel value '{token}'")
    val = float(m.group(1))
    if not math.isfinite(val):
        raise ValueError(f"non-finite channel value '{token}'")
    unit = m.group(2).lower() if m.group(2) else None
    return val, unit


def _parse_hue(token: str) -> float:
    val, unit = _parse_token(token)
    if unit == "%":
        raise ValueError(f"invalid hue '{token}'")
    deg = val * _HUE_UNITS[unit]
    if not math.isfinite(deg):
        raise ValueError(f"hue out of range '{token}'")
    return deg % c.HUE_MAX


def _parse_fraction(token: str) -> float:
    """Percentage-like channel: '50%' and '50' both mean one half."""
    val, unit = _parse_token(token)
    if unit not in (None, "%"):
        raise ValueError(f"invalid percentage '{token}'")
    return val / c.PERCENT


def _parse_rgb_channel(token: str) -> float:
    val, unit = _parse_token(token)
    if unit == "%":
        return _clamp01(val / c.PERCENT) * c.RGB_MAX
    if unit is not None:
        raise ValueError(f"invalid rgb channel '{token}'")
    return max(0.0, min(c.RGB_MAX, val))


def _parse_ok_lightness(token: str) -> float:
    val, unit = _parse_token(token)
    if unit == "%":
        return val / c.PERCENT
    if unit is not None:
        raise ValueError(f"invalid lightness '{token}'")
    return val


def _parse_ok_axis(token: str) -> float:
    val, unit = _parse_token(token)
    if unit == "%":
        return val / c.PERCENT * OKLAB_PERCENT_REF
    if unit is not None:
        raise ValueError(f"invalid channel value '{token}'")
    return val


def _three(args: List[str], model_name: str) -> List[str]:
    if len(args) != 3:
        raise ValueError(f"{model_name}() expects 3 channels, got {len(args)}")
    return args


def parse_rgb_string(args: List[str]) -> Tuple[float, float, float]:
    r, g, b = (_parse_rgb_channel(t) for t in _three(args, "rgb"))
    return r, g, b


def parse_hsl_string(args: List[str]) -> Tuple[float, float, float]:
    h_t, s_t, l_t = _three(args, "hsl")
    return _parse_hue(h_t), _clamp01(_parse_fraction(s_t)), _clamp01(_parse_fraction(l_t))


def parse_hwb_string(args: List[str]) -> Tuple[float, float, float]:
    h_t, w_t, b_t = _three(args, "hwb")
    return _parse_hue(h_t), _clamp01(_parse_fraction(w_t)), _clamp01(_parse_fraction(b_t))


def parse_oklab_string(args: List[str]) -> Tuple[float, float, float]:
    l_t, a_t, b_t = _three(args, "oklab")
    return _clamp01(_parse_ok_lightness(l_t)), _parse_ok_axis(a_t), _parse_ok_axis(b_t)


def parse_oklch_string(args: List[str]) -> Tuple[float, float, float]:
    l_t, c_t, h_t = _three(args, "oklch")
    return _clamp01(_parse_ok_lightness(l_t)), max(0.0, _parse_ok_axis(c_t)), _parse_hue(h_t)


# Central dictionary to map functional notations to their parser and the space they yield
STRING_PARSERS = {
    'rgb': ('rgb', parse_rgb_string),
    'rgba': ('rgb', parse_rgb_string),
    'hsl': ('hsl', parse_hsl_string),
    'hsla': ('hsl', parse_hsl_string),
    'hwb': ('hwb', parse_hwb_string),
    'oklab': ('oklab', parse_oklab_string),
    'oklch': ('oklch', parse_oklch_string),
}


def parse_color_string(s: str) -> Tuple[str, Tuple[float, float, float]]:
    """
    Parses any supported textual color notation.

    Returns the name of the space the channels are expressed in
    ('rgb', 'hsl', 'hwb', 'oklab' or 'oklch') together with the channels.
    Hex codes and CSS color names are returned as 'rgb' on a 0-255 scale.
    Raises ValueError when the text is not a recognised color.
    """
    if not isinstance(s, str):
        raise ValueError(f"expected a color string, got {type(s).__name__}")
    text = _normalize_value_string(s)
    if not text:
        raise ValueError("empty color string")

    lowered = text.lower()
    if lowered in COLOR_NAMES:
        r, g, b = conv.hex_to_rgb(COLOR_NAMES[lowered])
        return 'rgb', (float(r), float(g), float(b))

    m = _FUNC_RE.match(text)
    if m:
        func = m.group(1).lower()
        if func not in STRING_PARSERS:
            raise ValueError(f"unsupported color notation '{func}()'")
        space, parser = STRING_PARSERS[func]
        return space, parser(_split_arguments(m.group(2)))

    if normalize_hex(text):
        r, g, b = conv.hex_to_rgb(text)
        return 'rgb', (float(r), float(g), float(b))

    raise ValueError(f"could not parse color '{s}'")
