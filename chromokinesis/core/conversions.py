#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from chromokinesis.shared.clamping import _clamp01, _clamp255
from chromokinesis.shared.sanitizer import normalize_hex


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    if not h:
        raise ValueError(f"invalid hex value: '{hex_code}'")
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to hex string."""
    r_clamped = int(round(_clamp255(r)))
    g_clamped = int(round(_clamp255(g)))
    b_clamped = int(round(_clamp255(b)))
    return f"{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSL."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + c.HUE_SECTOR_B)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return (h, s, L)


def _sector_to_rgb(h: float, chroma: float, x: float) -> Tuple[float, float, float]:
    if 0 <= h < 60:
        return chroma, x, 0.0
    if 60 <= h < 120:
        return x, chroma, 0.0
    if 120 <= h < 180:
        return 0.0, chroma, x
    if 180 <= h < 240:
        return 0.0, x, chroma
    if 240 <= h < 300:
        return x, 0.0, chroma
    return chroma, 0.0, x


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB."""
    h = h % c.HUE_MAX
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        r_p, g_p, b_p = _sector_to_rgb(h, chroma, x)
        r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to RGB."""
    h = h % c.HUE_MAX
    chroma = v * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = v - chroma
    r_p, g_p, b_p = _sector_to_rgb(h, chroma, x)
    r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def hwb_to_rgb(h: float, w: float, b: float) -> Tuple[float, float, float]:
    """Convert HWB to RGB."""
    w = _clamp01(w)
    b = _clamp01(b)
    if w + b > c.UNIT:
        total = w + b
        w = w / total
        b = b / total
    v = c.UNIT - b
    if v <= 0.0:
        return 0.0, 0.0, 0.0
    s = _clamp01(c.UNIT - (w / v))
    return hsv_to_rgb(h, s, v)


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _signed_cbrt(v: float) -> float:
    if v >= 0:
        return v ** c.OKLAB_CUBE_ROOT_EXP
    return -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    lin = (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    l_, m_, s_ = (_signed_cbrt(sum(k * v for k, v in zip(row, lin))) for row in c.M1_OKLAB)
    ok_l, ok_a, ok_b = (row[0] * l_ + row[1] * m_ + row[2] * s_ for row in c.M2_OKLAB)
    return ok_l, ok_a, ok_b


def oklab_to_linear_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to unclipped linear sRGB."""
    lms = tuple((row[0] * L + row[1] * a + row[2] * b) ** 3 for row in c.M2_OKLAB_INV)
    r_lin, g_lin, b_lin = (sum(k * v for k, v in zip(row, lms)) for row in c.M1_OKLAB_INV)
    return r_lin, g_lin, b_lin


def oklab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to RGB, clipped to the sRGB gamut."""
    r_lin, g_lin, b_lin = oklab_to_linear_rgb(L, a, b)
    r = _linear_to_srgb(r_lin)
    g = _linear_to_srgb(g_lin)
    b = _linear_to_srgb(b_lin)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return L, chroma, hue


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to OKLCH conversion."""
    L, a_val, b_val = rgb_to_oklab(r, g, b)
    return oklab_to_oklch(L, a_val, b_val)


def oklch_to_rgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Direct OKLCH to RGB conversion."""
    L_val, a_val, b_val = oklch_to_oklab(L, chroma, hue)
    return oklab_to_rgb(L_val, a_val, b_val)


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
