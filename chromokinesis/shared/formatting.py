#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/shared/formatting.py

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round the way people expect (0.125 -> 0.13), not banker's rounding."""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float, decimals: int = 2) -> str:
    """Compact number: at most `decimals` places, no trailing zeros, no '-0'."""
    v = round_half_up(value, decimals) + 0.0
    if v == int(v):
        return str(int(v))
    return repr(v)


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return f"#{args[0].lower()}"
    elif fmt == 'rgb':
        r, g, b = (int(round(v)) for v in args)
        return f"rgb({r}, {g}, {b})"
    elif fmt == 'hsl':
        h, s, l = args
        h = round_half_up(h, 2) % 360.0
        return f"hsl({format_number(h)}, {format_number(s * 100)}%, {format_number(l * 100)}%)"

    return ""
