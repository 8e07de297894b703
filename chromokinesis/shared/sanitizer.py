#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/shared/sanitizer.py

import argparse
import math
import re
from typing import Tuple

from chromokinesis.core import config as c

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{3,8})")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a hex color into a standard 6-character uppercase hex.

    Accepts an optional leading '#' and the 3, 4, 6 and 8 digit forms.
    The alpha digit(s) of the 4 and 8 digit forms are dropped. Anything
    else yields an empty string.
    """
    if value is None:
        return ""
    m = _HEX_RE.fullmatch(str(value).strip())
    if not m:
        return ""

    digits = m.group(1).upper()
    L = len(digits)
    if L in (3, 4):
        # e.g., 'ABC' becomes 'AABBCC'
        return "".join(ch * 2 for ch in digits[:3])
    if L in (6, 8):
        return digits[:6]
    return ""


def _extract_float(value: str) -> float:
    """Parses a plain float, rejecting non-finite values."""
    if value is None:
        return None
    try:
        val = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(val):
        return None
    return val


def _extract_int(value: str) -> int:
    """Parses a plain base-10 integer."""
    if value is None:
        return None
    s = str(value).strip()
    if not re.fullmatch(r"[-+]?\d+", s):
        return None
    return int(s)


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_step_count(v: str) -> int:
    """Validator for the number of variants per kind. Out-of-range values are rejected."""
    val = _extract_int(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")
    if not c.MIN_STEPS <= val <= c.MAX_STEPS:
        raise argparse.ArgumentTypeError(
            f"count must be between {c.MIN_STEPS} and {c.MAX_STEPS}, got {val}"
        )
    return val


def handle_mix_amount(v: str) -> float:
    """Validator for the mix step, which must lie strictly between 0 and 1."""
    val = _extract_float(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")
    if not 0.0 < val < 1.0:
        raise argparse.ArgumentTypeError(
            f"mix amount has to be greater than 0 and less than 1, got {val}"
        )
    return val


def handle_output_mode(v: str) -> str:
    """Validator for the output notation."""
    cleaned = str(v).strip().lower()
    if cleaned not in c.OUTPUT_MODES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid output format: '{raw}' (choose from {', '.join(c.OUTPUT_MODES)})"
        )
    return cleaned


def handle_variant_kind(v: str) -> str:
    """Validator for variant kinds; plural spellings are folded to the singular tag."""
    cleaned = str(v).strip().lower()
    if cleaned not in c.VARIANT_ALIASES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid variant: '{raw}' (choose from {', '.join(c.VARIANT_KINDS)})"
        )
    return c.VARIANT_ALIASES[cleaned]


def handle_named_color(v: str) -> Tuple[str, str]:
    """Validator for inline NAME=VALUE base colors."""
    name, sep, value = str(v).partition("=")
    name = name.strip()
    value = value.strip()
    if not sep or not name or not value:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got: '{raw}'")
    return name, value


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "count": handle_step_count,
    "mix": handle_mix_amount,
    "output_mode": handle_output_mode,
    "variant": handle_variant_kind,
    "named_color": handle_named_color,
}
