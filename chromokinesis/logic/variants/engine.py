#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/logic/variants/engine.py

import math
from decimal import Decimal
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple, Union

from chromokinesis.core import config as c
from chromokinesis.core.space import UniformColor, format_color, to_uniform_space
from chromokinesis.shared.formatting import format_number, round_half_up


class GeneratedVariant(NamedTuple):
    name: str
    value: str
    color: UniformColor


class PaletteEntry(NamedTuple):
    """
    Everything derived from one base color.

    `variants` has a key for every kind; a kind that was not requested or
    produced nothing is None so serializers can leave it out.
    """
    name: str
    hue: Optional[str]
    color: UniformColor
    variants: Dict[str, Optional[Tuple[GeneratedVariant, ...]]]


REFERENCE_COLORS = {kind: UniformColor(*lch) for kind, lch in c.REFERENCE_OKLCH.items()}


def parse_kind(value: str) -> str:
    """Fold 'tints'/'Tint'/'tint' into the singular tag."""
    key = str(value).strip().lower()
    if key not in c.VARIANT_ALIASES:
        raise ValueError(f"unknown variant kind: '{value}'")
    return c.VARIANT_ALIASES[key]


def resolve_kinds(kinds: Iterable[str]) -> List[str]:
    """Requested kinds, deduplicated, in canonical processing order."""
    wanted = {parse_kind(k) for k in kinds}
    if not wanted:
        raise ValueError("at least one variant kind is required")
    return [k for k in c.VARIANT_KINDS if k in wanted]


def validate_step_params(step_count: int, step_size: float) -> None:
    if isinstance(step_count, bool) or not isinstance(step_count, int):
        raise ValueError(f"step count must be an integer, got {step_count!r}")
    if not c.MIN_STEPS <= step_count <= c.MAX_STEPS:
        raise ValueError(f"step count must be between {c.MIN_STEPS} and {c.MAX_STEPS}, got {step_count}")
    if not (isinstance(step_size, (int, float)) and math.isfinite(step_size) and 0.0 < step_size < 1.0):
        raise ValueError(f"step size must be greater than 0 and less than 1, got {step_size!r}")


def step_size_from_count(step_count: int) -> float:
    """Evenly spaced fractions: N variants leave N+1 equal gaps to the reference."""
    return 1.0 / (step_count + 1)


def step_count_from_size(step_size: float) -> int:
    """How many whole steps of `step_size` fit in one; exact for decimal inputs like 0.1."""
    if not 0.0 < step_size < 1.0:
        raise ValueError(f"step size must be greater than 0 and less than 1, got {step_size!r}")
    return int(Decimal(1) // Decimal(repr(step_size)))


def mix_fraction(step_size: float, index: int) -> float:
    return round_half_up(step_size * index, c.MIX_DECIMALS)


def variant_name(base_name: str, kind: str, fraction: float) -> str:
    return f"{base_name}-{kind}-{format_number(fraction * c.PERCENT, c.MIX_DECIMALS)}"


def blend(start: UniformColor, end: UniformColor, t: float) -> UniformColor:
    """Interpolate two OKLCH colors; t=0 gives start, t=1 gives end."""
    l_new = start.l + t * (end.l - start.l)
    c_new = start.c + t * (end.c - start.c)

    # A gray has no meaningful hue, so it borrows the other side's
    if start.achromatic and end.achromatic:
        h_new = 0.0
    elif start.achromatic:
        h_new = end.h % c.HUE_MAX
    elif end.achromatic:
        h_new = start.h % c.HUE_MAX
    else:
        h1, h2 = start.h % c.HUE_MAX, end.h % c.HUE_MAX
        h_diff = h2 - h1
        if h_diff > c.HUE_HALF:
            h2 -= c.HUE_MAX
        elif h_diff < -c.HUE_HALF:
            h2 += c.HUE_MAX
        h_new = (h1 + t * (h2 - h1)) % c.HUE_MAX

    return UniformColor(l_new, c_new, h_new)


def generate_variants(
    base_name: str,
    base_value: Union[str, UniformColor],
    kinds: Iterable[str],
    step_count: int,
    step_size: float,
    output_mode: str,
) -> PaletteEntry:
    """
    Blend one base color toward white, black and mid-gray.

    For each step index i (1..step_count) and each requested kind the
    mix fraction is step_size * i rounded to two decimals. Fractions of
    1 or more are skipped. A candidate is dropped when its formatted
    value equals a reference color, the base color itself, or a shade
    accepted earlier.
    """
    validate_step_params(step_count, step_size)
    if output_mode not in c.OUTPUT_MODES:
        raise ValueError(f"unsupported output format: '{output_mode}'")
    ordered_kinds = resolve_kinds(kinds)

    if isinstance(base_value, UniformColor):
        base = base_value
    else:
        base = to_uniform_space(base_value)
    hue = format_color(base, output_mode)

    reserved = {format_color(ref, output_mode) for ref in REFERENCE_COLORS.values()}
    reserved.add(hue)
    reserved.discard(None)

    collected: Dict[str, List[GeneratedVariant]] = {kind: [] for kind in ordered_kinds}
    accepted_shades = set()

    for i in range(1, step_count + 1):
        fraction = mix_fraction(step_size, i)
        for kind in ordered_kinds:
            if fraction >= c.UNIT:
                continue

            mixed = blend(base, REFERENCE_COLORS[kind], fraction)
            formatted = format_color(mixed, output_mode)
            if formatted is None:
                continue
            if formatted in reserved or formatted in accepted_shades:
                continue

            collected[kind].append(GeneratedVariant(variant_name(base_name, kind, fraction), formatted, mixed))
            if kind == "shade":
                accepted_shades.add(formatted)

    variants = {kind: None for kind in c.VARIANT_KINDS}
    for kind, items in collected.items():
        if items:
            variants[kind] = tuple(items)

    return PaletteEntry(name=base_name, hue=hue, color=base, variants=variants)
