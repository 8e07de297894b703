#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/logic/variants/resolver.py

import argparse
import json
import sys
from typing import Dict, Iterable, Mapping, Optional, Tuple

from chromokinesis.core import config as c
from chromokinesis.core.space import ColorParseError, UniformColor, to_uniform_space
from chromokinesis.shared.logger import log
from .engine import (
    PaletteEntry,
    generate_variants,
    resolve_kinds,
    step_count_from_size,
    step_size_from_count,
    validate_step_params,
)
from .renderer import palette_to_css, palette_to_json, render_palette, write_palette


class PaletteInputError(ValueError):
    """Raised when the inputs of a run are unusable; nothing is generated."""


def load_base_colors(path: str) -> Dict[str, str]:
    """Read a JSON object of base color name -> color value."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        raise PaletteInputError(f"cannot read colors file '{path}': {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise PaletteInputError(f"colors file '{path}' is not valid JSON: {exc.msg} (line {exc.lineno})") from exc

    if not isinstance(data, dict):
        raise PaletteInputError(f"colors file '{path}' must contain a JSON object of name: color pairs")
    for name, value in data.items():
        if not isinstance(value, str):
            raise PaletteInputError(f"color '{name}' in '{path}' must be a string, got {type(value).__name__}")
    return data


def validate_base_colors(colors: Mapping[str, str]) -> Dict[str, UniformColor]:
    """
    Convert every base color before any generation happens.

    A single bad value rejects the whole batch; the error lists all of them.
    """
    if not colors:
        raise PaletteInputError("no base colors given")

    converted: Dict[str, UniformColor] = {}
    failures = []
    for name, value in colors.items():
        try:
            converted[name] = to_uniform_space(value)
        except ColorParseError as exc:
            failures.append(f"{name}: {exc}")

    if failures:
        raise PaletteInputError("invalid base colors, nothing generated: " + "; ".join(failures))
    return converted


def resolve_step_params(count: Optional[int] = None, mix: Optional[float] = None) -> Tuple[int, float]:
    """Turn either a variant count or a mix step into (step_count, step_size)."""
    if (count is None) == (mix is None):
        raise PaletteInputError("exactly one of a variant count or a mix amount is required")

    if count is not None:
        if isinstance(count, bool) or not isinstance(count, int) or not c.MIN_STEPS <= count <= c.MAX_STEPS:
            raise PaletteInputError(f"count must be between {c.MIN_STEPS} and {c.MAX_STEPS}, got {count!r}")
        return count, step_size_from_count(count)

    try:
        step_count = step_count_from_size(mix)
    except (TypeError, ValueError) as exc:
        raise PaletteInputError(str(exc)) from exc
    if step_count > c.MAX_STEPS:
        raise PaletteInputError(
            f"mix amount {mix} would produce {step_count} variants per kind (max {c.MAX_STEPS})"
        )
    return step_count, mix


def build_palette(
    colors: Mapping[str, str],
    kinds: Iterable[str],
    step_count: int,
    step_size: float,
    output_mode: str,
) -> Dict[str, PaletteEntry]:
    """Generate variants for every base color, in input order."""
    try:
        validate_step_params(step_count, step_size)
        ordered_kinds = resolve_kinds(kinds)
    except ValueError as exc:
        raise PaletteInputError(str(exc)) from exc
    if output_mode not in c.OUTPUT_MODES:
        raise PaletteInputError(f"unsupported output format: '{output_mode}'")

    converted = validate_base_colors(colors)

    palette: Dict[str, PaletteEntry] = {}
    for name, base in converted.items():
        log("info", f"generating variants for {name}")
        palette[name] = generate_variants(name, base, ordered_kinds, step_count, step_size, output_mode)
    return palette


def collect_base_colors(args: argparse.Namespace) -> Dict[str, str]:
    """Merge colors files and inline NAME=VALUE pairs; later entries win."""
    colors: Dict[str, str] = {}
    for path in args.colors or []:
        colors.update(load_base_colors(path))
    for name, value in args.color or []:
        colors[name] = value
    return colors


def resolve_palette_input(args: argparse.Namespace) -> None:
    """Orchestrate input resolution, generation and output."""
    try:
        colors = collect_base_colors(args)
        if args.mix is not None:
            step_count, step_size = resolve_step_params(mix=args.mix)
        else:
            step_count, step_size = resolve_step_params(count=args.count)
        palette = build_palette(colors, args.variants, step_count, step_size, args.format)
    except PaletteInputError as exc:
        log("error", str(exc))
        sys.exit(2)

    if args.preview:
        # Keep the piped document clean
        render_palette(palette, file=sys.stderr if args.stdout else None)

    document = palette_to_css(palette) if args.css else palette_to_json(palette)
    if args.stdout:
        sys.stdout.write(document)
        return

    output = args.output or (c.DEFAULT_CSS_OUTPUT if args.css else c.DEFAULT_JSON_OUTPUT)
    try:
        write_palette(document, output)
    except OSError as exc:
        log("error", f"cannot write '{output}': {exc.strerror or exc}")
        sys.exit(1)
    log("success", f"your color variants are available in {output}")
