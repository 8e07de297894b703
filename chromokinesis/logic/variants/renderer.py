#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/logic/variants/renderer.py

import json
import os
import re
from typing import Any, Dict, Mapping

from chromokinesis.core import config as c
from chromokinesis.shared.preview import ensure_truecolor, print_color_block
from .engine import PaletteEntry


def palette_to_dict(palette: Mapping[str, PaletteEntry]) -> Dict[str, Dict[str, Any]]:
    """Nested document shape; empty kinds and a missing hue are left out."""
    doc: Dict[str, Dict[str, Any]] = {}
    for name, entry in palette.items():
        item: Dict[str, Any] = {}
        if entry.hue is not None:
            item["hue"] = entry.hue
        for kind in c.VARIANT_KINDS:
            variants = entry.variants.get(kind)
            if variants is None:
                continue
            item[c.VARIANT_PLURALS[kind]] = {v.name: v.value for v in variants}
        doc[name] = item
    return doc


def palette_to_json(palette: Mapping[str, PaletteEntry], indent: int = 2) -> str:
    return json.dumps(palette_to_dict(palette), indent=indent, ensure_ascii=False) + "\n"


def _css_ident(name: str) -> str:
    ident = name.strip().replace(".", "_")
    return re.sub(r"[^A-Za-z0-9_-]+", "-", ident)


def palette_to_css(palette: Mapping[str, PaletteEntry], selector: str = c.CSS_SELECTOR) -> str:
    """One custom property per base hue and per generated variant."""
    lines = [f"{selector} {{"]
    for name, entry in palette.items():
        if entry.hue is not None:
            lines.append(f"  --{_css_ident(name)}: {entry.hue};")
        for kind in c.VARIANT_KINDS:
            for variant in entry.variants.get(kind) or ():
                lines.append(f"  --{_css_ident(variant.name)}: {variant.value};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_palette(text: str, path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)


def render_palette(palette: Mapping[str, PaletteEntry], file=None) -> None:
    """Print every base color and its variants as terminal color blocks to `file` (stdout by default)."""
    ensure_truecolor()
    for name, entry in palette.items():
        print(file=file)
        if entry.hue is not None:
            title = f"{c.MSG_BOLD_COLORS['info']}{name}{c.RESET}"
            print_color_block(entry.color, entry.hue, title, file=file)
        for kind in c.VARIANT_KINDS:
            for variant in entry.variants.get(kind) or ():
                print_color_block(variant.color, variant.value, variant.name, file=file)
    print(file=file)
