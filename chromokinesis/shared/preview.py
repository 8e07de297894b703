#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/shared/preview.py

import os
import re
import sys

from chromokinesis.core import config as c
from chromokinesis.core import conversions as conv
from chromokinesis.core.space import UniformColor

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def ensure_truecolor() -> None:
    """Advertise 24-bit color support so preview blocks render."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(color: UniformColor, value: str, title: str = "color", end: str = "\n", file=None) -> None:
    r, g, b = (int(round(v)) for v in conv.oklch_to_rgb(*color))
    padding = " " * max(0, 24 - get_visible_len(title))

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{value}{c.RESET}", end=end, file=file)
