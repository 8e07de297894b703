#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/main.py

import argparse
import sys

from chromokinesis import __version__
from chromokinesis.core import config as c
from chromokinesis.logic.variants.resolver import resolve_palette_input
from chromokinesis.shared.logger import log, set_quiet, ChromokinesisArgumentParser
from chromokinesis.shared.sanitizer import INPUT_HANDLERS


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for the palette command."""
    parser = ChromokinesisArgumentParser(
        prog="chromokinesis",
        description="chromokinesis: generate perceptually uniform tints, shades and tones from base colors",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"chromokinesis {__version__}",
        help="show program version and exit",
    )

    # Base Color Input Group
    input_group = parser.add_argument_group("base colors")
    input_group.add_argument(
        "-f",
        "--colors",
        action="append",
        metavar="PATH",
        help="JSON file mapping color names to color values (repeatable)",
    )
    input_group.add_argument(
        "-C",
        "--color",
        action="append",
        metavar="NAME=VALUE",
        type=INPUT_HANDLERS["named_color"],
        help="inline base color, e.g. -C 'red=#ff0000' (repeatable)",
    )

    # Generation Group
    gen_group = parser.add_argument_group("generation")
    gen_group.add_argument(
        "-V",
        "--variants",
        nargs="+",
        metavar="KIND",
        type=INPUT_HANDLERS["variant"],
        default=list(c.VARIANT_KINDS),
        help="variants to generate: tint, shade, tone (default: all)",
    )
    step_group = gen_group.add_mutually_exclusive_group()
    step_group.add_argument(
        "-n",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=None,
        help=f"variants per kind (default: {c.DEFAULT_STEPS}, max: {c.MAX_STEPS})",
    )
    step_group.add_argument(
        "-m",
        "--mix",
        type=INPUT_HANDLERS["mix"],
        default=None,
        help="amount to mix per step, between 0 and 1 exclusive",
    )

    # Output Group
    out_group = parser.add_argument_group("output")
    out_group.add_argument(
        "-F",
        "--format",
        type=INPUT_HANDLERS["output_mode"],
        default="hex",
        help=f"color output format: {', '.join(c.OUTPUT_MODES)} (default: hex)",
    )
    out_group.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        default=None,
        help=f"output file (default: {c.DEFAULT_JSON_OUTPUT}, or {c.DEFAULT_CSS_OUTPUT} with --css)",
    )
    out_group.add_argument(
        "--css",
        action="store_true",
        help="write CSS custom properties instead of JSON",
    )
    out_group.add_argument(
        "--stdout",
        action="store_true",
        help="print the document instead of writing a file",
    )
    out_group.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="show every generated color in the terminal",
    )
    out_group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only report warnings and errors",
    )
    return parser


def main() -> None:
    """Main entry point for chromokinesis CLI"""
    parser = get_palette_parser()
    args = parser.parse_args()

    if not args.colors and not args.color:
        log("error", "one of the arguments -f/--colors -C/--color is required")
        log("info", "use 'chromokinesis --help' for more information")
        sys.exit(2)

    if args.count is None and args.mix is None:
        args.count = c.DEFAULT_STEPS

    set_quiet(args.quiet or args.stdout)
    resolve_palette_input(args)


if __name__ == "__main__":
    main()
