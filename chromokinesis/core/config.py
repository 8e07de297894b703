#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety
ACHROMATIC_EPS = 1e-6              # OKLCH chroma below which hue is powerless

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle, shorter-arc threshold
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSV
HUE_SECTOR_B = 4.0                 # Sector offset when blue is the max channel
PERCENT = 100.0                    # Fraction to percentage multiplier

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0     # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),  # Long-wavelength (L) response
    (0.2119034982, 0.6806995451, 0.1073969566),  # Medium-wavelength (M) response
    (0.0883024619, 0.2817188376, 0.6299787005),  # Short-wavelength (S) response
)

# LMS' to OKLab matrix (Perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),  # 'a' (green-red)
    (0.0259040371, 0.7827717662, -0.8086757660),  # 'b' (blue-yellow)
)

# OKLab to LMS' matrix (Inverse stage part 1)
M2_OKLAB_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS to linear sRGB matrix (Inverse stage part 2)
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# ==========================================
# Variant Generation
# ==========================================

MIN_STEPS = 1                      # Fewest variants per kind
MAX_STEPS = 100                    # Most variants per kind
DEFAULT_STEPS = 7                  # Variants per kind when nothing is requested
MIX_DECIMALS = 2                   # Precision of mix fractions and their percentages

# Reference colors in OKLCH (lightness, chroma, hue)
REFERENCE_OKLCH = {
    "tint": (1.0, 0.0, 0.0),       # White
    "shade": (0.0, 0.0, 0.0),      # Black
    "tone": (0.5, 0.0, 0.0),       # Neutral mid-gray
}

# Canonical processing order of variant kinds
VARIANT_KINDS = ("tint", "shade", "tone")

# Accepted spellings for variant kinds
VARIANT_ALIASES = {
    "tint": "tint",
    "tints": "tint",
    "shade": "shade",
    "shades": "shade",
    "tone": "tone",
    "tones": "tone",
}

# Collection keys used in the serialized palette document
VARIANT_PLURALS = {
    "tint": "tints",
    "shade": "shades",
    "tone": "tones",
}

# Supported output notations
OUTPUT_MODES = ("hex", "rgb", "hsl")

DEFAULT_JSON_OUTPUT = "custom-palette.json"
DEFAULT_CSS_OUTPUT = "custom-palette.css"
CSS_SELECTOR = ":root"

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
