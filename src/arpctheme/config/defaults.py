"""Centralized defaults for the ARPC theme.

All magic constants used by the theme, logo, and export modules are
collected here so that no other module hardcodes sizes or colors.
"""

from __future__ import annotations

# Base font size in points (theme.py)
DEFAULT_BASE_SIZE: float = 11.0

# ggplot-style line/rect sizes are expressed in millimetres; base_size / 22
LINE_SIZE_DIVISOR: float = 22.0

# Points per millimetre (72.27 pt per inch / 25.4 mm per inch)
PT_PER_MM: float = 72.27 / 25.4

# Relative text sizes, as multiples of base_size
REL_TITLE: float = 1.2
REL_SUBTITLE: float = 0.9
REL_AXIS_TITLE: float = 0.9
REL_AXIS_TEXT: float = 0.8
REL_LEGEND_TITLE: float = 0.9
REL_LEGEND_TEXT: float = 0.8

# Major grid line width relative to base_line_size
REL_GRID_LINE: float = 0.5

# Grey levels (R's greyNN: NN percent lightness)
GREY30: str = "#4D4D4D"
GREY40: str = "#666666"
GREY50: str = "#7F7F7F"
GREY90: str = "#E5E5E5"

# Serif families tried in order before falling back to "serif" (fonts.py)
COMPUTER_MODERN_FONTS: tuple[str, ...] = (
    "CM Roman",
    "Computer Modern",
    "CMU Serif",
    "Latin Modern Roman",
    "TeX Gyre Termes",
)
FALLBACK_FONT_FAMILY: str = "serif"

# Logo overlay (logo.py)
DEFAULT_LOGO_SIZE: float = 0.3
DEFAULT_LOGO_ALPHA: float = 0.8
LOGO_PATH_ENV_VAR: str = "ARPC_LOGO_PATH"
LOGO_ASSET_NAMES: tuple[str, ...] = ("arpc_logo.png", "arpc_logo.pdf")
NON_PNG_ASPECT_RATIO: float = 1.5

# Figure export (export.py)
DEFAULT_DPI: int = 300
DEFAULT_BACKGROUND: str = "white"
DEFAULT_EXPORT_FORMATS: tuple[str, ...] = ("png",)
