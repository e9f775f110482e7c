"""ARPC branding for matplotlib and seaborn figures.

Preset theme, NDSU brand palette, logo overlay, and multi-format export.
"""

from __future__ import annotations

from arpctheme.colors import (
    NDSU_COLORS,
    ndsu_cmap,
    ndsu_colors,
    ndsu_palette,
    scale_color_ndsu,
    scale_fill_ndsu,
    set_ndsu_palette,
)
from arpctheme.export import export_arpc
from arpctheme.logo import LogoBox, add_logo, calculate_logo_coordinates
from arpctheme.theme import arpc_rc, arpc_style, legend_bottom, set_titles, theme_arpc

__all__ = [
    "NDSU_COLORS",
    "LogoBox",
    "add_logo",
    "arpc_rc",
    "arpc_style",
    "calculate_logo_coordinates",
    "export_arpc",
    "legend_bottom",
    "ndsu_cmap",
    "ndsu_colors",
    "ndsu_palette",
    "scale_color_ndsu",
    "scale_fill_ndsu",
    "set_ndsu_palette",
    "set_titles",
    "theme_arpc",
]
