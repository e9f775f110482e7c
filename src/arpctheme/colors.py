"""NDSU brand colors and the palettes built from them.

The palette order is a priority order: categorical encodings take the
first N colors, so the most recognisable brand colors come first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

import seaborn as sns
from matplotlib import cycler
from matplotlib.colors import ListedColormap

from arpctheme.config.models import PaletteName
from arpctheme.exceptions import PaletteError

if TYPE_CHECKING:
    from cycler import Cycler

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Official NDSU brand palette
# ---------------------------------------------------------------------------

NDSU_COLORS: MappingProxyType[str, str] = MappingProxyType(
    {
        # Primary
        "green": "#00583D",
        "yellow": "#FFC425",
        # Secondary
        "dark_green": "#003524",
        "lime_green": "#8ED73B",
        "teal": "#51ABD0",
        "lemon_yellow": "#F4F287",
        "sage": "#8ABD78",
        "pale_sage": "#D7E8C8",
        # Accent
        "rust": "#B83E27",
        "morning_sky": "#90DFF7",
        "night": "#0F374B",
    }
)

# ---------------------------------------------------------------------------
# Named palettes (color names, in priority order)
# ---------------------------------------------------------------------------

PALETTES: MappingProxyType[PaletteName, tuple[str, ...]] = MappingProxyType(
    {
        PaletteName.PRIMARY: (
            "green",
            "yellow",
            "rust",
            "night",
            "teal",
            "sage",
            "dark_green",
            "lime_green",
            "lemon_yellow",
            "pale_sage",
            "morning_sky",
        ),
        PaletteName.GREENS: (
            "green",
            "dark_green",
            "sage",
            "lime_green",
            "pale_sage",
        ),
        PaletteName.FULL: tuple(NDSU_COLORS),
    }
)


def ndsu_colors(names: str | Sequence[str] | None = None) -> dict[str, str]:
    """Look up NDSU brand colors by name.

    Parameters
    ----------
    names:
        A single color name, a sequence of names, or ``None`` for the
        whole palette.

    Returns
    -------
    Mapping of name to hex code, in the requested order.

    Raises
    ------
    PaletteError:
        If any requested name is not an NDSU color.
    """
    if names is None:
        return dict(NDSU_COLORS)
    if isinstance(names, str):
        names = [names]

    missing = [n for n in names if n not in NDSU_COLORS]
    if missing:
        msg = (
            f"Color not found: {', '.join(missing)}. "
            f"Available colors: {', '.join(NDSU_COLORS)}"
        )
        raise PaletteError(msg)

    return {n: NDSU_COLORS[n] for n in names}


def ndsu_palette(palette: str = PaletteName.PRIMARY) -> list[str]:
    """Return the hex codes of a named palette in priority order.

    Raises
    ------
    PaletteError:
        If the palette name is unknown.
    """
    try:
        key = PaletteName(palette)
    except ValueError:
        valid = ", ".join(p.value for p in PaletteName)
        msg = f"Unknown palette '{palette}'. Available palettes: {valid}"
        raise PaletteError(msg) from None
    return list(ndsu_colors(PALETTES[key]).values())


def scale_color_ndsu(palette: str = PaletteName.PRIMARY) -> Cycler:
    """Property cycle assigning NDSU colors to line and marker colors."""
    return cycler(color=ndsu_palette(palette))


def scale_fill_ndsu(palette: str = PaletteName.PRIMARY) -> Cycler:
    """Property cycle assigning NDSU colors to patch fills.

    Keyed on ``color``: ``bar``, ``hist`` and ``fill_between`` take their
    face color from that key, and lines on the same axes keep working.
    """
    return cycler(color=ndsu_palette(palette))


def ndsu_cmap(palette: str = PaletteName.PRIMARY) -> ListedColormap:
    """Discrete colormap over a named palette."""
    return ListedColormap(ndsu_palette(palette), name=f"ndsu_{palette}")


def set_ndsu_palette(palette: str = PaletteName.PRIMARY) -> list[str]:
    """Make a named palette the global color cycle and return its colors."""
    colors = ndsu_palette(palette)
    sns.set_palette(colors)
    logger.debug("Applied NDSU palette '%s' (%d colors)", palette, len(colors))
    return colors
