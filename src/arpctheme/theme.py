"""ARPC theme: a minimal, light style with NDSU colors.

The theme is assembled as a plain rcParams mapping by :func:`arpc_rc` and
applied either globally (:func:`theme_arpc`) or for the duration of a
``with`` block (:func:`arpc_style`). Sizes follow ggplot2's
``theme_minimal`` conventions: text sizes are multiples of ``base_size``
and line sizes are millimetres converted to points.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import matplotlib.pyplot as plt
import seaborn as sns

from arpctheme.colors import ndsu_palette, scale_color_ndsu
from arpctheme.config.defaults import (
    DEFAULT_BASE_SIZE,
    FALLBACK_FONT_FAMILY,
    GREY30,
    GREY40,
    GREY50,
    GREY90,
    LINE_SIZE_DIVISOR,
    PT_PER_MM,
    REL_AXIS_TEXT,
    REL_AXIS_TITLE,
    REL_GRID_LINE,
    REL_LEGEND_TEXT,
    REL_LEGEND_TITLE,
    REL_SUBTITLE,
    REL_TITLE,
)
from arpctheme.config.models import PaletteName, ThemeConfig
from arpctheme.fonts import get_computer_modern_font

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from matplotlib.axes import Axes
    from matplotlib.legend import Legend
    from matplotlib.text import Text

logger = logging.getLogger(__name__)

_GENERIC_FAMILIES = frozenset(
    {"serif", "sans-serif", "monospace", "cursive", "fantasy"}
)


def _font_rc(family: str) -> dict[str, Any]:
    if family in _GENERIC_FAMILIES:
        return {"font.family": family}
    # Named families go first in the serif list so matplotlib can still
    # fall back per glyph.
    return {
        "font.family": FALLBACK_FONT_FAMILY,
        "font.serif": [family, *plt.rcParamsDefault["font.serif"]],
    }


def arpc_rc(
    base_size: float = DEFAULT_BASE_SIZE,
    base_family: str | None = None,
    base_line_size: float | None = None,
    base_rect_size: float | None = None,
    palette: str = PaletteName.PRIMARY,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the rcParams mapping of the ARPC theme.

    Parameters
    ----------
    base_size:
        Base font size in points.
    base_family:
        Base font family. ``None`` resolves a Computer Modern font, or
        ``"serif"`` when none is installed.
    base_line_size:
        Base line size in millimetres. Defaults to ``base_size / 22``.
    base_rect_size:
        Base rectangle border size in millimetres. Defaults to
        ``base_size / 22``.
    palette:
        NDSU palette used for the color cycle.
    overrides:
        rcParams merged on top of the theme; they win over theme values.

    Returns
    -------
    Mapping of rcParams keys to values.

    Raises
    ------
    ValueError:
        If a size is not positive or the palette is unknown.
    """
    cfg = ThemeConfig(
        base_size=base_size,
        base_family=base_family,
        base_line_size=base_line_size,
        base_rect_size=base_rect_size,
        palette=palette,
    )
    size = cfg.base_size
    line_pt = (cfg.base_line_size or size / LINE_SIZE_DIVISOR) * PT_PER_MM
    rect_pt = (cfg.base_rect_size or size / LINE_SIZE_DIVISOR) * PT_PER_MM
    family = cfg.base_family or get_computer_modern_font()
    margin_in = size / 72.0

    rc: dict[str, Any] = {
        # Text
        "font.size": size,
        **_font_rc(family),
        "text.color": "black",
        # Plot title
        "axes.titlesize": size * REL_TITLE,
        "axes.titlelocation": "left",
        "axes.titlepad": size / 2,
        "axes.titleweight": "normal",
        "figure.titlesize": size * REL_TITLE,
        # Axis titles
        "axes.labelsize": size * REL_AXIS_TITLE,
        "axes.labelcolor": GREY30,
        "axes.labelpad": size / 2,
        # Axis text, no tick marks
        "xtick.labelsize": size * REL_AXIS_TEXT,
        "ytick.labelsize": size * REL_AXIS_TEXT,
        "xtick.labelcolor": GREY40,
        "ytick.labelcolor": GREY40,
        "xtick.major.size": 0.0,
        "ytick.major.size": 0.0,
        "xtick.minor.size": 0.0,
        "ytick.minor.size": 0.0,
        # Legend
        "legend.title_fontsize": size * REL_LEGEND_TITLE,
        "legend.fontsize": size * REL_LEGEND_TEXT,
        "legend.labelcolor": GREY40,
        "legend.frameon": False,
        "legend.borderaxespad": size / 10,
        # Panel: major grid only, no border
        "axes.facecolor": "white",
        "axes.edgecolor": "white",
        "axes.linewidth": rect_pt,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.spines.bottom": False,
        "axes.spines.left": False,
        "axes.grid": True,
        "axes.grid.which": "major",
        "axes.axisbelow": True,
        "grid.color": GREY90,
        "grid.linewidth": line_pt * REL_GRID_LINE,
        "grid.linestyle": "-",
        # Colors
        "axes.prop_cycle": scale_color_ndsu(cfg.palette),
        # Plot margins
        "figure.facecolor": "white",
        "savefig.facecolor": "white",
        "figure.constrained_layout.use": True,
        "figure.constrained_layout.h_pad": margin_in,
        "figure.constrained_layout.w_pad": margin_in,
    }

    if overrides:
        rc.update(overrides)
    return rc


def theme_arpc(
    base_size: float = DEFAULT_BASE_SIZE,
    base_family: str | None = None,
    base_line_size: float | None = None,
    base_rect_size: float | None = None,
    palette: str = PaletteName.PRIMARY,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Apply the ARPC theme to all subsequent figures.

    Accepts the same arguments as :func:`arpc_rc`. Returns the applied
    rcParams so callers can inspect or reuse them.

    Example::

        theme_arpc()
        fig, ax = plt.subplots()
        ax.scatter(df["wt"], df["mpg"])
    """
    rc = arpc_rc(
        base_size=base_size,
        base_family=base_family,
        base_line_size=base_line_size,
        base_rect_size=base_rect_size,
        palette=palette,
        overrides=overrides,
    )
    sns.set_theme(
        context="notebook",
        style="white",
        palette=ndsu_palette(palette),
        rc=rc,
    )
    logger.debug("Applied ARPC theme (base_size=%s, palette=%s)", base_size, palette)
    return rc


@contextmanager
def arpc_style(
    base_size: float = DEFAULT_BASE_SIZE,
    base_family: str | None = None,
    base_line_size: float | None = None,
    base_rect_size: float | None = None,
    palette: str = PaletteName.PRIMARY,
    overrides: Mapping[str, Any] | None = None,
) -> Iterator[dict[str, Any]]:
    """Apply the ARPC theme only inside a ``with`` block."""
    rc = arpc_rc(
        base_size=base_size,
        base_family=base_family,
        base_line_size=base_line_size,
        base_rect_size=base_rect_size,
        palette=palette,
        overrides=overrides,
    )
    with plt.rc_context(rc):
        yield rc


def set_titles(
    ax: Axes,
    title: str,
    subtitle: str | None = None,
) -> tuple[Text, Text | None]:
    """Set a left-aligned title and an optional grey subtitle.

    The subtitle sits between the title and the panel at 0.9x the base
    font size; the title is padded upwards to make room for it.
    """
    base_size = plt.rcParams["font.size"]
    if subtitle is None:
        return ax.set_title(title, loc="left"), None

    subtitle_size = base_size * REL_SUBTITLE
    subtitle_artist = ax.annotate(
        subtitle,
        xy=(0.0, 1.0),
        xycoords="axes fraction",
        xytext=(0.0, base_size / 2),
        textcoords="offset points",
        ha="left",
        va="bottom",
        fontsize=subtitle_size,
        color=GREY50,
    )
    # 1.2 is matplotlib's default line spacing
    pad = base_size / 2 + subtitle_size * 1.2 + base_size / 2
    title_artist = ax.set_title(title, loc="left", pad=pad)
    return title_artist, subtitle_artist


def legend_bottom(ax: Axes, ncol: int | None = None, **kwargs: Any) -> Legend | None:
    """Place a frameless legend centred below the axes.

    Returns ``None`` if the axes has no labelled artists.
    """
    handles, labels = ax.get_legend_handles_labels()
    if not handles:
        logger.debug("No labelled artists, skipping legend")
        return None
    base_size = plt.rcParams["font.size"]
    return ax.legend(
        handles,
        labels,
        loc="upper center",
        bbox_to_anchor=(0.5, -0.12),
        ncol=ncol or len(handles),
        frameon=False,
        borderaxespad=base_size / 10,
        **kwargs,
    )
