"""Multi-format figure export with consistent dimensions.

Exports PNG (raster, ``dpi``), PDF, SVG and EPS (vector, for LaTeX) with
the same base filename, plus an optional CSV of the plotted data for
reproducibility.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import pandas as pd
from matplotlib.figure import Figure

from arpctheme.config.defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_DPI,
    DEFAULT_EXPORT_FORMATS,
)
from arpctheme.config.models import ExportConfig, ExportFormat, Units
from arpctheme.exceptions import ExportError
from arpctheme.figure_dimensions import get_figsize

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_WIDTH, _DEFAULT_HEIGHT = get_figsize("single")


def _savefig_args(cfg: ExportConfig, fmt: ExportFormat) -> dict[str, Any]:
    return {
        "format": fmt.value,
        "dpi": cfg.dpi,
        "facecolor": cfg.bg,
        "edgecolor": cfg.bg,
    }


def _as_frame(data: pd.DataFrame | Mapping[str, Any]) -> pd.DataFrame:
    return data if isinstance(data, pd.DataFrame) else pd.DataFrame(data)


def export_arpc(
    fig: Figure,
    filename: str,
    path: str | Path = ".",
    formats: str | Sequence[str] = DEFAULT_EXPORT_FORMATS,
    width: float = _DEFAULT_WIDTH,
    height: float = _DEFAULT_HEIGHT,
    dpi: int = DEFAULT_DPI,
    units: str = Units.INCHES,
    bg: str = DEFAULT_BACKGROUND,
    data: pd.DataFrame | Mapping[str, Any] | None = None,
    savefig_kwargs: Mapping[str, Any] | None = None,
) -> list[Path]:
    """Save a figure in one or more formats with ARPC defaults.

    Parameters
    ----------
    fig:
        Matplotlib figure to export.
    filename:
        Base filename, without extension.
    path:
        Output directory, created if missing. Defaults to the current
        directory.
    formats:
        One or more of ``"png"``, ``"pdf"``, ``"svg"``, ``"eps"``.
    width, height:
        Figure size in ``units``.
    dpi:
        Resolution of raster output.
    units:
        ``"in"``, ``"cm"`` or ``"mm"``.
    bg:
        Background color.
    data:
        Optional plotted data, written as ``<filename>.csv``.
    savefig_kwargs:
        Extra ``Figure.savefig`` arguments; they win over the defaults.

    Returns
    -------
    Paths of the written files: one per format in the requested order,
    followed by the CSV if ``data`` was given.

    Raises
    ------
    TypeError:
        If ``fig`` is not a matplotlib figure.
    ValueError:
        If the filename, a format, the units or a size is invalid.
    ExportError:
        If a file cannot be written.
    """
    if not isinstance(fig, Figure):
        msg = f"fig must be a matplotlib Figure, got {type(fig).__name__}"
        raise TypeError(msg)

    cfg = ExportConfig(
        filename=filename,
        path=path,
        formats=formats,
        width=width,
        height=height,
        dpi=dpi,
        units=units,
        bg=bg,
    )
    # Bad data must fail before any figure file is written.
    frame = _as_frame(data) if data is not None else None

    cfg.path.mkdir(parents=True, exist_ok=True)
    fig.set_size_inches(*cfg.size_inches)

    written: list[Path] = []
    for fmt in cfg.formats:
        out_path = cfg.path / f"{cfg.filename}.{fmt.value}"
        args = _savefig_args(cfg, fmt)
        if savefig_kwargs:
            args.update(savefig_kwargs)
        try:
            fig.savefig(out_path, **args)
        except OSError as exc:
            msg = f"Failed to write {out_path}: {exc}"
            raise ExportError(msg) from exc
        logger.info("Saved figure: %s", out_path)
        written.append(out_path)

    if frame is not None:
        csv_path = cfg.path / f"{cfg.filename}.csv"
        try:
            frame.to_csv(csv_path, index=False)
        except OSError as exc:
            msg = f"Failed to write {csv_path}: {exc}"
            raise ExportError(msg) from exc
        logger.info("Saved figure data: %s", csv_path)
        written.append(csv_path)

    return written
