"""Demo gallery of ARPC-styled figures.

Registry-based: each entry has a name, a generator returning
``(figure, data)``, and a category. Useful for eyeballing the theme after
a change and for producing example figures for documentation.

Usage::

    python -m arpctheme.gallery
    python -m arpctheme.gallery --list
    python -m arpctheme.gallery --figure scatter_logo --formats png pdf
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from arpctheme.colors import scale_fill_ndsu
from arpctheme.config.defaults import DEFAULT_EXPORT_FORMATS
from arpctheme.export import export_arpc
from arpctheme.figure_dimensions import get_figsize
from arpctheme.logo import add_logo
from arpctheme.theme import arpc_style, legend_bottom, set_titles

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Synthetic demo data
# ---------------------------------------------------------------------------


def _demo_cars(n: int = 32, seed: int = 42) -> pd.DataFrame:
    """Car weight vs. fuel economy, grouped by cylinder count."""
    rng = np.random.default_rng(seed)
    cyl = rng.choice([4, 6, 8], size=n, p=[0.35, 0.25, 0.4])
    wt = 1.5 + 0.35 * cyl + rng.normal(0, 0.3, size=n)
    mpg = 37.0 - 5.3 * wt + rng.normal(0, 2.0, size=n)
    return pd.DataFrame({"wt": wt.round(3), "mpg": mpg.round(1), "cyl": cyl})


def _scatter(ax: Any, cars: pd.DataFrame) -> None:
    for cyl, group in cars.groupby("cyl"):
        ax.scatter(group["wt"], group["mpg"], label=f"{cyl} cyl")
    ax.set_xlabel("Weight (1000 lbs)")
    ax.set_ylabel("Miles per gallon")


# ---------------------------------------------------------------------------
# Figure generators (each returns (Figure, data))
# ---------------------------------------------------------------------------


def _gen_scatter_groups() -> tuple[Figure, pd.DataFrame]:
    cars = _demo_cars()
    fig, ax = plt.subplots(figsize=get_figsize("single"))
    _scatter(ax, cars)
    set_titles(ax, "Fuel economy by weight", "Synthetic data, grouped by cylinders")
    legend_bottom(ax, title="Cylinders")
    return fig, cars


def _gen_bar_fill() -> tuple[Figure, pd.DataFrame]:
    counts = _demo_cars().groupby("cyl").size().reset_index(name="count")
    fig, ax = plt.subplots(figsize=get_figsize("single"))
    ax.set_prop_cycle(scale_fill_ndsu("primary"))
    # One bar call per group so each takes the next fill color.
    for cyl, count in zip(counts["cyl"], counts["count"], strict=True):
        ax.bar(str(cyl), count)
    ax.set_xlabel("Cylinders")
    ax.set_ylabel("Cars")
    set_titles(ax, "Cars per cylinder count")
    return fig, counts


def _gen_scatter_logo() -> tuple[Figure, pd.DataFrame]:
    cars = _demo_cars()
    fig, ax = plt.subplots(figsize=get_figsize("single"))
    _scatter(ax, cars)
    set_titles(ax, "Fuel economy by weight")
    legend_bottom(ax)
    add_logo(ax, position="top-right", size=0.15, alpha=0.6)
    return fig, cars


FIGURE_REGISTRY: list[dict[str, Any]] = [
    {
        "name": "scatter_groups",
        "generator": _gen_scatter_groups,
        "category": "theme",
    },
    {
        "name": "bar_fill",
        "generator": _gen_bar_fill,
        "category": "palette",
    },
    {
        "name": "scatter_logo",
        "generator": _gen_scatter_logo,
        "category": "logo",
    },
]


def list_figures() -> list[str]:
    """Return list of all registered figure names."""
    return [entry["name"] for entry in FIGURE_REGISTRY]


def _render(
    entry: dict[str, Any],
    output_dir: Path | None,
    formats: Sequence[str],
) -> list[Path]:
    with arpc_style():
        fig, data = entry["generator"]()
        try:
            return export_arpc(
                fig,
                entry["name"],
                path=output_dir if output_dir is not None else ".",
                formats=formats,
                data=data,
            )
        finally:
            plt.close(fig)


def generate_figure(
    name: str,
    output_dir: Path | None = None,
    formats: Sequence[str] = DEFAULT_EXPORT_FORMATS,
) -> list[Path] | None:
    """Generate a single gallery figure by name.

    Returns
    -------
    Paths of the written files, or ``None`` if the name is unknown or the
    figure failed to render.
    """
    for entry in FIGURE_REGISTRY:
        if entry["name"] == name:
            try:
                return _render(entry, output_dir, formats)
            except Exception:
                logger.exception("Failed to generate figure: %s", name)
                plt.close("all")
                return None
    logger.warning("Unknown figure name: %s", name)
    return None


def generate_all_figures(
    output_dir: Path | None = None,
    formats: Sequence[str] = DEFAULT_EXPORT_FORMATS,
) -> dict[str, list[str]]:
    """Generate every registered figure.

    Returns
    -------
    Summary dict with 'succeeded' and 'failed' lists of figure names.
    """
    succeeded: list[str] = []
    failed: list[str] = []

    for entry in FIGURE_REGISTRY:
        name = entry["name"]
        try:
            _render(entry, output_dir, formats)
            succeeded.append(name)
            logger.info("Generated: %s", name)
        except Exception:
            logger.exception("Failed: %s", name)
            plt.close("all")
            failed.append(name)

    logger.info(
        "Gallery complete: %d succeeded, %d failed",
        len(succeeded),
        len(failed),
    )
    return {"succeeded": succeeded, "failed": failed}


if __name__ == "__main__":
    import argparse
    from pathlib import Path as _Path

    parser = argparse.ArgumentParser(description="Render the ARPC demo gallery")
    parser.add_argument("--figure", help="Generate a specific figure by name")
    parser.add_argument(
        "--list", action="store_true", help="List all registered figures"
    )
    parser.add_argument("--output-dir", default="figures", help="Output directory")
    parser.add_argument(
        "--formats",
        nargs="+",
        default=list(DEFAULT_EXPORT_FORMATS),
        help="Output formats (png, pdf, svg, eps)",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )

    if args.list:
        for entry in FIGURE_REGISTRY:
            print(f"  {entry['name']:20s}  [{entry['category']}]")
    elif args.figure:
        result = generate_figure(
            args.figure, output_dir=_Path(args.output_dir), formats=args.formats
        )
        if result:
            print(f"Saved: {', '.join(str(p) for p in result)}")
        else:
            print(f"Failed or unknown: {args.figure}")
    else:
        summary = generate_all_figures(
            output_dir=_Path(args.output_dir), formats=args.formats
        )
        print(
            f"Succeeded: {len(summary['succeeded'])}, Failed: {len(summary['failed'])}"
        )
        if summary["failed"]:
            print(f"Failed figures: {summary['failed']}")
