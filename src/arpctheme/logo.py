"""ARPC logo overlay.

The logo is placed in axes-fraction coordinates: ``(0, 0)`` is the
lower-left corner of the panel and ``(1, 1)`` the upper-right. Positions
outside ``0-1`` land in the figure margins, so the logo is drawn with
clipping off and its bounding box is never clamped.

Example::

    theme_arpc()
    fig, ax = plt.subplots()
    ax.scatter(df["wt"], df["mpg"])
    add_logo(ax, position="top-right", size=0.15, alpha=0.6)
    add_logo(ax, position=(1.1, 0.5), size=0.08)  # right margin
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.image as mpimg
import numpy as np
from matplotlib.patches import Rectangle

from arpctheme.config.defaults import (
    DEFAULT_LOGO_ALPHA,
    DEFAULT_LOGO_SIZE,
    LOGO_ASSET_NAMES,
    LOGO_PATH_ENV_VAR,
    NON_PNG_ASPECT_RATIO,
)
from arpctheme.config.models import LogoConfig, LogoPosition
from arpctheme.exceptions import LogoError

if TYPE_CHECKING:
    from matplotlib.artist import Artist
    from matplotlib.axes import Axes

logger = logging.getLogger(__name__)

# Anchor (logo centre) of each named position, in axes-fraction units.
LOGO_ANCHORS: dict[LogoPosition, tuple[float, float]] = {
    LogoPosition.BOTTOM_RIGHT: (0.8, -0.1),
    LogoPosition.BOTTOM_LEFT: (0.2, -0.1),
    LogoPosition.TOP_RIGHT: (0.8, 1.0),
    LogoPosition.TOP_LEFT: (0.2, 1.0),
    LogoPosition.BOTTOM: (0.5, 0.0),
    LogoPosition.TOP: (0.5, 1.0),
    LogoPosition.LEFT: (0.0, 0.5),
    LogoPosition.RIGHT: (1.0, 0.5),
}

_LOGO_ZORDER = 10


@dataclass(frozen=True)
class LogoBox:
    """Logo bounding box in axes-fraction units."""

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> tuple[float, float]:
        return ((self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2)

    @property
    def bounds(self) -> list[float]:
        """``[x0, y0, width, height]`` as expected by ``Axes.inset_axes``."""
        return [self.xmin, self.ymin, self.width, self.height]


# ---------------------------------------------------------------------------
# Asset resolution
# ---------------------------------------------------------------------------


def _packaged_logo_paths() -> list[Path]:
    assets = files("arpctheme") / "assets"
    return [Path(str(assets / name)) for name in LOGO_ASSET_NAMES]


def resolve_logo_path(path: str | Path | None = None) -> Path | None:
    """Find the logo asset to draw.

    Priority order:
    1. Explicit ``path`` parameter
    2. ``ARPC_LOGO_PATH`` environment variable
    3. Packaged ``assets/arpc_logo.png``, then ``assets/arpc_logo.pdf``

    Returns
    -------
    Path to an existing file, or ``None`` if none of the candidates exist.
    """
    if path is not None:
        candidates = [Path(path)]
    else:
        env_path = os.environ.get(LOGO_PATH_ENV_VAR)
        candidates = [Path(env_path)] if env_path else _packaged_logo_paths()

    for candidate in candidates:
        if candidate.is_file():
            logger.debug("Using logo asset: %s", candidate)
            return candidate

    logger.warning("Logo file not found at: %s. Using placeholder.", candidates[0])
    return None


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def logo_aspect_ratio(logo_path: str | Path | None) -> float:
    """Return the width/height ratio of a logo asset.

    PNG files are measured; other formats get a landscape default of 1.5.
    Missing or unreadable files count as square.
    """
    if logo_path is None:
        return 1.0
    logo_path = Path(logo_path)
    if not logo_path.is_file():
        return 1.0
    if logo_path.suffix.lower() != ".png":
        return NON_PNG_ASPECT_RATIO

    try:
        image = mpimg.imread(logo_path)
    except (OSError, SyntaxError, ValueError):
        logger.debug("Could not read %s, assuming square logo", logo_path)
        return 1.0
    height, width = image.shape[:2]
    return width / height


def calculate_logo_coordinates(
    position: str | tuple[float, float] = LogoPosition.BOTTOM_RIGHT,
    size: float = DEFAULT_LOGO_SIZE,
    logo_path: str | Path | None = None,
) -> LogoBox:
    """Compute the logo bounding box, preserving the asset's aspect ratio.

    The longer side of the logo spans ``size``; the box is centred on the
    position's anchor. The result is not clamped to the panel.

    Raises
    ------
    ValueError:
        If the position or size is invalid.
    """
    cfg = LogoConfig(position=position, size=size)
    if isinstance(cfg.position, LogoPosition):
        x, y = LOGO_ANCHORS[cfg.position]
    else:
        x, y = cfg.position

    aspect = logo_aspect_ratio(logo_path)
    if aspect >= 1:
        width, height = cfg.size, cfg.size / aspect
    else:
        width, height = cfg.size * aspect, cfg.size

    return LogoBox(
        xmin=x - width / 2,
        xmax=x + width / 2,
        ymin=y - height / 2,
        ymax=y + height / 2,
    )


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


def apply_alpha(image: np.ndarray, alpha: float) -> np.ndarray:
    """Return an RGBA copy of ``image`` with its opacity scaled by ``alpha``.

    RGBA images have their alpha channel multiplied; RGB and greyscale
    images gain a constant alpha channel.
    """
    image = np.asarray(image, dtype=np.float64)
    if image.ndim == 2:
        image = np.dstack([image, image, image])
    if image.shape[2] == 4:
        rgba = image.copy()
        rgba[..., 3] *= alpha
        return rgba
    alpha_channel = np.full(image.shape[:2] + (1,), alpha)
    return np.concatenate([image[..., :3], alpha_channel], axis=2)


def load_logo_image(logo_path: str | Path, alpha: float = 1.0) -> np.ndarray:
    """Read a PNG logo as an RGBA array with ``alpha`` applied.

    Raises
    ------
    LogoError:
        If the file cannot be decoded.
    """
    try:
        image = mpimg.imread(logo_path)
    except (OSError, SyntaxError, ValueError) as exc:
        msg = f"Failed to load logo image {logo_path}: {exc}"
        raise LogoError(msg) from exc
    return apply_alpha(image, alpha)


def _draw_placeholder(
    ax: Axes, box: LogoBox, alpha: float, fill: str, edge: str
) -> Rectangle:
    rect = Rectangle(
        (box.xmin, box.ymin),
        box.width,
        box.height,
        transform=ax.transAxes,
        facecolor=fill,
        edgecolor=edge,
        linewidth=3,
        alpha=alpha,
        clip_on=False,
        zorder=_LOGO_ZORDER,
    )
    ax.add_artist(rect)
    return rect


def _draw_text_placeholder(ax: Axes, box: LogoBox, alpha: float) -> Artist:
    x, y = box.center
    return ax.text(
        x,
        y,
        "ARPC\nLOGO",
        transform=ax.transAxes,
        ha="center",
        va="center",
        fontsize=12,
        fontweight="bold",
        color=(0.0, 0.0, 0.0, alpha),
        clip_on=False,
        zorder=_LOGO_ZORDER,
    )


def _draw_image(ax: Axes, box: LogoBox, image: np.ndarray) -> Axes:
    inset = ax.inset_axes(box.bounds, transform=ax.transAxes, zorder=_LOGO_ZORDER)
    inset.imshow(image, aspect="auto", interpolation="bilinear")
    inset.set_axis_off()
    return inset


def add_logo(
    ax: Axes,
    position: str | tuple[float, float] = LogoPosition.BOTTOM_RIGHT,
    size: float = DEFAULT_LOGO_SIZE,
    path: str | Path | None = None,
    alpha: float = DEFAULT_LOGO_ALPHA,
) -> Artist:
    """Draw the ARPC logo on top of ``ax``.

    Parameters
    ----------
    ax:
        Axes to annotate.
    position:
        ``"bottom-right"``, ``"bottom-left"``, ``"top-right"``,
        ``"top-left"``, ``"bottom"``, ``"top"``, ``"left"``, ``"right"``,
        or an ``(x, y)`` pair in axes-fraction units (``0-1`` is the panel,
        ``>1`` or ``<0`` the margins, e.g. ``(1.1, 0.5)`` for the right
        margin).
    size:
        Logo size as a proportion of the panel, in ``(0, 1]``.
    path:
        Logo file. ``None`` uses ``ARPC_LOGO_PATH`` or the packaged logo.
    alpha:
        Opacity, from 0 (transparent) to 1 (opaque).

    Returns
    -------
    The drawn artist: an inset axes holding the image, or a placeholder
    rectangle/text when the asset is missing or unusable.

    Raises
    ------
    ValueError:
        If position, size, or alpha is invalid.
    """
    cfg = LogoConfig(position=position, size=size, path=path, alpha=alpha)
    logo_path = resolve_logo_path(cfg.path)
    box = calculate_logo_coordinates(cfg.position, cfg.size, logo_path)

    if logo_path is None:
        return _draw_placeholder(ax, box, cfg.alpha, "red", "darkred")

    if logo_path.suffix.lower() != ".png":
        logger.warning(
            "Non-PNG logo files are not supported, convert %s to PNG. "
            "Using text placeholder.",
            logo_path,
        )
        return _draw_text_placeholder(ax, box, cfg.alpha)

    try:
        image = load_logo_image(logo_path, cfg.alpha)
    except LogoError as exc:
        logger.warning("%s. Using placeholder.", exc)
        return _draw_placeholder(ax, box, cfg.alpha, "orange", "darkorange")

    return _draw_image(ax, box, image)
