"""Validated argument models for the theme, logo, and export helpers.

Range checks live here so that the public functions stay thin. Every
``pydantic.ValidationError`` raised by these models is a ``ValueError``.
"""

from __future__ import annotations

import math
import numbers
from enum import StrEnum
from pathlib import Path  # noqa: TC003  pydantic resolves Path at runtime

from pydantic import BaseModel, Field, field_validator

from arpctheme.config.defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_BASE_SIZE,
    DEFAULT_DPI,
    DEFAULT_EXPORT_FORMATS,
    DEFAULT_LOGO_ALPHA,
    DEFAULT_LOGO_SIZE,
)


class PaletteName(StrEnum):
    """Named NDSU palettes."""

    PRIMARY = "primary"
    GREENS = "greens"
    FULL = "full"


class LogoPosition(StrEnum):
    """Named logo anchors around the plotting panel."""

    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"
    TOP_RIGHT = "top-right"
    TOP_LEFT = "top-left"
    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


class ExportFormat(StrEnum):
    """File formats supported by ``export_arpc``."""

    PNG = "png"
    PDF = "pdf"
    SVG = "svg"
    EPS = "eps"


class Units(StrEnum):
    """Physical units for export dimensions."""

    INCHES = "in"
    CENTIMETRES = "cm"
    MILLIMETRES = "mm"


UNITS_PER_INCH: dict[Units, float] = {
    Units.INCHES: 1.0,
    Units.CENTIMETRES: 2.54,
    Units.MILLIMETRES: 25.4,
}


class ThemeConfig(BaseModel):
    """Arguments of the ARPC theme."""

    base_size: float = Field(default=DEFAULT_BASE_SIZE, gt=0)
    base_family: str | None = None
    base_line_size: float | None = Field(default=None, gt=0)
    base_rect_size: float | None = Field(default=None, gt=0)
    palette: PaletteName = PaletteName.PRIMARY


class LogoConfig(BaseModel):
    """Arguments of a logo overlay.

    Parameters
    ----------
    position:
        A named anchor (see :class:`LogoPosition`) or an ``(x, y)`` pair in
        axes-fraction units. ``0-1`` addresses the panel; values outside it
        address the margins.
    size:
        Logo extent as a proportion of the panel, in ``(0, 1]``.
    path:
        Logo asset. ``None`` resolves the packaged logo.
    alpha:
        Opacity in ``[0, 1]``.
    """

    position: LogoPosition | tuple[float, float] = LogoPosition.BOTTOM_RIGHT
    size: float = Field(default=DEFAULT_LOGO_SIZE, gt=0, le=1)
    path: Path | None = None
    alpha: float = Field(default=DEFAULT_LOGO_ALPHA, ge=0, le=1)

    @field_validator("position", mode="before")
    @classmethod
    def validate_position(
        cls, v: object
    ) -> LogoPosition | tuple[float, float]:
        if isinstance(v, str):
            try:
                return LogoPosition(v)
            except ValueError:
                valid = ", ".join(p.value for p in LogoPosition)
                msg = (
                    f"position must be one of: {valid} "
                    "or a numeric pair with x,y coordinates"
                )
                raise ValueError(msg) from None
        if isinstance(v, (list, tuple)):
            if len(v) != 2:
                msg = "numeric position must have length 2 (x, y coordinates)"
                raise ValueError(msg)
            if not all(
                isinstance(c, numbers.Real) and not isinstance(c, bool) for c in v
            ):
                msg = "position coordinates must be numbers"
                raise ValueError(msg)
            if not all(math.isfinite(c) for c in v):
                msg = "position coordinates must be finite numbers"
                raise ValueError(msg)
            return (float(v[0]), float(v[1]))
        msg = (
            "position must be either a named position or a numeric pair "
            "with x,y coordinates"
        )
        raise ValueError(msg)


class ExportConfig(BaseModel):
    """Arguments of a multi-format figure export."""

    filename: str = Field(min_length=1)
    path: Path = Field(default=Path("."))
    formats: list[ExportFormat] = Field(
        default_factory=lambda: [ExportFormat(f) for f in DEFAULT_EXPORT_FORMATS],
        min_length=1,
    )
    width: float = Field(default=8.0, gt=0)
    height: float = Field(default=6.0, gt=0)
    dpi: int = Field(default=DEFAULT_DPI, gt=0)
    units: Units = Units.INCHES
    bg: str = DEFAULT_BACKGROUND

    @field_validator("formats", mode="before")
    @classmethod
    def normalize_formats(cls, v: object) -> object:
        if isinstance(v, str):
            return [v.lower().lstrip(".")]
        if isinstance(v, (list, tuple)):
            return [f.lower().lstrip(".") if isinstance(f, str) else f for f in v]
        return v

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if not v.strip():
            msg = "filename is required"
            raise ValueError(msg)
        return v

    @property
    def size_inches(self) -> tuple[float, float]:
        """Export dimensions converted to inches."""
        per_inch = UNITS_PER_INCH[self.units]
        return (self.width / per_inch, self.height / per_inch)
