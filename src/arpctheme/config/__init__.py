"""Theme defaults and validated argument models."""

from __future__ import annotations

from arpctheme.config.models import (
    ExportConfig,
    ExportFormat,
    LogoConfig,
    LogoPosition,
    PaletteName,
    ThemeConfig,
    Units,
)

__all__ = [
    "ExportConfig",
    "ExportFormat",
    "LogoConfig",
    "LogoPosition",
    "PaletteName",
    "ThemeConfig",
    "Units",
]
