"""Custom exception hierarchy for the ARPC theme package.

All domain-specific exceptions inherit from ``ArpcThemeError``, enabling
callers to catch broad categories or specific error types.

Example::

    from arpctheme.exceptions import PaletteError

    try:
        colors = ndsu_colors(["green", "purple"])
    except PaletteError as exc:
        logger.error("Unknown brand color: %s", exc)
"""

from __future__ import annotations


class ArpcThemeError(Exception):
    """Base exception for all ARPC theme errors."""


class PaletteError(ArpcThemeError, KeyError):
    """Raised for unknown color or palette names."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable.
        return str(self.args[0]) if self.args else ""


class LogoError(ArpcThemeError):
    """Raised when a logo overlay cannot be built."""


class ExportError(ArpcThemeError):
    """Raised for figure export failures."""
