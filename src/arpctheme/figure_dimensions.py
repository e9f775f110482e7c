"""Named figure sizes for ARPC publications and slides.

Sizes are stored in inches and converted on request, so a preset can be
passed straight to ``plt.subplots(figsize=...)`` or to ``export_arpc``.
"""

from __future__ import annotations

from arpctheme.config.models import UNITS_PER_INCH, Units

# (width, height) in inches
FIGURE_DIMENSIONS: dict[str, tuple[float, float]] = {
    "single": (8.0, 6.0),
    "wide": (10.0, 6.0),
    "square": (6.0, 6.0),
    "slide": (13.33, 7.5),
    "poster": (16.0, 12.0),
}


def get_figsize(preset: str, units: str = Units.INCHES) -> tuple[float, float]:
    """Return ``(width, height)`` of a named preset.

    Parameters
    ----------
    preset:
        Preset name, e.g. ``"single"`` or ``"slide"``.
    units:
        ``"in"``, ``"cm"`` or ``"mm"``.

    Raises
    ------
    KeyError:
        If the preset name is not found.
    ValueError:
        If the units are not supported.
    """
    width, height = FIGURE_DIMENSIONS[preset]
    per_inch = UNITS_PER_INCH[Units(units)]
    return (width * per_inch, height * per_inch)
