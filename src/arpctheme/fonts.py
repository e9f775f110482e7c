"""Computer Modern font resolution through matplotlib's font manager."""

from __future__ import annotations

import logging

from matplotlib import font_manager

from arpctheme.config.defaults import COMPUTER_MODERN_FONTS, FALLBACK_FONT_FAMILY

logger = logging.getLogger(__name__)


def available_font_names() -> set[str]:
    """Return the family names of every font matplotlib has registered.

    Returns an empty set if the font cache cannot be read.
    """
    try:
        return {entry.name for entry in font_manager.fontManager.ttflist}
    except (AttributeError, OSError, RuntimeError):
        logger.warning("Could not query the matplotlib font cache", exc_info=True)
        return set()


def get_computer_modern_font() -> str:
    """Return the best available Computer Modern style family.

    Tries the families in ``COMPUTER_MODERN_FONTS`` in order and falls back
    to the generic ``"serif"`` family, which always resolves.
    """
    available = available_font_names()
    for name in COMPUTER_MODERN_FONTS:
        if name in available:
            logger.debug("Using font family: %s", name)
            return name

    logger.debug(
        "No Computer Modern font installed, falling back to '%s'",
        FALLBACK_FONT_FAMILY,
    )
    return FALLBACK_FONT_FAMILY
