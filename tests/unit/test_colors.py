"""Tests for the NDSU brand palette and the scales built from it."""

from __future__ import annotations

import matplotlib.pyplot as plt
import pytest
from matplotlib.colors import ListedColormap, is_color_like, to_hex

from arpctheme.colors import (
    NDSU_COLORS,
    PALETTES,
    ndsu_cmap,
    ndsu_colors,
    ndsu_palette,
    scale_color_ndsu,
    scale_fill_ndsu,
    set_ndsu_palette,
)
from arpctheme.config.models import PaletteName
from arpctheme.exceptions import ArpcThemeError, PaletteError

# ---------------------------------------------------------------------------
# TestBrandColors
# ---------------------------------------------------------------------------


class TestBrandColors:
    """Tests for the static NDSU color mapping."""

    def test_eleven_colors(self) -> None:
        assert len(NDSU_COLORS) == 11

    def test_colors_are_hex(self) -> None:
        """All colors are #RRGGBB strings matplotlib accepts."""
        for name, color in NDSU_COLORS.items():
            assert color.startswith("#"), f"{name}: {color} not hex"
            assert len(color) == 7, f"{name}: {color} not #RRGGBB"
            assert is_color_like(color), f"{name}: {color} rejected"

    def test_primary_brand_colors(self) -> None:
        assert NDSU_COLORS["green"] == "#00583D"
        assert NDSU_COLORS["yellow"] == "#FFC425"

    def test_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            NDSU_COLORS["green"] = "#000000"  # type: ignore[index]


# ---------------------------------------------------------------------------
# TestNdsuColors
# ---------------------------------------------------------------------------


class TestNdsuColors:
    """Tests for ndsu_colors() lookup."""

    def test_no_names_returns_everything(self) -> None:
        assert ndsu_colors() == dict(NDSU_COLORS)

    def test_single_name(self) -> None:
        assert ndsu_colors("green") == {"green": "#00583D"}

    def test_requested_order_preserved(self) -> None:
        """The subset comes back in the order it was asked for."""
        result = ndsu_colors(["night", "green", "rust"])
        assert list(result) == ["night", "green", "rust"]
        assert list(result.values()) == [
            NDSU_COLORS["night"],
            NDSU_COLORS["green"],
            NDSU_COLORS["rust"],
        ]

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(PaletteError, match="Available colors"):
            ndsu_colors(["green", "purple"])

    def test_error_names_the_missing_color(self) -> None:
        with pytest.raises(PaletteError, match="purple"):
            ndsu_colors("purple")

    def test_palette_error_is_key_error(self) -> None:
        """Callers catching KeyError or the package base both see it."""
        with pytest.raises(KeyError):
            ndsu_colors("purple")
        with pytest.raises(ArpcThemeError):
            ndsu_colors("purple")

    def test_returns_copy(self) -> None:
        result = ndsu_colors()
        result["green"] = "#000000"
        assert NDSU_COLORS["green"] == "#00583D"


# ---------------------------------------------------------------------------
# TestNdsuPalette
# ---------------------------------------------------------------------------


class TestNdsuPalette:
    """Tests for named palettes."""

    def test_primary_priority_order(self) -> None:
        """The first four primary colors are green, yellow, rust, night."""
        colors = ndsu_palette("primary")
        assert colors[:4] == [
            NDSU_COLORS["green"],
            NDSU_COLORS["yellow"],
            NDSU_COLORS["rust"],
            NDSU_COLORS["night"],
        ]

    def test_primary_uses_every_color_once(self) -> None:
        colors = ndsu_palette("primary")
        assert sorted(colors) == sorted(NDSU_COLORS.values())

    def test_greens(self) -> None:
        assert ndsu_palette("greens") == [
            NDSU_COLORS[n]
            for n in ("green", "dark_green", "sage", "lime_green", "pale_sage")
        ]

    def test_full_follows_mapping_order(self) -> None:
        assert ndsu_palette("full") == list(NDSU_COLORS.values())

    def test_enum_accepted(self) -> None:
        assert ndsu_palette(PaletteName.GREENS) == ndsu_palette("greens")

    def test_every_palette_resolves(self) -> None:
        for name in PALETTES:
            assert ndsu_palette(name)

    def test_unknown_palette_raises(self) -> None:
        with pytest.raises(PaletteError, match="Available palettes"):
            ndsu_palette("rainbow")


# ---------------------------------------------------------------------------
# TestScales
# ---------------------------------------------------------------------------


class TestScales:
    """Tests for the color/fill cycles and the colormap."""

    def test_color_cycle(self) -> None:
        cycle = scale_color_ndsu()
        assert cycle.by_key()["color"] == ndsu_palette("primary")

    def test_fill_cycle(self) -> None:
        cycle = scale_fill_ndsu("greens")
        assert cycle.by_key()["color"] == ndsu_palette("greens")

    def test_fill_cycle_drives_bars(self) -> None:
        """Bars drawn after set_prop_cycle are filled with NDSU green."""
        fig, ax = plt.subplots()
        ax.set_prop_cycle(scale_fill_ndsu())
        bars = ax.bar(["a", "b"], [1, 2])
        assert to_hex(bars[0].get_facecolor()) == NDSU_COLORS["green"].lower()
        plt.close(fig)

    def test_fill_cycle_allows_lines(self) -> None:
        fig, ax = plt.subplots()
        ax.set_prop_cycle(scale_fill_ndsu())
        ax.bar(["a", "b"], [1, 2])
        line = ax.plot([0, 1], [0, 1])[0]
        assert line.get_color() in ndsu_palette("primary")
        plt.close(fig)

    def test_color_cycle_drives_lines(self) -> None:
        """Lines drawn after set_prop_cycle take NDSU colors in order."""
        fig, ax = plt.subplots()
        ax.set_prop_cycle(scale_color_ndsu())
        first = ax.plot([0, 1], [0, 1])[0]
        second = ax.plot([0, 1], [1, 0])[0]
        assert first.get_color() == NDSU_COLORS["green"]
        assert second.get_color() == NDSU_COLORS["yellow"]
        plt.close(fig)

    def test_cmap(self) -> None:
        cmap = ndsu_cmap("greens")
        assert isinstance(cmap, ListedColormap)
        assert cmap.N == 5
        assert cmap.name == "ndsu_greens"

    def test_set_palette_updates_rcparams(self) -> None:
        colors = set_ndsu_palette("greens")
        cycle_colors = plt.rcParams["axes.prop_cycle"].by_key()["color"]
        assert [to_hex(c) for c in cycle_colors] == [c.lower() for c in colors]
