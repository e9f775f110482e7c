from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib

# Non-interactive backend before pyplot is imported anywhere
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: renders every format of every gallery figure"
    )


@pytest.fixture(autouse=True)
def _restore_rcparams() -> Iterator[None]:
    """Undo global style changes and close figures after every test."""
    with matplotlib.rc_context():
        yield
    plt.close("all")


@pytest.fixture(autouse=True)
def _no_logo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ARPC_LOGO_PATH from leaking into tests."""
    monkeypatch.delenv("ARPC_LOGO_PATH", raising=False)


@pytest.fixture
def make_png(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a solid PNG of the given pixel size."""

    def _make(width: int, height: int, name: str = "logo.png") -> Path:
        image = np.zeros((height, width, 4), dtype=np.float64)
        image[..., 1] = 0.35
        image[..., 3] = 1.0
        out = tmp_path / name
        plt.imsave(out, image)
        return out

    return _make
