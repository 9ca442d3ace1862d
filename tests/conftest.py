"""Shared synthetic images for the colortone tests."""

from __future__ import annotations

import numpy as np
import pytest

from colortone.config import Settings


def _solid_bgr(b: int, g: int, r: int, h: int = 1, w: int = 1) -> np.ndarray:
    img = np.zeros((h, w, 3), dtype=np.uint8)
    img[:, :] = (b, g, r)
    return img


@pytest.fixture
def red_pixel() -> np.ndarray:
    return _solid_bgr(0, 0, 255)


@pytest.fixture
def noise_image() -> np.ndarray:
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(50, 50, 3), dtype=np.uint8)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(target_width=50, target_height=50, max_colors=5, assets_dir=str(tmp_path))


@pytest.fixture
def solid_image():
    return _solid_bgr
