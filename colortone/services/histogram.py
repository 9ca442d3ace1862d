"""Exact-match color counting over a sampled RGBA buffer."""

from __future__ import annotations

from collections import Counter
from typing import Dict

import numpy as np

from colortone.domain.dtos import Color


def build_histogram(buffer: np.ndarray) -> Dict[Color, int]:
    """Count each distinct RGB color in a row-major RGBA buffer.

    Alpha is ignored. Keys keep first-seen order, which fixes the order the
    cluster engine visits colors in. A trailing partial pixel is dropped.
    """

    data = np.asarray(buffer, dtype=np.uint8).reshape(-1)
    usable = data.size - data.size % 4
    rgb = data[:usable].reshape(-1, 4)[:, :3]

    counter = Counter(map(tuple, rgb.tolist()))
    return {Color(r / 255.0, g / 255.0, b / 255.0): n for (r, g, b), n in counter.items()}
