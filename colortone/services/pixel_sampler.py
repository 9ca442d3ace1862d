from __future__ import annotations
import logging
from typing import Optional

import cv2
import numpy as np

from colortone.domain.errors import ImageProcessingFailed, InvalidImageSize

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 50
DEFAULT_HEIGHT = 50

_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


def _to_uint8(image: np.ndarray) -> np.ndarray:
    if image.dtype == np.uint8:
        return image
    if image.dtype == np.uint16:
        return (image >> 8).astype(np.uint8)
    if image.dtype in (np.float32, np.float64):
        return np.rint(np.clip(np.nan_to_num(image), 0.0, 1.0) * 255.0).astype(np.uint8)
    raise ImageProcessingFailed(f"Unsupported pixel type {image.dtype}")


def sample_pixels(image: Optional[np.ndarray], width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> np.ndarray:
    """Stretch ``image`` onto a ``width`` x ``height`` canvas.

    ``image`` is an OpenCV-style array (grayscale, BGR or BGRA). 16-bit and
    float (0..1) pixels are brought down to 8 bits first.
    Returns a flat row-major RGBA buffer of ``width * height * 4`` bytes.
    """
    if width <= 0 or height <= 0:
        raise InvalidImageSize(f"Invalid target size {width}x{height}")
    if image is None or not isinstance(image, np.ndarray):
        raise ImageProcessingFailed("No decoded image to sample")
    image = _to_uint8(image)

    channels = 1 if image.ndim == 2 else (image.shape[2] if image.ndim == 3 else 0)
    if channels not in _TO_RGBA:
        raise ImageProcessingFailed(f"Unsupported image shape {image.shape}")
    h, w = image.shape[:2]
    if h == 0 or w == 0:
        raise ImageProcessingFailed("Image has no pixels")
    if channels == 1 and image.ndim == 3:
        image = image[:, :, 0]

    # shrink with area averaging, enlarge with bilinear
    interpolation = cv2.INTER_AREA if (width <= w and height <= h) else cv2.INTER_LINEAR
    try:
        resized = cv2.resize(image, (width, height), interpolation=interpolation)
        rgba = cv2.cvtColor(resized, _TO_RGBA[channels])
    except cv2.error as exc:
        raise ImageProcessingFailed(f"Could not rasterize image: {exc}") from exc

    log.debug("Sampled %dx%d image onto %dx%d canvas", w, h, width, height)
    return np.ascontiguousarray(rgba, dtype=np.uint8).reshape(-1)


class PixelSampler:
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.width = width
        self.height = height

    def sample(self, image: Optional[np.ndarray]) -> np.ndarray:
        return sample_pixels(image, self.width, self.height)
