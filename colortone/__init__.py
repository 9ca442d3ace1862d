"""Dominant and vibrant color extraction from decoded images."""

from colortone.config import Settings
from colortone.domain.dtos import EMPTY, PALETTE_SLOTS, WHITE, Color, PaletteSnapshot
from colortone.domain.enums import MergeStrategy
from colortone.domain.errors import ColorToneError, ImageProcessingFailed, InvalidImageSize
from colortone.services.color_analyzer import (
    ColorAnalyzer,
    cluster_colors,
    color_distance,
    color_saturation,
    find_most_vibrant,
    mix_colors,
)
from colortone.services.histogram import build_histogram
from colortone.services.palette_store import PaletteStore
from colortone.services.pixel_sampler import PixelSampler, sample_pixels

__all__ = [
    "Settings",
    "Color",
    "PaletteSnapshot",
    "EMPTY",
    "WHITE",
    "PALETTE_SLOTS",
    "MergeStrategy",
    "ColorToneError",
    "InvalidImageSize",
    "ImageProcessingFailed",
    "ColorAnalyzer",
    "cluster_colors",
    "color_distance",
    "color_saturation",
    "find_most_vibrant",
    "mix_colors",
    "build_histogram",
    "PaletteStore",
    "PixelSampler",
    "sample_pixels",
]
