"""Tests for resizing images onto the analysis canvas."""

from __future__ import annotations

import numpy as np
import pytest

from colortone.domain.errors import ImageProcessingFailed, InvalidImageSize
from colortone.services.pixel_sampler import PixelSampler, sample_pixels


def test_single_pixel_is_stretched_to_canvas(red_pixel) -> None:
    buffer = sample_pixels(red_pixel, 50, 50)

    assert buffer.dtype == np.uint8
    assert buffer.shape == (50 * 50 * 4,)
    pixels = buffer.reshape(-1, 4)
    assert (pixels == [255, 0, 0, 255]).all()


def test_large_image_is_shrunk_to_requested_size(noise_image) -> None:
    buffer = PixelSampler(width=10, height=7).sample(noise_image)

    assert buffer.shape == (10 * 7 * 4,)


def test_grayscale_input_expands_to_rgba() -> None:
    gray = np.full((4, 4), 128, dtype=np.uint8)

    pixels = sample_pixels(gray, 2, 2).reshape(-1, 4)

    assert (pixels == [128, 128, 128, 255]).all()


def test_bgra_input_is_reordered_to_rgba() -> None:
    bgra = np.zeros((2, 2, 4), dtype=np.uint8)
    bgra[:, :] = (10, 20, 30, 40)

    pixels = sample_pixels(bgra, 2, 2).reshape(-1, 4)

    assert (pixels == [30, 20, 10, 40]).all()


@pytest.mark.parametrize("width,height", [(0, 50), (50, 0), (-1, 10), (10, -5)])
def test_non_positive_size_is_rejected(red_pixel, width, height) -> None:
    with pytest.raises(InvalidImageSize):
        sample_pixels(red_pixel, width, height)


def test_size_is_checked_before_the_image() -> None:
    with pytest.raises(InvalidImageSize):
        sample_pixels(None, 0, 0)


@pytest.mark.parametrize(
    "image",
    [
        None,
        "not an image",
        np.zeros((0, 5, 3), dtype=np.uint8),
        np.zeros((3, 3, 3), dtype=np.complex64),
        np.zeros((3, 3, 2), dtype=np.uint8),
        np.zeros((2, 2, 2, 3), dtype=np.uint8),
    ],
)
def test_unusable_images_fail_processing(image) -> None:
    with pytest.raises(ImageProcessingFailed):
        sample_pixels(image, 5, 5)


def test_same_size_keeps_pixels(noise_image) -> None:
    pixels = sample_pixels(noise_image, 50, 50).reshape(50, 50, 4)

    assert (pixels[:, :, 0] == noise_image[:, :, 2]).all()
    assert (pixels[:, :, 2] == noise_image[:, :, 0]).all()


def test_sixteen_bit_pixels_are_reduced_to_eight_bits() -> None:
    deep = np.zeros((4, 4, 3), dtype=np.uint16)
    deep[:, :] = (0, 32896, 65535)

    pixels = sample_pixels(deep, 2, 2).reshape(-1, 4)

    assert (pixels == [255, 128, 0, 255]).all()


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_float_pixels_are_scaled_from_unit_range(dtype) -> None:
    img = np.zeros((3, 3, 3), dtype=dtype)
    img[:, :] = (0.0, 0.5, 1.0)

    pixels = sample_pixels(img, 3, 3).reshape(-1, 4)

    assert (pixels == [255, 128, 0, 255]).all()


def test_out_of_range_float_pixels_are_clipped() -> None:
    img = np.full((2, 2), 3.5, dtype=np.float32)
    img[0, 0] = -1.0

    pixels = sample_pixels(img, 2, 2).reshape(-1, 4)

    assert pixels[0].tolist() == [0, 0, 0, 255]
    assert (pixels[1:] == [255, 255, 255, 255]).all()


@pytest.mark.parametrize("dtype", [np.int32, np.bool_, np.complex64])
def test_unmappable_pixel_types_fail(dtype) -> None:
    with pytest.raises(ImageProcessingFailed):
        sample_pixels(np.zeros((3, 3, 3), dtype=dtype), 3, 3)
