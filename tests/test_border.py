"""Tests for border brightness sampling."""

import pytest
from PIL import Image, ImageDraw

from src.artwork import border_brightness
from src.artwork.core.constants import EPSILON


def test_white_image_is_fully_bright():
    assert border_brightness(Image.new("RGB", (50, 50), (255, 255, 255))) == pytest.approx(1.0)


def test_black_image_is_floored_at_epsilon():
    img = Image.new("RGB", (50, 50), (0, 0, 0))
    assert border_brightness(img) == pytest.approx(EPSILON**2)


def test_only_edges_are_sampled():
    img = Image.new("RGB", (100, 100), (0, 0, 0))
    ImageDraw.Draw(img).rectangle([0, 0, 99, 99], outline=(255, 255, 255))
    assert border_brightness(img) == pytest.approx(1.0)


def test_half_bright_border(half_white_image):
    assert border_brightness(half_white_image) == pytest.approx(0.5, abs=1e-3)


def test_single_pixel_image():
    img = Image.new("RGB", (1, 1), (128, 128, 128))
    assert border_brightness(img) == pytest.approx((128 / 255) ** 2)


@pytest.mark.parametrize("size", [(1, 40), (40, 1), (3, 3), (7, 200)])
def test_narrow_images_do_not_divide_by_zero(size):
    value = border_brightness(Image.new("RGB", size, (90, 160, 30)))
    assert 0 <= value <= 1


def test_grayscale_mode_is_accepted():
    assert border_brightness(Image.new("L", (20, 20), 255)) == pytest.approx(1.0)
