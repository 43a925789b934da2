"""Tests for color primitives, metrics and readability normalization."""

import pytest

from src.artwork import (
    DEFAULT_RGB,
    RGB,
    DominantColors,
    colorfulness,
    normalize_colors,
    normalize_for_readability,
    perceived_brightness,
)


def test_rgb_rejects_out_of_range_channels():
    with pytest.raises(ValueError):
        RGB(256, 0, 0)
    with pytest.raises(ValueError):
        RGB(0, -1, 0)


def test_rgb_of_clamps_and_truncates():
    assert RGB.of(300, -5, 12.9) == RGB(255, 0, 12)


def test_scaled_truncates_like_the_grayscale_overlay():
    assert DEFAULT_RGB.scaled(0.5) == RGB(127, 127, 127)
    assert RGB(100, 50, 10).scaled(0) == RGB(0, 0, 0)


def test_perceived_brightness_bounds():
    assert perceived_brightness(RGB(0, 0, 0)) == 0
    assert perceived_brightness(RGB(255, 255, 255)) == pytest.approx(1.0)
    # green reads brighter than blue at the same intensity
    assert perceived_brightness(RGB(0, 200, 0)) > perceived_brightness(RGB(0, 0, 200))


def test_colorfulness_is_zero_for_grays():
    assert colorfulness(RGB(128, 128, 128)) == 0
    assert colorfulness(RGB(0, 0, 0)) == 0
    assert colorfulness(RGB(255, 0, 0)) == pytest.approx(1.0)
    assert colorfulness(RGB(120, 80, 200)) == pytest.approx(0.6)


def test_normalize_raises_value_and_keeps_hue():
    assert normalize_for_readability(RGB(120, 80, 200)) == RGB(153, 102, 255)


def test_normalize_is_idempotent():
    for color in [RGB(120, 80, 200), RGB(3, 7, 1), RGB(0, 0, 0), RGB(255, 10, 10)]:
        once = normalize_for_readability(color)
        assert normalize_for_readability(once) == once


def test_normalize_black_becomes_default():
    assert normalize_for_readability(RGB(0, 0, 0)) == DEFAULT_RGB


def test_normalize_colors_only_touches_primary():
    colors = DominantColors(RGB(100, 20, 20), RGB(10, 10, 40), 0.3)
    normalized = normalize_colors(colors)
    assert normalized.primary == RGB(255, 51, 51)
    assert normalized.secondary == colors.secondary
    assert normalized.border_brightness == 0.3
    assert perceived_brightness(normalized.primary) >= perceived_brightness(
        normalized.secondary
    )


def test_to_dict_shape():
    colors = DominantColors(RGB(1, 2, 3), RGB(4, 5, 6), 0.25)
    assert colors.to_dict() == {
        "primary": {"r": 1, "g": 2, "b": 3},
        "secondary": {"r": 4, "g": 5, "b": 6},
        "averageBrightness": 0.25,
    }
