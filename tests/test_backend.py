"""Tests for the backend wiring of the color provider."""

from backend import app
from backend.core import config
from src.artwork import FALLBACK, ColorProvider
from src.artwork.io.images import worst_case_fetch_seconds


def test_build_provider_uses_configuration():
    provider = app.build_provider()
    try:
        assert isinstance(provider, ColorProvider)
        assert provider.extractor.sample_size == config.PALETTE_SAMPLE_SIZE
        assert provider.extractor.sample_quality == config.PALETTE_SAMPLE_QUALITY
        keywords = provider.extractor.decode.keywords
        assert keywords["retries"] == config.IMAGE_FETCH_RETRIES
        assert keywords["allow_local"] == config.ALLOW_LOCAL_IMAGES
    finally:
        provider.close()


def test_fetch_fits_inside_color_timeout():
    timeout = app.build_provider().extractor.decode.keywords["timeout"]
    assert timeout <= config.IMAGE_FETCH_TIMEOUT_SECONDS
    worst = worst_case_fetch_seconds(timeout, config.IMAGE_FETCH_RETRIES)
    assert worst <= config.COLOR_TIMEOUT_SECONDS + 1e-9


def test_local_files_are_off_by_default():
    assert config.ALLOW_LOCAL_IMAGES is False


def test_get_dominant_colors_without_url_is_fallback():
    assert app.get_dominant_colors(None) is FALLBACK
    assert app.get_dominant_colors("") is FALLBACK
