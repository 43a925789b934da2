import logging
from functools import partial

from backend.core.config import (
    ALLOW_LOCAL_IMAGES,
    COLOR_TIMEOUT_SECONDS,
    IMAGE_FETCH_RETRIES,
    IMAGE_FETCH_TIMEOUT_SECONDS,
    LOG_LEVEL,
    PALETTE_SAMPLE_QUALITY,
    PALETTE_SAMPLE_SIZE,
)
from src.artwork import ColorProvider, DominantColorExtractor, DominantColors, fetch_image
from src.artwork.io.images import timeout_within

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def _fetch_timeout() -> float:
    limit = timeout_within(COLOR_TIMEOUT_SECONDS, IMAGE_FETCH_RETRIES)
    if IMAGE_FETCH_TIMEOUT_SECONDS > limit:
        logger.info(
            "fetch timeout lowered from %.2fs to %.2fs to fit %d retries into %.2fs",
            IMAGE_FETCH_TIMEOUT_SECONDS,
            limit,
            IMAGE_FETCH_RETRIES,
            COLOR_TIMEOUT_SECONDS,
        )
        return limit
    return IMAGE_FETCH_TIMEOUT_SECONDS


def build_provider() -> ColorProvider:
    """Create a color provider configured from the environment."""
    extractor = DominantColorExtractor(
        decode=partial(
            fetch_image,
            timeout=_fetch_timeout(),
            retries=IMAGE_FETCH_RETRIES,
            allow_local=ALLOW_LOCAL_IMAGES,
        ),
        sample_size=PALETTE_SAMPLE_SIZE,
        sample_quality=PALETTE_SAMPLE_QUALITY,
    )
    return ColorProvider(extractor, timeout=COLOR_TIMEOUT_SECONDS)


_configure_logging()

provider = build_provider()


def get_dominant_colors(image_url: str | None) -> DominantColors:
    """Dominant colors of the artwork at ``image_url``; never raises."""
    return provider.get_dominant_colors(image_url)
