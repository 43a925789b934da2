"""Centralized configuration for the backend.

Loads environment variables, sets defaults, and exposes constants
used to build the dominant color provider.
"""

import os

from dotenv import load_dotenv

from src.artwork.core import constants
from src.artwork.io import images

load_dotenv("env/.env")

ENV = os.getenv("ENV", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Quantization
PALETTE_SAMPLE_SIZE = int(
    os.getenv("PALETTE_SAMPLE_SIZE", str(constants.PALETTE_SAMPLE_SIZE))
)
PALETTE_SAMPLE_QUALITY = int(
    os.getenv("PALETTE_SAMPLE_QUALITY", str(constants.PALETTE_SAMPLE_QUALITY))
)

# Time limits (seconds). The fetch timeout is capped so that all retries
# together still finish inside COLOR_TIMEOUT_SECONDS.
COLOR_TIMEOUT_SECONDS = float(os.getenv("COLOR_TIMEOUT_SECONDS", "15"))
IMAGE_FETCH_TIMEOUT_SECONDS = float(os.getenv("IMAGE_FETCH_TIMEOUT_SECONDS", "5"))
IMAGE_FETCH_RETRIES = int(
    os.getenv("IMAGE_FETCH_RETRIES", str(images.FETCH_RETRIES))
)

# Only enable for trusted callers: lets file:// URLs read host files
ALLOW_LOCAL_IMAGES = os.getenv("ALLOW_LOCAL_IMAGES", "false").lower() in (
    "1",
    "true",
    "yes",
)
