"""Artwork fetching and decoding."""

from __future__ import annotations

import logging
from io import BytesIO
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests
from PIL import Image, UnidentifiedImageError
from requests.adapters import HTTPAdapter, Retry

from ..core.errors import ImageFetchError

logger = logging.getLogger(__name__)

FETCH_RETRIES = 2
BACKOFF_FACTOR = 0.5


def _session(retries: int = FETCH_RETRIES) -> requests.Session:
    s = requests.Session()
    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        backoff_factor=BACKOFF_FACTOR,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset(["GET"]),
        # A server-chosen Retry-After could outlast the caller's time budget
        respect_retry_after_header=False,
    )
    s.mount("http://", HTTPAdapter(max_retries=retry))
    s.mount("https://", HTTPAdapter(max_retries=retry))
    return s


def _total_backoff(retries: int, backoff_factor: float) -> float:
    return sum(backoff_factor * 2**i for i in range(retries))


def worst_case_fetch_seconds(
    timeout: float,
    retries: int = FETCH_RETRIES,
    backoff_factor: float = BACKOFF_FACTOR,
) -> float:
    """Upper bound on a remote fetch: every attempt hits both the connect and
    the read timeout, plus the backoff sleeps between attempts."""
    return (retries + 1) * 2 * timeout + _total_backoff(retries, backoff_factor)


def timeout_within(
    budget: float,
    retries: int = FETCH_RETRIES,
    backoff_factor: float = BACKOFF_FACTOR,
) -> float:
    """Largest per-attempt timeout whose worst case fits into ``budget`` seconds."""
    remaining = budget - _total_backoff(retries, backoff_factor)
    return max(0.1, remaining / (2 * (retries + 1)))


def fetch_image(
    image_id: str,
    session: requests.Session | None = None,
    timeout: float = 10.0,
    retries: int = FETCH_RETRIES,
    allow_local: bool = False,
) -> Image.Image:
    """Load an image by URL and return it as an RGB image.

    Args:
        image_id: ``http(s)`` URL, or a ``file://`` URL when ``allow_local``
            is set.
        session: Optional session to reuse; a retrying one is created
            otherwise.
        timeout: Seconds allowed for connecting and for reading, per attempt.
        retries: Retries for a newly created session.
        allow_local: Permit ``file://`` URLs. Off by default so callers
            cannot read arbitrary files of the host.

    Returns:
        The decoded image in RGB mode.

    Raises:
        ImageFetchError: If the image cannot be downloaded or decoded, or
            the URL scheme is not allowed.
    """
    parsed = urlparse(image_id)
    try:
        if parsed.scheme in ("http", "https"):
            if session is None:
                with _session(retries) as own_session:
                    data = _download(own_session, image_id, timeout)
            else:
                data = _download(session, image_id, timeout)
            source = BytesIO(data)
        elif parsed.scheme == "file" and allow_local:
            source = url2pathname(parsed.path)
        else:
            raise ImageFetchError(image_id, f"unsupported scheme {parsed.scheme!r}")
        with Image.open(source) as img:
            img.load()
            return img.convert("RGB")
    except requests.RequestException as e:
        raise ImageFetchError(image_id, f"request failed: {e}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise ImageFetchError(image_id, f"not a readable image: {e}") from e


def _download(session: requests.Session, url: str, timeout: float) -> bytes:
    response = session.get(url, timeout=timeout)
    response.raise_for_status()
    logger.debug("fetched %s (%d bytes)", url, len(response.content))
    return response.content
