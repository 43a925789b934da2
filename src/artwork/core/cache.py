"""Process-lifetime cache for dominant color results.

Each image id is computed at most once while the process lives. Callers
asking for an id that is already being computed wait for that computation
instead of starting their own.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from concurrent.futures import wait
from typing import Callable

from .colors import FALLBACK, DominantColors

logger = logging.getLogger(__name__)


class DominantColorCache:
    """Single-flight memoization of an expensive ``image_id -> colors`` function.

    Every computation gets its own thread, so a slow image never delays an
    unrelated one.

    Args:
        compute: The pipeline to run on a miss. May raise.
        timeout: Seconds a caller waits for a result before getting the
            fallback. ``None`` waits indefinitely.
    """

    def __init__(
        self,
        compute: Callable[[str], DominantColors],
        timeout: float | None = None,
    ) -> None:
        self._compute = compute
        self._timeout = timeout
        self._results: dict[str, DominantColors] = {}
        self._in_flight: dict[str, Future] = {}
        self._lock = threading.Lock()

    def get(self, image_id: str | None) -> DominantColors:
        """Return the colors for ``image_id``, computing them on first use.

        Never raises: failures and timeouts are logged and answered with
        ``FALLBACK``. Failed results are not stored, so a later call retries.
        """
        if not image_id:
            return FALLBACK

        with self._lock:
            cached = self._results.get(image_id)
            if cached is not None:
                return cached
            future = self._in_flight.get(image_id)
            if future is None:
                logger.debug("color cache miss for %s", image_id)
                future = Future()
                self._in_flight[image_id] = future
                th = threading.Thread(
                    target=self._run,
                    args=(image_id, future),
                    name="dominant-colors",
                    daemon=True,
                )
                th.start()

        try:
            return future.result(timeout=self._timeout)
        except FutureTimeoutError:
            logger.warning(
                "dominant colors for %s not ready after %ss; using fallback",
                image_id,
                self._timeout,
            )
        except Exception:
            logger.exception("dominant color extraction failed for %s", image_id)
        return FALLBACK

    def _run(self, image_id: str, future: Future) -> None:
        future.set_running_or_notify_cancel()
        try:
            colors = self._compute(image_id)
        except BaseException as e:
            with self._lock:
                self._in_flight.pop(image_id, None)
            future.set_exception(e)
            return
        # Stored before the future resolves, so woken callers see it cached
        with self._lock:
            self._results[image_id] = colors
            self._in_flight.pop(image_id, None)
        future.set_result(colors)

    def __contains__(self, image_id: object) -> bool:
        with self._lock:
            return image_id in self._results

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def close(self, timeout: float | None = None) -> None:
        """Wait for running computations to finish."""
        with self._lock:
            pending = list(self._in_flight.values())
        wait(pending, timeout=timeout)
