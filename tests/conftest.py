import threading

import pytest
from PIL import Image


class CallCounter:
    """Thread-safe call counter wrapped around a collaborator."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self, *args, **kwargs):
        with self._lock:
            self.calls += 1
        return self.fn(*args, **kwargs)


@pytest.fixture
def counter():
    return CallCounter


@pytest.fixture
def half_white_image():
    # Top half white, bottom half black: border brightness ~0.5
    img = Image.new("RGB", (100, 100), (0, 0, 0))
    img.paste((255, 255, 255), (0, 0, 100, 50))
    return img
