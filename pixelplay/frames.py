"""Synthetic test frames: a red gradient and a fading green field."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"frame size must be positive, got {width}x{height}")


def red_gradient(width: int, height: int) -> np.ndarray:
    """Return an RGB image whose red channel falls by one per row, starting at 254.

    The value wraps around modulo 256, as an unsigned byte counter would.
    """
    _check_size(width, height)
    reds = ((254 - np.arange(height)) % 256).astype(np.uint8)
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, :, 0] = reds[:, np.newaxis]
    return image


def green_frame(width: int, height: int, level: int) -> np.ndarray:
    """Return a four-byte-per-pixel frame (R, G, B, A) with only green set to ``level``."""
    _check_size(width, height)
    if not 0 <= level <= 255:
        raise ValueError(f"level must be within 0..255, got {level}")
    frame = np.zeros((height, width, 4), dtype=np.uint8)
    frame[:, :, 1] = level
    return frame


class GreenFader:
    """Produces green frames whose intensity drops by one each frame, wrapping at zero."""

    def __init__(self, width: int, height: int) -> None:
        _check_size(width, height)
        self.width = width
        self.height = height
        self._level = 255

    @property
    def level(self) -> int:
        """Green level of the most recently produced frame."""
        return self._level

    def next_frame(self) -> np.ndarray:
        """Step the level down by one and return the matching frame."""
        self._level = (self._level - 1) % 256
        return green_frame(self.width, self.height, self._level)

    def __iter__(self) -> Iterator[np.ndarray]:
        while True:
            yield self.next_frame()