"""Reading and converting raw planar YUV 4:2:0 (I420) video."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

import numpy as np


def frame_size(width: int, height: int) -> int:
    """Number of bytes in one I420 frame: a full Y plane plus quarter-size U and V."""
    if width <= 0 or height <= 0:
        raise ValueError(f"frame size must be positive, got {width}x{height}")
    return width * height * 3 // 2


def read_frames(stream: BinaryIO, width: int, height: int) -> Iterator[bytes]:
    """Yield whole frames from a binary stream, stopping at end of data."""
    size = frame_size(width, height)
    while True:
        chunk = stream.read(size)
        if len(chunk) < size:
            return
        yield chunk


def split_planes(
    frame: bytes, width: int, height: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split an I420 frame into its Y, U and V planes as 2-D arrays."""
    if width % 2 or height % 2:
        raise ValueError(f"I420 frames need even dimensions, got {width}x{height}")
    size = frame_size(width, height)
    data = np.frombuffer(frame, dtype=np.uint8)
    if data.size != size:
        raise ValueError(f"expected {size} bytes for a {width}x{height} frame, got {data.size}")
    luma = width * height
    chroma = luma // 4
    y = data[:luma].reshape(height, width)
    u = data[luma:luma + chroma].reshape(height // 2, width // 2)
    v = data[luma + chroma:].reshape(height // 2, width // 2)
    return y, u, v


def yuv420p_to_rgb(frame: bytes, width: int, height: int) -> np.ndarray:
    """Convert an I420 frame to an RGB image using BT.601 video-range coefficients."""
    y, u, v = split_planes(frame, width, height)
    u_full = u.repeat(2, axis=0).repeat(2, axis=1).astype(np.float64) - 128.0
    v_full = v.repeat(2, axis=0).repeat(2, axis=1).astype(np.float64) - 128.0
    c = 1.164 * (y.astype(np.float64) - 16.0)
    r = c + 1.596 * v_full
    g = c - 0.392 * u_full - 0.813 * v_full
    b = c + 2.017 * u_full
    rgb = np.stack([r, g, b], axis=-1)
    return np.clip(np.round(rgb), 0, 255).astype(np.uint8)