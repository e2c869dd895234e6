import io

import numpy as np
import pytest

from pixelplay.yuv import frame_size, read_frames, split_planes, yuv420p_to_rgb


def _frame(width, height, y, u, v):
    luma = width * height
    return bytes([y] * luma + [u] * (luma // 4) + [v] * (luma // 4))


def test_frame_size_for_default_video():
    assert frame_size(400, 300) == 180000


def test_frame_size_rejects_bad_size():
    with pytest.raises(ValueError):
        frame_size(0, 4)


def test_read_frames_stops_at_partial_frame():
    size = frame_size(4, 2)
    data = bytes(range(size)) * 2 + b"\x01\x02"
    frames = list(read_frames(io.BytesIO(data), 4, 2))
    assert len(frames) == 2
    assert all(len(f) == size for f in frames)
    assert b"".join(frames) == data[: 2 * size]


def test_read_frames_empty_stream():
    assert list(read_frames(io.BytesIO(b""), 4, 2)) == []


def test_split_planes_layout():
    width, height = 4, 2
    frame = _frame(width, height, 10, 20, 30)
    y, u, v = split_planes(frame, width, height)
    assert y.shape == (height, width)
    assert u.shape == (height // 2, width // 2)
    assert v.shape == (height // 2, width // 2)
    assert np.all(y == 10) and np.all(u == 20) and np.all(v == 30)


def test_split_planes_rejects_odd_size():
    with pytest.raises(ValueError):
        split_planes(b"\x00" * 100, 5, 4)


def test_split_planes_rejects_wrong_length():
    with pytest.raises(ValueError):
        split_planes(b"\x00" * 5, 4, 2)


def test_black_level():
    black = yuv420p_to_rgb(_frame(4, 4, 16, 128, 128), 4, 4)
    assert black.tolist() == [[[0, 0, 0]] * 4] * 4


def test_white_level():
    white = yuv420p_to_rgb(_frame(4, 4, 235, 128, 128), 4, 4)
    assert white.tolist() == [[[255, 255, 255]] * 4] * 4


def test_neutral_chroma_gives_grey():
    rgb = yuv420p_to_rgb(_frame(4, 2, 120, 128, 128), 4, 2).astype(int)
    assert rgb.shape == (2, 4, 3)
    assert np.all(rgb[..., 0] == rgb[..., 1])
    assert np.all(rgb[..., 1] == rgb[..., 2])


def test_high_v_is_reddish():
    rgb = yuv420p_to_rgb(_frame(2, 2, 100, 128, 220), 2, 2).astype(int)
    assert rgb.shape == (2, 2, 3)
    assert int(rgb[..., 0].min()) > 200
    assert int(rgb[..., 1].max()) < 60
    assert int(rgb[..., 2].max()) < 130