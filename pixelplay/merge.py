"""Placing two images side by side on a transparent canvas."""

from __future__ import annotations

import os

from PIL import Image


def merge_side_by_side(first: Image.Image, second: Image.Image) -> Image.Image:
    """Return an RGBA image with ``first`` on the left and ``second`` to its right.

    The canvas is as wide as both images together and as tall as the taller one;
    areas not covered by either image are fully transparent.
    """
    left = first.convert("RGBA")
    right = second.convert("RGBA")
    width = left.width + right.width
    height = max(left.height, right.height)
    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    canvas.paste(left, (0, 0))
    canvas.paste(right, (left.width, 0))
    return canvas


def merge_files(
    first_path: str | os.PathLike,
    second_path: str | os.PathLike,
    out_path: str | os.PathLike,
) -> Image.Image:
    """Merge two image files side by side, save the result and return it."""
    with Image.open(first_path) as first, Image.open(second_path) as second:
        merged = merge_side_by_side(first, second)
    merged.save(out_path)
    return merged