"""Window front ends for the frame generators, plus the command line."""

from __future__ import annotations

import argparse
import itertools
import os
import sys
from collections.abc import Iterable

import numpy as np
import pygame

from .frames import GreenFader, red_gradient
from .merge import merge_files
from .yuv import read_frames, yuv420p_to_rgb

_FRAME_INTERVAL_MS = 10


def _to_surface(rgb: np.ndarray) -> pygame.Surface:
    height, width = rgb.shape[:2]
    return pygame.image.frombuffer(np.ascontiguousarray(rgb).tobytes(), (width, height), "RGB")


def _present(
    frames: Iterable[np.ndarray],
    size: tuple[int, int],
    title: str,
    resizable: bool = False,
) -> None:
    """Show RGB frames, one per tick, until the window is closed.

    When the frames run out, the last one stays on screen.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode(size, pygame.RESIZABLE if resizable else 0)
        pygame.display.set_caption(title)
        source = iter(frames)
        while True:
            event = pygame.event.wait(_FRAME_INTERVAL_MS)
            if event.type == pygame.QUIT:
                return
            frame = next(source, None)
            if frame is None:
                continue
            screen.fill((0, 0, 0))
            screen.blit(_to_surface(frame), (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def show_gradient(width: int = 1280, height: int = 720) -> None:
    """Display the red gradient image."""
    image = red_gradient(width, height)
    _present(itertools.repeat(image), (width, height), "Red gradient")


def run_fader(width: int = 800, height: int = 600) -> None:
    """Display a green field that keeps fading, in a resizable window."""
    frames = (frame[..., :3] for frame in GreenFader(width, height))
    _present(frames, (width, height), "SDL Window", resizable=True)


def play_yuv(path: str | os.PathLike = "400_300_25.yuv", width: int = 400, height: int = 300) -> None:
    """Play a raw I420 file frame by frame."""
    with open(path, "rb") as stream:
        frames = (yuv420p_to_rgb(f, width, height) for f in read_frames(stream, width, height))
        _present(frames, (width, height), "YUV player")


def show_merged(
    first_path: str | os.PathLike = "1.jpg",
    second_path: str | os.PathLike = "2.jpg",
    out_path: str | os.PathLike = "out.png",
) -> None:
    """Merge two images side by side, save the result and display it."""
    merged = merge_files(first_path, second_path, out_path)
    rgb = np.asarray(merged.convert("RGB"))
    _present(itertools.repeat(rgb), merged.size, "Merged images")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with one sub-command per viewer."""
    parser = argparse.ArgumentParser(prog="pixelplay", description="Show generated and raw images.")
    commands = parser.add_subparsers(dest="command", required=True)

    gradient = commands.add_parser("gradient", help="show a red gradient")
    gradient.add_argument("--width", type=int, default=1280)
    gradient.add_argument("--height", type=int, default=720)

    fader = commands.add_parser("fader", help="show a fading green field")
    fader.add_argument("--width", type=int, default=800)
    fader.add_argument("--height", type=int, default=600)

    yuv = commands.add_parser("yuv", help="play a raw I420 file")
    yuv.add_argument("path", nargs="?", default="400_300_25.yuv")
    yuv.add_argument("--width", type=int, default=400)
    yuv.add_argument("--height", type=int, default=300)

    merge = commands.add_parser("merge", help="merge two images side by side")
    merge.add_argument("first", nargs="?", default="1.jpg")
    merge.add_argument("second", nargs="?", default="2.jpg")
    merge.add_argument("--out", default="out.png")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.command == "gradient":
            show_gradient(args.width, args.height)
        elif args.command == "fader":
            run_fader(args.width, args.height)
        elif args.command == "yuv":
            play_yuv(args.path, args.width, args.height)
        else:
            show_merged(args.first, args.second, args.out)
    except (OSError, ValueError) as exc:
        print(f"pixelplay: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())