"""Generate RGB frames, read I420 video, merge images and show them in a window."""

__version__ = "0.1.0"
__all__ = ["frames", "yuv", "merge", "display"]