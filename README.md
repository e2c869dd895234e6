# pixelplay

Small tools for working with raw pixel data. It builds RGB frames in memory,
reads planar YUV 4:2:0 (I420) video files, places two images side by side,
and shows the results in a pygame window.

## Install

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

The `pixelplay` command has one sub-command for each viewer. Each opens a
window that stays open until you close it.

```
pixelplay --help
pixelplay gradient [--width 1280] [--height 720]
pixelplay fader [--width 800] [--height 600]
pixelplay yuv [PATH] [--width 400] [--height 300]
pixelplay merge [FIRST] [SECOND] [--out out.png]
```

- `gradient` shows a red gradient whose red value starts at 254 on the top
  row and drops by one per row, wrapping around below zero.
- `fader` shows a solid green field in a resizable window. Its green level
  drops by one on every tick of about 10 ms, wrapping from 0 back to 255.
- `yuv` plays a raw I420 file (default `400_300_25.yuv`), one frame per
  tick. When the file runs out, the last frame stays on screen.
- `merge` places `FIRST` (default `1.jpg`) and `SECOND` (default `2.jpg`)
  side by side, saves the result to `--out` and shows it.

If a file cannot be read or a size is invalid, the command prints
`pixelplay: <message>` to standard error and exits with status 1.

The same viewers are available as functions in `pixelplay.display`:
`show_gradient(width, height)`, `run_fader(width, height)`,
`play_yuv(path, width, height)` and
`show_merged(first_path, second_path, out_path)`. All of their arguments have
the defaults shown above. `build_parser()` returns the argument parser, and
`main(argv=None)` runs the command line and returns the exit status.

## Library

```python
from pixelplay.frames import red_gradient, green_frame, GreenFader
from pixelplay.yuv import frame_size, read_frames, split_planes, yuv420p_to_rgb
from pixelplay.merge import merge_side_by_side, merge_files

# A (720, 1280, 3) uint8 RGB array, one step less red on each row.
gradient = red_gradient(1280, 720)

# A (600, 800, 4) uint8 array with only the green byte set.
frame = green_frame(800, 600, 128)

# A fading sequence: the first frame has level 254, then 253, and so on.
fader = GreenFader(800, 600)
first = fader.next_frame()
print(fader.level)  # 254

# Read I420 frames from a raw file and convert them to RGB.
with open("400_300_25.yuv", "rb") as stream:
    for raw in read_frames(stream, 400, 300):
        y, u, v = split_planes(raw, 400, 300)
        rgb = yuv420p_to_rgb(raw, 400, 300)

# Put two images next to each other; uncovered space stays transparent.
merged = merge_files("1.jpg", "2.jpg", "out.png")
```

Details:

- An I420 frame of width `w` and height `h` holds `w * h` luma bytes
  followed by U and V planes of a quarter of that size each;
  `frame_size(w, h)` gives the total byte count.
- `read_frames` yields whole frames only; a short trailing chunk is dropped.
- `split_planes` and `yuv420p_to_rgb` need even dimensions and exactly one
  frame's worth of bytes, and raise `ValueError` otherwise.
- `yuv420p_to_rgb` uses BT.601 video-range coefficients and returns a
  `(h, w, 3)` uint8 array.
- `merge_side_by_side(first, second)` takes two Pillow images and returns an
  RGBA image as wide as both together and as tall as the taller one.
- Non-positive sizes, and green levels outside 0..255, raise `ValueError`.

## Limitations

The viewers only display frames: there is no pause, seeking or playback-rate
setting, and frames are drawn at the window's top-left corner without
scaling. The YUV reader handles I420 only.