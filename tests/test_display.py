import pytest

from pixelplay.display import build_parser, main


def test_parser_gradient_defaults():
    args = build_parser().parse_args(["gradient"])
    assert (args.width, args.height) == (1280, 720)


def test_parser_fader_defaults():
    args = build_parser().parse_args(["fader"])
    assert (args.width, args.height) == (800, 600)


def test_parser_yuv_defaults():
    args = build_parser().parse_args(["yuv"])
    assert args.path == "400_300_25.yuv"
    assert (args.width, args.height) == (400, 300)


def test_parser_merge_arguments():
    args = build_parser().parse_args(["merge", "a.jpg", "b.jpg", "--out", "c.png"])
    assert (args.first, args.second, args.out) == ("a.jpg", "b.jpg", "c.png")


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_missing_yuv_file(tmp_path, capsys):
    status = main(["yuv", str(tmp_path / "missing.yuv")])
    assert status == 1
    assert "pixelplay" in capsys.readouterr().err


def test_main_missing_merge_inputs(tmp_path, capsys):
    status = main(["merge", str(tmp_path / "a.jpg"), str(tmp_path / "b.jpg"),
                   "--out", str(tmp_path / "out.png")])
    assert status == 1
    assert not (tmp_path / "out.png").exists()
    assert capsys.readouterr().err.startswith("pixelplay:")