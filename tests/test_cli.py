import numpy

from chip8.cli import EXIT_LOAD_FAILED, build_parser, main
from chip8.frontend import frame_colours, square_wave
from chip8.memory import MAX_PROGRAM_SIZE


def test_missing_program_exits_non_zero(tmp_path):
    assert main([str(tmp_path / "missing.ch8")]) == EXIT_LOAD_FAILED


def test_oversize_program_exits_non_zero(tmp_path):
    path = tmp_path / "huge.ch8"
    path.write_bytes(bytes(MAX_PROGRAM_SIZE + 1))
    assert main([str(path)]) == EXIT_LOAD_FAILED


def test_parser_defaults():
    args = build_parser().parse_args(["game.ch8"])
    assert args.program == "game.ch8"
    assert not args.mute
    assert not args.cosmac


def test_frame_colours_layout():
    pixels = numpy.zeros((32, 64), dtype=bool)
    pixels[1, 5] = True
    frame = frame_colours(pixels)
    assert frame.shape == (64, 32, 3)
    assert frame[5, 1].tolist() == [255, 255, 255]
    assert frame[0, 0].tolist() == [0, 0, 0]


def test_square_wave_channels():
    assert square_wave(channels=1).ndim == 1
    stereo = square_wave(channels=2)
    assert stereo.shape[1] == 2
    assert stereo.dtype == numpy.int16
