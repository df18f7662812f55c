import argparse
import io

import pytest

import main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(main, "configure_logging", lambda *args, **kwargs: None)


@pytest.mark.parametrize("text, expected", [("24x12", (24, 12)), ("3X4", (3, 4))])
def test_parse_size(text, expected):
    assert main.parse_size(text) == expected


@pytest.mark.parametrize("text", ["24", "axb", "0x3", "4x-1", "1x2x3"])
def test_parse_size_rejects(text):
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_size(text)


def test_image_and_random_are_exclusive():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["board.ppm", "--random", "4x4"])
    assert excinfo.value.code == 2


def test_bad_image_exits_with_error(tmp_path, capsys):
    image = tmp_path / "bad.ppm"
    image.write_text("P6 1 1 255 0 0 0", encoding="ascii")
    with pytest.raises(SystemExit) as excinfo:
        main.main([str(image)])
    assert excinfo.value.code == 1
    assert "Expected magic 'P3'" in capsys.readouterr().err


def test_missing_image_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main([str(tmp_path / "missing.ppm")])
    assert excinfo.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_requires_interactive_terminal(monkeypatch, capsys):
    monkeypatch.setattr(main.sys, "stdin", io.StringIO())
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--random", "4x4", "--seed", "1"])
    assert excinfo.value.code == 1
    assert "interactive terminal" in capsys.readouterr().err


def test_load_board_defaults_to_random():
    args = main.build_parser().parse_args([])
    data = main.load_board(args, main.random.Random(3))
    assert (data.width, data.height) == (main.DEFAULT_RANDOM_COLS, main.DEFAULT_RANDOM_ROWS)


def test_no_auto_advance_flag():
    assert main.build_parser().parse_args([]).auto_advance is True
    assert main.build_parser().parse_args(["--no-auto-advance"]).auto_advance is False


def test_unknown_log_level_is_a_usage_error(monkeypatch):
    def reject(log_file, level):
        raise ValueError(f"Unknown log level: {level}")

    monkeypatch.setattr(main, "configure_logging", reject)
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--random", "2x2", "--log-level", "nope"])
    assert excinfo.value.code == 2
