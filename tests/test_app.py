from pathlib import Path

import pytest

from paddleball.app import ASSET_FILES, collision_demo, main, parse_args


def test_parse_args_default_assets_directory():
    args = parse_args([])
    assert args.assets == Path(".")


def test_parse_args_custom_assets_directory(tmp_path):
    args = parse_args(["--assets", str(tmp_path)])
    assert args.assets == tmp_path


def test_parse_args_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--bogus"])
    assert excinfo.value.code == 2


def test_main_fails_without_assets(tmp_path, capsys):
    assert main(["--assets", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    for name in ASSET_FILES:
        assert name in err


def test_main_reports_only_missing_assets(tmp_path, capsys):
    (tmp_path / "Teko-Bold.ttf").write_bytes(b"")
    assert main(["--assets", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert "Teko-Bold.ttf" not in err
    assert "ScoreSound.wav" in err


def test_collision_demo_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        collision_demo(["--help"])
    assert excinfo.value.code == 0
    assert "paddleball-collision" in capsys.readouterr().out