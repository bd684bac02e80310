import json

from PIL import Image

from icon_badges.cli import main

from conftest import RED, save_png, solid


def test_badges_command(tmp_path, icons_dir, shape_path, capsys):
    colors = tmp_path / "colors.json"
    colors.write_text(json.dumps({"Attack": "#FF0000"}), encoding="utf-8")

    assert main(["badges", str(icons_dir), str(shape_path), str(tmp_path / "out"), "--colors", str(colors)]) == 0

    assert "created 1/1" in capsys.readouterr().out
    with Image.open(tmp_path / "out" / "Attack.png") as badge:
        assert badge.getpixel((0, 0)) == RED


def test_badges_default_output_dir(icons_dir, shape_path):
    assert main(["badges", "-q", str(icons_dir), str(shape_path)]) == 0
    assert (icons_dir / "output" / "Attack.png").is_file()


def test_badges_missing_shape_is_fatal(tmp_path, icons_dir):
    assert main(["badges", str(icons_dir), str(tmp_path / "missing.png")]) == 1
    assert not (icons_dir / "output").exists()


def test_badges_reports_failures_without_failing(tmp_path, icons_dir, shape_path, capsys):
    (icons_dir / "Broken.png").write_bytes(b"garbage")
    assert main(["badges", str(icons_dir), str(shape_path), str(tmp_path / "out")]) == 0
    assert "created 1/2 icons (1 failed)" in capsys.readouterr().out


def test_recolor_command_directory(tmp_path):
    src = tmp_path / "icons"
    save_png(solid((4, 4)), src / "a.png")

    assert main(["recolor", str(src), "#ff0000"]) == 0

    with Image.open(tmp_path / "icons-recolored" / "a.png") as out:
        assert out.getpixel((0, 0)) == RED


def test_recolor_command_rejects_bad_color(tmp_path):
    icon = save_png(solid((4, 4)), tmp_path / "icon.png")
    assert main(["recolor", str(icon), "red"]) == 1
    assert not (tmp_path / "icon-recolored.png").exists()


def test_recolor_command_missing_input(tmp_path):
    assert main(["recolor", str(tmp_path / "nope.png"), "ff0000"]) == 1


def test_recolor_command_current_directory(tmp_path, monkeypatch):
    save_png(solid((4, 4)), tmp_path / "a.png")
    monkeypatch.chdir(tmp_path)

    assert main(["recolor", ".", "ff0000"]) == 0

    with Image.open(tmp_path / ".-recolored" / "a.png") as out:
        assert out.getpixel((0, 0)) == RED


def test_badges_output_path_is_a_file(tmp_path, icons_dir, shape_path):
    blocked = tmp_path / "out"
    blocked.write_text("not a directory", encoding="utf-8")
    assert main(["badges", str(icons_dir), str(shape_path), str(blocked)]) == 1
