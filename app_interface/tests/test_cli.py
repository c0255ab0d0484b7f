# tests/test_cli.py

import pytest
from PIL import Image
from ground_overlay.__main__ import main


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "photo.png"
    Image.new("RGB", (200, 100), (0, 200, 0)).save(str(path))
    return str(path)


def test_render_from_anchor(image_path, tmp_path, capsys):
    out = tmp_path / "view.png"
    html = tmp_path / "map.html"
    code = main([image_path, "--anchor", "48.86", "2.30",
                 "--resolution", "0.5", "--azimuth", "20",
                 "--zoom", "15", "--size", "200", "150",
                 "--out", str(out), "--map", str(html)])
    assert code == 0
    with Image.open(out) as img:
        assert img.size == (200, 150)
        assert img.getpixel((100, 75)) == (0, 200, 0, 255)
        assert img.getpixel((0, 0))[3] == 0
    assert html.exists() and html.stat().st_size > 0
    printed = capsys.readouterr().out
    assert "bottom_left: Latitude: 48.860000, Longitude: 2.300000" in printed


def test_render_from_two_corners(image_path, tmp_path):
    out = tmp_path / "view.png"
    code = main([image_path, "--corners", "48.87", "2.28", "48.85", "2.32",
                 "--zoom", "13", "--size", "300", "300", "--out", str(out)])
    assert code == 0
    with Image.open(out) as img:
        assert img.getpixel((150, 150)) == (0, 200, 0, 255)


def test_bad_corner_count(image_path, tmp_path, capsys):
    code = main([image_path, "--corners", "1", "2", "3", "4", "5", "6",
                 "--out", str(tmp_path / "view.png")])
    assert code == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_bow_tie_corners(image_path, tmp_path):
    code = main([image_path, "--corners", "1", "0", "0", "1", "1", "1", "0", "0",
                 "--out", str(tmp_path / "view.png")])
    assert code == 2


def test_missing_image(tmp_path):
    code = main([str(tmp_path / "nope.png"), "--anchor", "0", "0",
                 "--out", str(tmp_path / "view.png")])
    assert code == 2
