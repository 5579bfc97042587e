import pytest
from PIL import Image

from p3gray.cli import EXIT_FORMAT, EXIT_IO, EXIT_OK, main, png_main

from .conftest import SAMPLE_IN, SAMPLE_OUT


def test_convert(tmp_path, capsys):
    src = tmp_path / "in.ppm"
    dst = tmp_path / "out.ppm"
    src.write_bytes(SAMPLE_IN)
    assert main([str(src), str(dst)]) == EXIT_OK
    assert dst.read_bytes() == SAMPLE_OUT
    assert f"Wrote {dst}" in capsys.readouterr().out


def test_default_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "im.ppm").write_bytes(SAMPLE_IN)
    assert main([]) == EXIT_OK
    assert (tmp_path / "im-gray.ppm").read_bytes() == SAMPLE_OUT


def test_verbose(tmp_path, capsys):
    src = tmp_path / "in.ppm"
    src.write_bytes(SAMPLE_IN)
    assert main([str(src), str(tmp_path / "out.ppm"), "-v"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "[info] image: 2x1, maxval 255" in out


def test_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "nope.ppm"), str(tmp_path / "out.ppm")]) == EXIT_IO
    assert "Error: Cannot open input file" in capsys.readouterr().err


def test_format_error_exit_code(tmp_path, capsys):
    src = tmp_path / "in.ppm"
    dst = tmp_path / "out.ppm"
    src.write_bytes(b"P3 2 1 255\n1 2 3\n")
    assert main([str(src), str(dst)]) == EXIT_FORMAT
    assert "row 0, col 1" in capsys.readouterr().err
    assert not dst.exists()


def test_max_dimension_flag(tmp_path, capsys):
    src = tmp_path / "in.ppm"
    src.write_bytes(SAMPLE_IN)
    assert main([str(src), str(tmp_path / "o.ppm"), "--max-dimension", "1"]) == EXIT_FORMAT
    assert "Invalid image dimensions" in capsys.readouterr().err


def test_max_dimension_must_be_positive(tmp_path):
    with pytest.raises(SystemExit):
        main(["a", "b", "--max-dimension", "0"])


def test_preview(tmp_path):
    src = tmp_path / "in.ppm"
    png = tmp_path / "out.png"
    src.write_bytes(SAMPLE_IN)
    assert main([str(src), str(tmp_path / "out.ppm"), "--preview", str(png)]) == EXIT_OK
    with Image.open(png) as im:
        assert im.size == (2, 1)
        assert im.getpixel((1, 0)) == (50, 50, 50)


def test_png_main(tmp_path, capsys):
    png = tmp_path / "pic.png"
    Image.new("RGB", (3, 2), (30, 60, 90)).save(png)
    assert png_main([str(png)]) == EXIT_OK
    ppm = tmp_path / "pic.ppm"
    assert ppm.read_bytes().startswith(b"P3\n3 2\n255\n30 60 90 30 60 90 30 60 90\n")
    assert main([str(ppm), str(tmp_path / "gray.ppm")]) == EXIT_OK
    assert (tmp_path / "gray.ppm").read_bytes() == b"P3\n3 2\n255\n" + b"60 60 60 60 60 60 60 60 60\n" * 2


def test_png_main_missing_input(tmp_path, capsys):
    assert png_main([str(tmp_path / "none.png")]) == EXIT_IO
    assert "does not exist" in capsys.readouterr().err
