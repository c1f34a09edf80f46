import logging

import pytest
from PIL import Image

from mazepath import cli


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.getLogger("mazepath").setLevel(logging.NOTSET)


def test_image_pil(tmp_path):
    out = tmp_path / "maze.png"
    assert cli.main(["image", "--rows", "6", "--cols", "8", "--seed", "4", "--out", str(out)]) == 0
    with Image.open(out) as im:
        assert im.size == (720, 480)


def test_image_mpl(tmp_path):
    out = tmp_path / "maze.png"
    assert cli.main(["image", "--rows", "4", "--cols", "4", "--seed", "4",
                     "--renderer", "mpl", "--out", str(out)]) == 0
    assert out.exists()


def test_animate(tmp_path):
    out = tmp_path / "solve.gif"
    assert cli.main(["animate", "--rows", "5", "--cols", "5", "--seed", "2",
                     "--frame-ms", "20", "--canvas", "300,200", "--out", str(out)]) == 0
    with Image.open(out) as im:
        assert im.size == (300, 200)
        assert im.n_frames >= 2


def test_solve_with_debug_and_log_file(tmp_path):
    log_file = tmp_path / "run.log"
    assert cli.main(["solve", "--rows", "3", "--cols", "3", "--seed", "0",
                     "--debug", "--log-file", str(log_file)]) == 0
    text = log_file.read_text()
    assert "9 vertices, 8 edges" in text
    assert "Path from 0 to" in text


def test_dataset(tmp_path):
    out = tmp_path / "mazes.jsonl"
    assert cli.main(["dataset", "--count", "4", "--rows", "3", "--cols", "4", "--out", str(out)]) == 0
    assert len(out.read_text().splitlines()) == 4


@pytest.mark.parametrize("value", ["1", "0", "-2", "abc", "2.5"])
def test_bad_dimensions_rejected_by_parser(value, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["solve", "--rows", value, "--cols", "5"])
    assert exc.value.code == 2
    assert "rows" in capsys.readouterr().err


def test_dimension_type():
    assert cli.dimension("2") == 2
    with pytest.raises(Exception):
        cli.dimension("1")


def test_core_errors_become_exit_status(monkeypatch):
    def boom(config):
        raise cli.NoPathFound(0, 3)

    monkeypatch.setattr(cli, "build_and_solve", boom)
    assert cli.main(["solve", "--rows", "2", "--cols", "2"]) == 1


def test_image_grid_too_large_for_canvas(tmp_path):
    out = tmp_path / "maze.png"
    log_file = tmp_path / "run.log"
    assert cli.main(["image", "--rows", "500", "--cols", "2", "--seed", "1",
                     "--out", str(out), "--log-file", str(log_file)]) == 1
    assert not out.exists()
    text = log_file.read_text()
    assert "ERROR" in text
    assert "500x2 too large" in text


def test_animate_grid_too_large_for_canvas(tmp_path):
    out = tmp_path / "solve.gif"
    assert cli.main(["animate", "--rows", "500", "--cols", "2", "--seed", "1", "--out", str(out)]) == 1
    assert not out.exists()


def test_dataset_png_dir_grid_too_large_leaves_no_jsonl(tmp_path):
    out = tmp_path / "mazes.jsonl"
    png_dir = tmp_path / "pngs"
    assert cli.main(["dataset", "--count", "3", "--rows", "500", "--cols", "2",
                     "--png-dir", str(png_dir), "--out", str(out)]) == 1
    assert not out.exists()
    assert not png_dir.exists()


def test_dataset_debug_reaches_orchestrator(tmp_path):
    out = tmp_path / "mazes.jsonl"
    log_file = tmp_path / "run.log"
    assert cli.main(["dataset", "--count", "2", "--rows", "3", "--cols", "3", "--out", str(out),
                     "--debug", "--log-file", str(log_file)]) == 0
    text = log_file.read_text()
    assert "maze graph" in text
    assert "Path from 0 to" in text


@pytest.mark.parametrize("value", ["300", "a,b", "300,200,1", "0,200", ""])
def test_bad_canvas_rejected_by_parser(value, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["image", "--canvas", value, "--out", "unused.png"])
    assert exc.value.code == 2
    assert "--canvas" in capsys.readouterr().err


def test_canvas_pair_type():
    assert cli.canvas_pair("300,200") == (300, 200)
    with pytest.raises(Exception):
        cli.canvas_pair("300")


def test_invalid_dimension_becomes_exit_status(monkeypatch):
    def boom(config):
        raise cli.InvalidDimension(1, 5)

    monkeypatch.setattr(cli, "build_and_solve", boom)
    assert cli.main(["solve", "--rows", "2", "--cols", "5"]) == 1
