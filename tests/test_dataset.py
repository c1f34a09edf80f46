import json
import os

import pytest

from mazepath.dataset import generate_dataset
from mazepath.render import GeometryError


def _records(path):
    with open(path) as f:
        return [json.loads(line) for line in f]


def test_dataset_records(tmp_path):
    out = tmp_path / "mazes.jsonl"
    made, uniq = generate_dataset(count=12, rows=5, cols=6, out_jsonl=str(out), base_seed=100)
    assert made == 12
    assert uniq == 12
    recs = _records(out)
    assert [r["index"] for r in recs] == list(range(12))
    assert len({r["signature"] for r in recs}) == 12
    for r in recs:
        n = r["rows"] * r["cols"]
        assert r["start"] == 0
        assert n // 2 <= r["goal"] < n
        assert r["path"][0] == 0 and r["path"][-1] == r["goal"]
        assert r["path_len"] == len(r["path"]) - 1
        assert r["true_path"][0] == r["start_pos"] == [0, 0]
        assert r["true_path"][-1] == r["end_pos"]
        assert r["end_pos"] == [r["goal"] // 6, r["goal"] % 6]


def test_dataset_is_reproducible(tmp_path):
    a, b = tmp_path / "a.jsonl", tmp_path / "b.jsonl"
    generate_dataset(count=5, rows=4, cols=4, out_jsonl=str(a), base_seed=7)
    generate_dataset(count=5, rows=4, cols=4, out_jsonl=str(b), base_seed=7)
    assert a.read_text() == b.read_text()


def test_dataset_stops_when_grid_runs_out_of_mazes(tmp_path):
    # a 2x2 grid has only four spanning trees
    out = tmp_path / "tiny.jsonl"
    made, uniq = generate_dataset(count=10, rows=2, cols=2, out_jsonl=str(out), max_attempts=200)
    assert made == uniq <= 4
    assert len(_records(out)) == made


def test_dataset_pngs(tmp_path):
    out = tmp_path / "mazes.jsonl"
    png_dir = tmp_path / "png"
    generate_dataset(count=3, rows=4, cols=5, out_jsonl=str(out), png_dir=str(png_dir))
    assert sorted(os.listdir(png_dir)) == ["maze_00000.png", "maze_00001.png", "maze_00002.png"]


def test_dataset_png_grid_too_large_writes_nothing(tmp_path):
    out = tmp_path / "mazes.jsonl"
    png_dir = tmp_path / "png"
    with pytest.raises(GeometryError):
        generate_dataset(count=3, rows=500, cols=2, out_jsonl=str(out), png_dir=str(png_dir))
    assert not out.exists()
    assert not png_dir.exists()


def test_dataset_large_grid_without_pngs_is_fine(tmp_path):
    out = tmp_path / "mazes.jsonl"
    made, _ = generate_dataset(count=1, rows=500, cols=2, out_jsonl=str(out))
    assert made == 1
