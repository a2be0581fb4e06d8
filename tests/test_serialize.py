import csv
import json
from pathlib import Path

import pytest

from nearfacsimile.comparison import Comparison
from nearfacsimile.options import Options
from nearfacsimile.percentage import Percentage
from nearfacsimile.serialize import (
    OutputComparison,
    serialize,
    stripped_path,
    write_csv,
    write_json,
)


def test_stripped_path_removes_root():
    assert stripped_path(Path("root/dir/file.txt"), Path("root")) == str(Path("dir/file.txt"))


def test_stripped_path_outside_root_raises():
    with pytest.raises(ValueError):
        stripped_path(Path("elsewhere/file.txt"), Path("root"))


def test_from_comparison_rounds_and_strips():
    comparison = Comparison(
        Path("root/a.txt"), Path("root/b.txt"), Percentage.from_fraction(0.999_999_99)
    )
    record = OutputComparison.from_comparison(comparison, Path("root"))
    assert record == OutputComparison(99.9, "a.txt", "b.txt")


def test_csv_layout(tmp_path):
    out = tmp_path / "out.csv"
    write_csv([OutputComparison(90.0, "a.txt", "b.txt")], out)
    assert out.read_text(encoding="utf-8") == "% similar,File 1,File 2\n90.0,a.txt,b.txt\n"


def test_csv_round_trip_with_awkward_names(tmp_path):
    out = tmp_path / "out.csv"
    records = [OutputComparison(100.0, "a,b.txt", 'say "hi".txt')]
    write_csv(records, out)
    with open(out, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[1][1:] == ["a,b.txt", 'say "hi".txt']


def test_json_round_trip(tmp_path):
    out = tmp_path / "out.json"
    records = [OutputComparison(100.0, "a.txt", "b.txt"), OutputComparison(90.0, "c.txt", "d.txt")]
    write_json(records, out)
    loaded = json.loads(out.read_text(encoding="utf-8"))
    assert [OutputComparison(**item) for item in loaded] == records


def test_json_empty_list(tmp_path):
    out = tmp_path / "out.json"
    write_json([], out)
    assert out.read_text(encoding="utf-8") == "[]"


def test_serialize_sorts_highest_first(tmp_path):
    comparisons = [
        Comparison(tmp_path / "a.txt", tmp_path / "b.txt", Percentage.from_fraction(0.9)),
        Comparison(tmp_path / "c.txt", tmp_path / "d.txt", Percentage.from_fraction(1.0)),
        Comparison(tmp_path / "e.txt", tmp_path / "f.txt", Percentage.from_fraction(0.95)),
    ]
    options = Options(path=tmp_path, json=tmp_path / "out.json", csv=tmp_path / "out.csv")
    records = serialize(comparisons, options)
    percentages = [record.pct_similar for record in records]
    assert percentages == sorted(percentages, reverse=True)
    loaded = json.loads((tmp_path / "out.json").read_text(encoding="utf-8"))
    assert [item["file1"] for item in loaded] == ["c.txt", "e.txt", "a.txt"]
    with open(tmp_path / "out.csv", newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert [row[1] for row in rows[1:]] == ["c.txt", "e.txt", "a.txt"]


def test_serialize_without_outputs_writes_nothing(tmp_path):
    comparisons = [
        Comparison(tmp_path / "a.txt", tmp_path / "b.txt", Percentage.from_fraction(1.0))
    ]
    records = serialize(comparisons, Options(path=tmp_path))
    assert [record.file2 for record in records] == ["b.txt"]
    assert list(tmp_path.iterdir()) == []