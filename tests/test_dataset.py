from __future__ import annotations

from pathlib import Path

import pytest

from sentimentai.errors import DatasetFormatError
from sentimentai.schemas import SentimentData
from sentimentai.training.dataset import iter_labelled_records, load_labelled_frame, resolve_separator


def test_one_record_per_line_in_order(tmp_path: Path) -> None:
    path = tmp_path / "rows.txt"
    path.write_text("first line\t1\nsecond line\t0\nthird line\t1\n", encoding="utf-8")

    rows = list(iter_labelled_records(path))

    assert rows == [
        SentimentData(text="first line", label=1),
        SentimentData(text="second line", label=0),
        SentimentData(text="third line", label=1),
    ]


def test_reader_is_lazy(tmp_path: Path) -> None:
    records = iter_labelled_records(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        next(records)


def test_blank_lines_and_header(tmp_path: Path) -> None:
    path = tmp_path / "rows.txt"
    path.write_text("text\tlabel\nkeep me\t1\n\n   \nand me\t0\r\n", encoding="utf-8")

    rows = list(iter_labelled_records(path, has_header=True))

    assert [row.text for row in rows] == ["keep me", "and me"]
    assert [row.label for row in rows] == [1, 0]


def test_text_is_kept_verbatim(tmp_path: Path) -> None:
    path = tmp_path / "rows.txt"
    path.write_text("  Wow... Loved this place.  \t1\n", encoding="utf-8")

    (row,) = iter_labelled_records(path)

    assert row.text == "  Wow... Loved this place.  "


def test_integral_float_labels_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "rows.txt"
    path.write_text("fine\t1.0\nnot fine\t 0 \n", encoding="utf-8")

    assert [row.label for row in iter_labelled_records(path)] == [1, 0]


@pytest.mark.parametrize(
    "line",
    [
        "no label column",
        "too\tmany\tcolumns",
        "label is text\tpositive",
        "label is fractional\t0.5",
    ],
)
def test_malformed_row_aborts(tmp_path: Path, line: str) -> None:
    path = tmp_path / "rows.txt"
    path.write_text(f"good row\t1\n{line}\n", encoding="utf-8")

    with pytest.raises(DatasetFormatError) as info:
        list(iter_labelled_records(path))

    assert info.value.line_no == 2
    assert str(path) in str(info.value)


def test_malformed_rows_can_be_skipped(tmp_path: Path) -> None:
    path = tmp_path / "rows.txt"
    path.write_text("good\t1\nbroken\nalso good\t0\n", encoding="utf-8")
    skipped: list[DatasetFormatError] = []

    rows = list(iter_labelled_records(path, skip_malformed=True, on_skip=skipped.append))

    assert [row.text for row in rows] == ["good", "also good"]
    assert len(skipped) == 1
    assert skipped[0].line_no == 2


@pytest.mark.parametrize(
    ("name", "expected"),
    [("tab", "\t"), ("TAB", "\t"), ("\\t", "\t"), ("comma", ","), ("space", " "), ("pipe", "|"), (";", ";")],
)
def test_resolve_separator(name: str, expected: str) -> None:
    assert resolve_separator(name) == expected


def test_resolve_separator_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        resolve_separator("colon-ish")


def test_load_labelled_frame(tmp_path: Path) -> None:
    path = tmp_path / "rows.csv"
    path.write_text("a,1\nb,0\n", encoding="utf-8")

    frame = load_labelled_frame(path, separator="comma")

    assert list(frame.columns) == ["text", "label"]
    assert frame["text"].tolist() == ["a", "b"]
    assert frame["label"].tolist() == [1, 0]
