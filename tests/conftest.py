from __future__ import annotations

from pathlib import Path

import pytest

from sentimentai.pipeline import default_pipeline
from sentimentai.schemas import TreeHyperparameters
from sentimentai.training.trainer import train

TRAIN_SUBJECTS = [
    "the movie",
    "this film",
    "the plot",
    "the soundtrack",
    "the cast",
    "the ending",
    "the service",
    "the food",
    "the pizza",
    "the room",
]

TEST_SUBJECTS = ["the acting", "the script", "the music", "the story"]


def labelled_rows(subjects: list[str]) -> list[tuple[str, int]]:
    rows: list[tuple[str, int]] = []
    for subject in subjects:
        rows.append((f"{subject.capitalize()} is great", 1))
        rows.append((f"{subject.capitalize()} is bad", 0))
    return rows


def write_rows(path: Path, rows: list[tuple[str, int]], separator: str = "\t") -> Path:
    path.write_text("".join(f"{text}{separator}{label}\n" for text, label in rows), encoding="utf-8")
    return path


@pytest.fixture
def train_file(tmp_path: Path) -> Path:
    return write_rows(tmp_path / "train_labelled.txt", labelled_rows(TRAIN_SUBJECTS))


@pytest.fixture
def test_file(tmp_path: Path) -> Path:
    return write_rows(tmp_path / "test_labelled.txt", labelled_rows(TEST_SUBJECTS))


@pytest.fixture(scope="session")
def trained_model(tmp_path_factory):
    base = tmp_path_factory.mktemp("model")
    path = write_rows(base / "train_labelled.txt", labelled_rows(TRAIN_SUBJECTS))
    return train(default_pipeline(path, TreeHyperparameters()))


@pytest.fixture
def make_dataset(tmp_path: Path):
    def _make(name: str, rows: list[tuple[str, int]], separator: str = "\t") -> Path:
        return write_rows(tmp_path / name, rows, separator)

    return _make
