# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pandas as pd

from ..errors import DatasetFormatError
from ..schemas import SentimentData

SEPARATORS = {
    "tab": "\t",
    "comma": ",",
    "space": " ",
    "semicolon": ";",
    "pipe": "|",
}

COLUMNS = ("text", "label")


def resolve_separator(name: str) -> str:
    key = str(name or "").strip().lower()
    if key in SEPARATORS:
        return SEPARATORS[key]
    if name in ("\\t", "\t"):
        return "\t"
    if len(name) == 1:
        return name
    raise ValueError(f"Unknown separator: {name!r}")


def _parse_label(raw: str) -> int:
    value = raw.strip()
    try:
        return int(value)
    except ValueError:
        # "1.0" style labels are accepted as long as they are integral
        as_float = float(value)
        if not as_float.is_integer():
            raise
        return int(as_float)


def iter_labelled_records(
    path: Path | str,
    *,
    separator: str = "\t",
    has_header: bool = False,
    skip_malformed: bool = False,
    on_skip: Callable[[DatasetFormatError], None] | None = None,
) -> Iterator[SentimentData]:
    """Yield one record per non-blank line of ``path``, in file order.

    Columns are mapped positionally to ``text`` and ``label``. A row with the
    wrong number of columns or a non-integer label raises
    :class:`DatasetFormatError` unless ``skip_malformed`` is set, in which case
    it is reported to ``on_skip`` and dropped.
    """
    sep = resolve_separator(separator)
    source = Path(path)
    with source.open("r", encoding="utf-8") as handle:
        for line_no, raw in enumerate(handle, 1):
            if line_no == 1 and has_header:
                continue
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            parts = line.split(sep)
            try:
                if len(parts) != len(COLUMNS):
                    raise DatasetFormatError(source, line_no, f"expected {len(COLUMNS)} columns, got {len(parts)}")
                try:
                    label = _parse_label(parts[1])
                except ValueError:
                    raise DatasetFormatError(source, line_no, f"label is not an integer: {parts[1]!r}") from None
            except DatasetFormatError as exc:
                if not skip_malformed:
                    raise
                if on_skip is not None:
                    on_skip(exc)
                continue
            yield SentimentData(text=parts[0], label=label)


def records_to_frame(rows: list[SentimentData]) -> pd.DataFrame:
    data = [{"text": row.text, "label": int(row.label)} for row in rows]
    return pd.DataFrame(data, columns=list(COLUMNS))


def load_labelled_frame(
    path: Path | str,
    *,
    separator: str = "\t",
    has_header: bool = False,
    skip_malformed: bool = False,
    on_skip: Callable[[DatasetFormatError], None] | None = None,
) -> pd.DataFrame:
    rows = list(
        iter_labelled_records(
            path,
            separator=separator,
            has_header=has_header,
            skip_malformed=skip_malformed,
            on_skip=on_skip,
        )
    )
    return records_to_frame(rows)
