# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(slots=True)
class SentimentData:
    text: str
    label: int = 0


@dataclass(slots=True)
class SentimentPrediction:
    sentiment: bool
    probability: float
    score: float

    @property
    def label(self) -> str:
        return "Positive" if self.sentiment else "Negative"


@dataclass(frozen=True, slots=True)
class TreeHyperparameters:
    num_trees: int = 5
    num_leaves: int = 5
    min_documents_in_leafs: int = 2
    learning_rate: float = 0.2
    random_state: int = 42

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BinaryClassificationMetrics:
    accuracy: float
    auc: float
    f1_score: float
    auprc: float = 0.0
    positive_precision: float = 0.0
    positive_recall: float = 0.0
    negative_precision: float = 0.0
    negative_recall: float = 0.0
    log_loss: float = 0.0
    tp: int = 0
    fp: int = 0
    tn: int = 0
    fn: int = 0

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
