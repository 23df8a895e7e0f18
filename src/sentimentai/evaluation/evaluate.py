# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Callable, Iterable

from sklearn.metrics import (
    accuracy_score,
    average_precision_score,
    confusion_matrix,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)

from ..errors import DatasetFormatError
from ..inference.predictor import THRESHOLD, PredictionModel
from ..pipeline import TextLoader
from ..schemas import BinaryClassificationMetrics, SentimentData


def _safe_score(fn, y_true: list[int], y_prob: list[float]) -> float:
    # AUC-style scores are undefined when only one class is present
    if len(set(y_true)) < 2:
        return 0.0
    value = float(fn(y_true, y_prob))
    if value != value:  # NaN
        return 0.0
    return value


class BinaryClassificationEvaluator:
    """Scores a fitted model against labelled records at a fixed threshold."""

    def __init__(self, threshold: float = THRESHOLD) -> None:
        self.threshold = threshold

    def _records(self, test_data: TextLoader | Iterable[SentimentData], on_skip: Callable[[DatasetFormatError], None] | None) -> list[SentimentData]:
        if isinstance(test_data, TextLoader):
            return list(test_data.records(on_skip=on_skip))
        return list(test_data)

    def evaluate(
        self,
        model: PredictionModel,
        test_data: TextLoader | Iterable[SentimentData],
        *,
        on_skip: Callable[[DatasetFormatError], None] | None = None,
    ) -> BinaryClassificationMetrics:
        rows = self._records(test_data, on_skip)
        if not rows:
            raise ValueError("Cannot evaluate on an empty dataset")
        y_true = [1 if int(row.label) == 1 else 0 for row in rows]
        y_prob = model.predict_proba(rows)
        return self.metrics(y_true, y_prob)

    def metrics(self, y_true: list[int], y_prob: list[float]) -> BinaryClassificationMetrics:
        y_pred = [1 if score >= self.threshold else 0 for score in y_prob]
        tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
        return BinaryClassificationMetrics(
            accuracy=float(accuracy_score(y_true, y_pred)),
            auc=_safe_score(roc_auc_score, y_true, y_prob),
            f1_score=float(f1_score(y_true, y_pred, zero_division=0)),
            auprc=_safe_score(average_precision_score, y_true, y_prob),
            positive_precision=float(precision_score(y_true, y_pred, pos_label=1, zero_division=0)),
            positive_recall=float(recall_score(y_true, y_pred, pos_label=1, zero_division=0)),
            negative_precision=float(precision_score(y_true, y_pred, pos_label=0, zero_division=0)),
            negative_recall=float(recall_score(y_true, y_pred, pos_label=0, zero_division=0)),
            log_loss=float(log_loss(y_true, y_prob, labels=[0, 1])),
            tp=int(tp),
            fp=int(fp),
            tn=int(tn),
            fn=int(fn),
        )
