# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import joblib
from sklearn.pipeline import Pipeline

from ..schemas import SentimentData, SentimentPrediction

MODEL_FILENAME = "model.joblib"
METADATA_FILENAME = "metadata.json"
POSITIVE_LABEL = 1
THRESHOLD = 0.5
PROB_EPS = 1e-15


def _log_odds(prob: float) -> float:
    clipped = min(max(prob, PROB_EPS), 1.0 - PROB_EPS)
    return math.log(clipped / (1.0 - clipped))


def _texts(records: Iterable[SentimentData | str]) -> list[str]:
    return [record if isinstance(record, str) else str(record.text) for record in records]


@dataclass(frozen=True)
class PredictionModel:
    """A fitted featurizer + classifier, shared read-only by prediction and evaluation."""

    pipeline: Pipeline
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def model_version(self) -> str:
        return str(self.metadata.get("model_version") or "unknown")

    def predict_proba(self, records: Iterable[SentimentData | str]) -> list[float]:
        """Probability of the positive label (1) for each record."""
        texts = _texts(records)
        if not texts:
            return []
        column = list(self.pipeline.classes_).index(POSITIVE_LABEL)
        return self.pipeline.predict_proba(texts)[:, column].tolist()

    def predict(self, records: Iterable[SentimentData | str]) -> list[SentimentPrediction]:
        return [
            SentimentPrediction(sentiment=prob >= THRESHOLD, probability=float(prob), score=_log_odds(prob))
            for prob in self.predict_proba(records)
        ]

    def predict_one(self, text: str) -> SentimentPrediction:
        return self.predict([text])[0]

    def save(self, model_dir: Path) -> Path:
        model_dir.mkdir(parents=True, exist_ok=True)
        model_path = model_dir / MODEL_FILENAME
        metadata_path = model_dir / METADATA_FILENAME
        joblib.dump(self.pipeline, model_path)
        metadata_path.write_text(json.dumps(self.metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        return model_path

    @classmethod
    def load(cls, model_dir: Path) -> "PredictionModel":
        model_path = model_dir / MODEL_FILENAME
        if not model_path.exists():
            raise FileNotFoundError(f"No model found at {model_path}")
        pipeline = joblib.load(model_path)
        metadata: dict[str, Any] = {}
        metadata_path = model_dir / METADATA_FILENAME
        if metadata_path.exists():
            payload = json.loads(metadata_path.read_text(encoding="utf-8"))
            if isinstance(payload, dict):
                metadata = payload
        return cls(pipeline=pipeline, metadata=metadata)
