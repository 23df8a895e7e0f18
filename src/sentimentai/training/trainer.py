# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from sklearn.pipeline import Pipeline

from ..errors import DatasetFormatError, PipelineError
from ..inference.predictor import PredictionModel
from ..pipeline import FastTreeBinaryClassifier, LearningPipeline, TextFeaturizer, TextLoader
from .dataset import records_to_frame

BINARY_LABELS = {0, 1}


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _split_stages(pipeline: LearningPipeline) -> tuple[TextLoader, TextFeaturizer, FastTreeBinaryClassifier]:
    stages = pipeline.stages
    kinds = [type(stage).__name__ for stage in stages]
    if len(stages) != 3:
        raise PipelineError(f"Expected loader, featurizer and learner stages, got {kinds}")
    loader, featurizer, learner = stages
    if not isinstance(loader, TextLoader):
        raise PipelineError(f"First stage must be a TextLoader, got {kinds[0]}")
    if not isinstance(featurizer, TextFeaturizer):
        raise PipelineError(f"Second stage must be a TextFeaturizer, got {kinds[1]}")
    if not isinstance(learner, FastTreeBinaryClassifier):
        raise PipelineError(f"Last stage must be a FastTreeBinaryClassifier, got {kinds[2]}")
    return loader, featurizer, learner


def _build_model(featurizer: TextFeaturizer, learner: FastTreeBinaryClassifier) -> Pipeline:
    return Pipeline(
        steps=[
            (featurizer.output_column, featurizer.build()),
            ("clf", learner.build()),
        ]
    )


def train(
    pipeline: LearningPipeline,
    *,
    on_skip: Callable[[DatasetFormatError], None] | None = None,
) -> PredictionModel:
    """Run the loader, featurizer and learner stages in order.

    Either a fitted :class:`PredictionModel` is returned or the error that
    stopped the run propagates; there is no partial result.
    """
    loader, featurizer, learner = _split_stages(pipeline)

    df = records_to_frame(list(loader.records(on_skip=on_skip)))
    if df.empty:
        raise PipelineError(f"No training rows in {loader.path}")
    unexpected = sorted(set(df["label"].tolist()) - BINARY_LABELS)
    if unexpected:
        raise PipelineError(f"Training labels in {loader.path} must be 0 or 1, got {unexpected}")
    if featurizer.input_column not in df.columns:
        raise PipelineError(f"Featurizer input column {featurizer.input_column!r} not in {list(df.columns)}")
    if df["label"].nunique() < 2:
        raise PipelineError(f"Training data in {loader.path} needs both labels, got {sorted(df['label'].unique().tolist())}")

    model = _build_model(featurizer, learner)
    model.fit(df[featurizer.input_column].astype(str).tolist(), df["label"])

    metadata: dict[str, Any] = {
        "model_version": _timestamp_key(),
        "created_at_utc": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "train_path": str(loader.path),
        "train_rows": int(len(df)),
        "labels_positive": int((df["label"] == 1).sum()),
        "labels_negative": int((df["label"] != 1).sum()),
        "features": featurizer.output_column,
        "input_column": featurizer.input_column,
        "hyperparameters": learner.hyperparameters.to_dict(),
    }
    return PredictionModel(pipeline=model, metadata=metadata)
