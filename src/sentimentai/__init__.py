# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Sentiment AI package."""

from .evaluation.evaluate import BinaryClassificationEvaluator
from .inference.predictor import PredictionModel
from .pipeline import FastTreeBinaryClassifier, LearningPipeline, TextFeaturizer, TextLoader, build_pipeline
from .schemas import BinaryClassificationMetrics, SentimentData, SentimentPrediction, TreeHyperparameters
from .training.trainer import train

__all__ = [
    "SentimentData",
    "SentimentPrediction",
    "TreeHyperparameters",
    "BinaryClassificationMetrics",
    "TextLoader",
    "TextFeaturizer",
    "FastTreeBinaryClassifier",
    "LearningPipeline",
    "build_pipeline",
    "train",
    "PredictionModel",
    "BinaryClassificationEvaluator",
]
