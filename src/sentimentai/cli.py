# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Train a sentiment model, show a few predictions and report its quality.

    sentimentai --train data/imdb_labelled.txt --test data/yelp_labelled.txt
"""
from __future__ import annotations

import argparse
from pathlib import Path

from .console import MLConsole
from .env import get_bool_env, get_env, get_float_env, get_int_env
from .errors import DatasetFormatError
from .evaluation.evaluate import BinaryClassificationEvaluator
from .inference.predictor import PredictionModel
from .pipeline import TextLoader, default_pipeline
from .schemas import BinaryClassificationMetrics, SentimentData, TreeHyperparameters
from .training.trainer import train

DEFAULT_TRAIN_PATH = "data/imdb_labelled.txt"
DEFAULT_TEST_PATH = "data/yelp_labelled.txt"

SAMPLE_SENTIMENTS = (
    "Contoso's 11 is a wonderful experience",
    "The acting in this movie is very bad",
    "Joe versus the Volcano Coffee Company is a great film.",
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Binary sentiment classification with boosted trees over TF-IDF text features.")
    parser.add_argument("--train", type=Path, default=Path(get_env("SENTIMENT_TRAIN_PATH", DEFAULT_TRAIN_PATH) or DEFAULT_TRAIN_PATH), help="Training file (text<TAB>label)")
    parser.add_argument("--test", type=Path, default=Path(get_env("SENTIMENT_TEST_PATH", DEFAULT_TEST_PATH) or DEFAULT_TEST_PATH), help="Held-out evaluation file")
    parser.add_argument("--separator", default="tab", help="Column separator: tab, comma, space, semicolon, pipe or a single character")
    parser.add_argument("--num-trees", type=int, default=get_int_env("SENTIMENT_NUM_TREES", 5), help="Number of boosted trees")
    parser.add_argument("--num-leaves", type=int, default=get_int_env("SENTIMENT_NUM_LEAVES", 5), help="Maximum leaves per tree")
    parser.add_argument("--min-docs-per-leaf", type=int, default=get_int_env("SENTIMENT_MIN_DOCS_PER_LEAF", 2), help="Minimum documents per leaf")
    parser.add_argument("--learning-rate", type=float, default=get_float_env("SENTIMENT_LEARNING_RATE", 0.2), help="Boosting learning rate")
    parser.add_argument("--text", action="append", dest="texts", default=None, help="Sentence to classify (repeatable)")
    parser.add_argument("--save-model", type=Path, default=_default_model_dir(), help="Directory where model.joblib and metadata.json are written")
    parser.add_argument("--skip-malformed", action="store_true", default=get_bool_env("SENTIMENT_SKIP_MALFORMED_ROWS", False), help="Skip malformed rows instead of aborting")
    parser.add_argument("--no-color", action="store_true", help="Plain text output")
    return parser.parse_args(argv)


def _default_model_dir() -> Path | None:
    raw = get_env("SENTIMENT_MODEL_DIR")
    return Path(raw) if raw else None


def _warn_skip(console: MLConsole):
    def _report(exc: DatasetFormatError) -> None:
        console.warn(f"Skipped malformed row {exc}")

    return _report


def train_and_predict(args: argparse.Namespace, console: MLConsole) -> PredictionModel:
    params = TreeHyperparameters(
        num_trees=args.num_trees,
        num_leaves=args.num_leaves,
        min_documents_in_leafs=args.min_docs_per_leaf,
        learning_rate=args.learning_rate,
    )
    pipeline = default_pipeline(args.train, params, separator=args.separator, skip_malformed=args.skip_malformed)
    console.info(f"Training on {args.train} with {pipeline!r}")

    model = train(pipeline, on_skip=_warn_skip(console))
    console.success(f"Model {model.model_version} trained on {model.metadata.get('train_rows', 0)} rows")

    sentiments = [SentimentData(text=text, label=0) for text in (args.texts or SAMPLE_SENTIMENTS)]
    predictions = model.predict(sentiments)
    console.predictions_table((item.text, prediction) for item, prediction in zip(sentiments, predictions))
    return model


def evaluate(model: PredictionModel, args: argparse.Namespace, console: MLConsole) -> BinaryClassificationMetrics:
    test_data = TextLoader(args.test, separator=args.separator, has_header=False, skip_malformed=args.skip_malformed)
    metrics = BinaryClassificationEvaluator().evaluate(model, test_data, on_skip=_warn_skip(console))
    console.metrics_table(metrics)
    return metrics


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    console = MLConsole(enabled=not args.no_color)
    console.banner()

    model = train_and_predict(args, console)
    evaluate(model, args, console)

    if args.save_model is not None:
        path = model.save(args.save_model)
        console.success(f"Model saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
