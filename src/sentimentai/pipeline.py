# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Stage descriptors and the ordered learning pipeline that holds them.

A pipeline is only a description: nothing is read or fitted until it is
handed to :func:`sentimentai.training.trainer.train`.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from sklearn.ensemble import GradientBoostingClassifier
from sklearn.pipeline import FeatureUnion

from .features import build_text_featurizer
from .schemas import SentimentData, TreeHyperparameters
from .training.dataset import iter_labelled_records


@dataclass(frozen=True)
class TextLoader:
    path: Path
    separator: str = "tab"
    has_header: bool = False
    skip_malformed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def records(self, on_skip=None) -> Iterator[SentimentData]:
        return iter_labelled_records(
            self.path,
            separator=self.separator,
            has_header=self.has_header,
            skip_malformed=self.skip_malformed,
            on_skip=on_skip,
        )


@dataclass(frozen=True)
class TextFeaturizer:
    output_column: str = "features"
    input_column: str = "text"
    word_ngrams: tuple[int, int] = (1, 2)
    char_ngrams: tuple[int, int] = (3, 3)
    max_features: int | None = None

    def build(self) -> FeatureUnion:
        return build_text_featurizer(
            word_ngrams=self.word_ngrams,
            char_ngrams=self.char_ngrams,
            max_features=self.max_features,
        )


@dataclass(frozen=True)
class FastTreeBinaryClassifier:
    num_trees: int = 5
    num_leaves: int = 5
    min_documents_in_leafs: int = 2
    learning_rate: float = 0.2
    random_state: int = 42

    @classmethod
    def from_hyperparameters(cls, params: TreeHyperparameters) -> "FastTreeBinaryClassifier":
        return cls(
            num_trees=params.num_trees,
            num_leaves=params.num_leaves,
            min_documents_in_leafs=params.min_documents_in_leafs,
            learning_rate=params.learning_rate,
            random_state=params.random_state,
        )

    @property
    def hyperparameters(self) -> TreeHyperparameters:
        return TreeHyperparameters(
            num_trees=self.num_trees,
            num_leaves=self.num_leaves,
            min_documents_in_leafs=self.min_documents_in_leafs,
            learning_rate=self.learning_rate,
            random_state=self.random_state,
        )

    def build(self) -> GradientBoostingClassifier:
        # sklearn needs at least two leaves per tree
        return GradientBoostingClassifier(
            n_estimators=self.num_trees,
            max_leaf_nodes=max(self.num_leaves, 2),
            min_samples_leaf=self.min_documents_in_leafs,
            learning_rate=self.learning_rate,
            random_state=self.random_state,
        )


Stage = Union[TextLoader, TextFeaturizer, FastTreeBinaryClassifier]


class LearningPipeline:
    def __init__(self, stages: Iterable[Stage] = ()) -> None:
        self._stages: list[Stage] = []
        for stage in stages:
            self.add(stage)

    def add(self, stage: Stage) -> "LearningPipeline":
        if not isinstance(stage, (TextLoader, TextFeaturizer, FastTreeBinaryClassifier)):
            raise TypeError(f"Unsupported pipeline stage: {type(stage).__name__}")
        self._stages.append(stage)
        return self

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[Stage]:
        return iter(self.stages)

    def __repr__(self) -> str:
        names = ", ".join(type(stage).__name__ for stage in self._stages)
        return f"LearningPipeline([{names}])"


def build_pipeline(stages: Iterable[Stage]) -> LearningPipeline:
    return LearningPipeline(stages)


def default_pipeline(train_path: Path | str, params: TreeHyperparameters | None = None, *, separator: str = "tab", skip_malformed: bool = False) -> LearningPipeline:
    params = params or TreeHyperparameters()
    return build_pipeline(
        [
            TextLoader(Path(train_path), separator=separator, has_header=False, skip_malformed=skip_malformed),
            TextFeaturizer("features", "text"),
            FastTreeBinaryClassifier.from_hyperparameters(params),
        ]
    )
