# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.pipeline import FeatureUnion

WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: object) -> str:
    return WHITESPACE_RE.sub(" ", str(text or "")).strip().lower()


def build_text_featurizer(
    *,
    word_ngrams: tuple[int, int] = (1, 2),
    char_ngrams: tuple[int, int] = (3, 3),
    max_features: int | None = None,
) -> FeatureUnion:
    """Word and character n-gram TF-IDF over a single text column."""
    transformers: list[tuple[str, TfidfVectorizer]] = [
        (
            "word_tfidf",
            TfidfVectorizer(
                analyzer="word",
                ngram_range=word_ngrams,
                preprocessor=normalize_text,
                max_features=max_features,
            ),
        )
    ]
    if char_ngrams[1] > 0:
        transformers.append(
            (
                "char_tfidf",
                TfidfVectorizer(
                    analyzer="char_wb",
                    ngram_range=char_ngrams,
                    preprocessor=normalize_text,
                    max_features=max_features,
                ),
            )
        )
    return FeatureUnion(transformers)
