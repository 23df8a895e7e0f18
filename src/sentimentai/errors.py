# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations


class SentimentAIError(Exception):
    """Base class for errors raised by sentimentai."""


class DatasetFormatError(SentimentAIError, ValueError):
    def __init__(self, path: object, line_no: int, reason: str) -> None:
        self.path = str(path)
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"{self.path}:{line_no}: {reason}")


class PipelineError(SentimentAIError, RuntimeError):
    """Raised when a learning pipeline cannot be trained as assembled."""
