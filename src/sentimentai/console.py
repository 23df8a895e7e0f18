# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import BinaryClassificationMetrics, SentimentPrediction

ASCII_BANNER = r"""
  ___          _   _                  _     _   ___
 / __| ___ _ _| |_(_)_ __  ___ _ _  | |_  /_\ |_ _|
 \__ \/ -_) ' \  _| | '  \/ -_) ' \ |  _|/ _ \ | |
 |___/\___|_||_\__|_|_|_|_\___|_||_| \__/_/ \_\___|
"""

REPORTED_METRICS = (("Accuracy", "accuracy"), ("Auc", "auc"), ("F1Score", "f1_score"))


def format_prediction(text: str, prediction: SentimentPrediction) -> str:
    return f"Sentiment: {text} | Prediction: {prediction.label}"


def format_percent(value: float) -> str:
    return f"{float(value) * 100:.2f}%"


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None

    def banner(self) -> None:
        if self._console:
            self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Sentiment ML", border_style="cyan"))
            return
        print(ASCII_BANNER)

    def info(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")
        else:
            print(f"[INFO] {text}")

    def warn(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")
        else:
            print(f"[WARN] {text}")

    def success(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold green]OK[/bold green] {escape(text)}")
        else:
            print(f"[OK] {text}")

    def predictions_table(self, pairs: Iterable[tuple[str, SentimentPrediction]], *, title: str = "Sentiment Predictions") -> None:
        pairs = list(pairs)
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Sentiment", style="bold")
            table.add_column("Prediction", justify="center")
            table.add_column("Probability", justify="right")
            for text, prediction in pairs:
                style = "green" if prediction.sentiment else "red"
                table.add_row(escape(text), f"[{style}]{prediction.label}[/{style}]", f"{prediction.probability:.4f}")
            self._console.print(table)
            return

        print()
        print(title)
        print("-" * len(title))
        for text, prediction in pairs:
            print(format_prediction(text, prediction))
        print()

    def metrics_table(self, metrics: BinaryClassificationMetrics, *, title: str = "PredictionModel quality metrics evaluation") -> None:
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for name, attr in REPORTED_METRICS:
                table.add_row(name, format_percent(getattr(metrics, attr)))
            self._console.print(table)
            return

        print()
        print(title)
        print("-" * len(title))
        for name, attr in REPORTED_METRICS:
            print(f"{name}: {format_percent(getattr(metrics, attr))}")
