from __future__ import annotations

import pytest

from sentimentai.env import get_bool_env, get_env, get_float_env, get_int_env


def test_get_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SENTIMENT_TEST_VALUE", raising=False)
    assert get_env("SENTIMENT_TEST_VALUE", "fallback") == "fallback"

    monkeypatch.setenv("SENTIMENT_TEST_VALUE", "   ")
    assert get_env("SENTIMENT_TEST_VALUE", "fallback") == "fallback"

    monkeypatch.setenv("SENTIMENT_TEST_VALUE", " data/train.txt ")
    assert get_env("SENTIMENT_TEST_VALUE") == "data/train.txt"


def test_numeric_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SENTIMENT_NUM_TREES", "12")
    monkeypatch.setenv("SENTIMENT_LEARNING_RATE", "0.05")
    assert get_int_env("SENTIMENT_NUM_TREES", 5) == 12
    assert get_float_env("SENTIMENT_LEARNING_RATE", 0.2) == 0.05

    monkeypatch.setenv("SENTIMENT_NUM_TREES", "many")
    monkeypatch.setenv("SENTIMENT_LEARNING_RATE", "nan")
    assert get_int_env("SENTIMENT_NUM_TREES", 5) == 5
    assert get_float_env("SENTIMENT_LEARNING_RATE", 0.2) == 0.2


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("yes", True), ("ON", True), ("0", False), ("false", False), ("maybe", True)],
)
def test_bool_env(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("SENTIMENT_SKIP_MALFORMED_ROWS", raw)
    assert get_bool_env("SENTIMENT_SKIP_MALFORMED_ROWS", True) is expected
