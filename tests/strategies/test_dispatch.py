from __future__ import annotations

import logging

import pytest

from book_pager.strategies import STRATEGIES, resolve_strategy


def test_registered_strategy_names() -> None:
    assert set(STRATEGIES) == {"marker", "lines", "hard", "smart"}


@pytest.mark.parametrize(
    ("name", "resolved"),
    (
        ("marker", "marker"),
        ("lines", "lines"),
        ("hard", "hard"),
        ("smart", "smart"),
        (None, "smart"),
        ("Smart", "smart"),
        ("fancy", "smart"),
    ),
)
def test_resolve_strategy(name, resolved) -> None:
    assert resolve_strategy(name) == resolved


def test_unknown_strategy_logs_fallback(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="book_pager.strategies"):
        resolve_strategy("fancy")
    assert "Unknown pagination strategy 'fancy'" in caplog.text


def test_unknown_strategy_paginates_like_smart(paginate) -> None:
    text = "The quick brown fox jumps"
    assert paginate(text, strategy="fancy", max_chars=10) == paginate(text, max_chars=10)
