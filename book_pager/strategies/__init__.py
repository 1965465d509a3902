"""Pagination strategies and the recursive dispatcher that selects them."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, List, Mapping

from book_pager.options import DEFAULT_STRATEGY, PageOptions
from book_pager.page_utils import drop_trailing_empty_pages

from .hard import split_hard
from .lines import split_lines
from .marker import split_marker
from .smart import split_smart

logger = logging.getLogger(__name__)

Strategy = Callable[[str, PageOptions], List[str]]

STRATEGIES: Mapping[str, Strategy] = MappingProxyType(
    {
        "marker": split_marker,
        "lines": split_lines,
        "hard": split_hard,
        "smart": split_smart,
    }
)


def resolve_strategy(name: str | None) -> str:
    """Return the registered strategy name for ``name``, defaulting to ``smart``."""

    if name is None:
        return DEFAULT_STRATEGY
    if name in STRATEGIES:
        return name
    logger.debug(f"Unknown pagination strategy {name!r}; using {DEFAULT_STRATEGY}")
    return DEFAULT_STRATEGY


def paginate_text(text: str, opts: PageOptions) -> List[str]:
    """Paginate already-normalized ``text`` according to ``opts``.

    ``marker`` and ``lines`` call back into this function with ``smart`` for
    fragments that need re-flowing, so the trailing-page trim applies at
    every level.
    """

    pages = STRATEGIES[resolve_strategy(opts.strategy)](text or "", opts)
    return drop_trailing_empty_pages(pages) if opts.trim_trailing_empty_pages else pages


__all__ = [
    "STRATEGIES",
    "Strategy",
    "paginate_text",
    "resolve_strategy",
    "split_hard",
    "split_lines",
    "split_marker",
    "split_smart",
]
