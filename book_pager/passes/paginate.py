from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from book_pager.framework import Artifact, register
from book_pager.options import PageOptions
from book_pager.strategies import paginate_text, resolve_strategy

logger = logging.getLogger(__name__)


def _with_metrics(meta: Mapping[str, Any] | None, pages: int, strategy: str) -> dict[str, Any]:
    """Return ``meta`` updated with pagination metrics."""

    all_metrics = dict((meta or {}).get("metrics") or {})
    existing = all_metrics.get("paginate", {})
    return {
        **(meta or {}),
        "metrics": {**all_metrics, "paginate": {**existing, "pages": pages, "strategy": strategy}},
    }


@dataclass(frozen=True)
class _PaginatePass:
    name: str = field(default="paginate", init=False)
    input_type: type = field(default=str, init=False)
    output_type: type = field(default=list, init=False)
    max_chars: int = 256
    strategy: str | None = "smart"
    page_marker: str | None = None
    max_lines: int = 14
    preserve_newlines: bool = True
    trim_trailing_empty_pages: bool = False

    def options(self) -> PageOptions:
        return PageOptions(
            max_chars=self.max_chars,
            strategy=self.strategy,
            page_marker=self.page_marker,
            max_lines=self.max_lines,
            preserve_newlines=self.preserve_newlines,
            trim_trailing_empty_pages=self.trim_trailing_empty_pages,
        )

    def __call__(self, a: Artifact) -> Artifact:
        text = a.payload
        if text is not None and not isinstance(text, str):
            return a
        opts = self.options().with_meta(a.meta)
        strategy = resolve_strategy(opts.strategy)
        pages = paginate_text(text or "", opts)
        logger.debug(
            f"Paginated {len(text or '')} code points into {len(pages)} pages "
            f"(strategy={strategy}, max_chars={opts.max_chars})"
        )
        return Artifact(payload=pages, meta=_with_metrics(a.meta, len(pages), strategy))


DEFAULT_PAGINATOR = _PaginatePass()


def make_paginator(**opts: Any) -> _PaginatePass:
    """Return a configured ``paginate`` pass from ``opts``."""
    resolved = PageOptions.from_mapping({**DEFAULT_PAGINATOR.options().as_dict(), **opts})
    return replace(DEFAULT_PAGINATOR, **resolved.as_dict())


paginate = register(DEFAULT_PAGINATOR)
