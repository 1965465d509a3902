"""Diagnostic pass describing the produced pages.

Per-page lines are only rendered when DEBUG logging is enabled for this
module; the summary metrics are always recorded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from book_pager.codepoints import code_point_count, truncate_by_code_points
from book_pager.framework import Artifact, register

logger = logging.getLogger(__name__)


def _snippet(page: str, limit: int) -> str:
    return page if len(page) <= limit else f"{truncate_by_code_points(page, limit)}..."


def describe_page(index: int, page: str, snippet_chars: int = 120) -> str:
    """Return a one-line description of ``page`` for debug output."""

    return f'PAGE {index}: cp={code_point_count(page)}, text="{_snippet(page, snippet_chars)}"'


def _page_metrics(pages: Sequence[str]) -> dict[str, int]:
    return {
        "max_code_points": max((code_point_count(p) for p in pages), default=0),
        "empty_pages": sum(1 for p in pages if not p),
    }


def _with_report(meta: Mapping[str, Any] | None, report: Mapping[str, int]) -> dict[str, Any]:
    all_metrics = dict((meta or {}).get("metrics") or {})
    return {**(meta or {}), "metrics": {**all_metrics, "page_report": dict(report)}}


@dataclass(frozen=True)
class _PageReportPass:
    name: str = field(default="page_report", init=False)
    input_type: type = field(default=list, init=False)
    output_type: type = field(default=list, init=False)
    snippet_chars: int = 120

    def __call__(self, a: Artifact) -> Artifact:
        pages = a.payload
        if not isinstance(pages, list):
            return a
        if logger.isEnabledFor(logging.DEBUG):
            for index, page in enumerate(pages):
                logger.debug(describe_page(index, page, self.snippet_chars))
        return Artifact(payload=pages, meta=_with_report(a.meta, _page_metrics(pages)))


page_report = register(_PageReportPass())
