from __future__ import annotations

import logging
from typing import List

from book_pager.options import PageOptions

logger = logging.getLogger(__name__)


def split_marker(text: str, opts: PageOptions) -> List[str]:
    """Break ``text`` at every literal ``page_marker`` occurrence.

    Each empty segment becomes one empty page; the rest are paginated with
    ``smart`` so marker-delimited chunks still respect ``max_chars``.
    """

    from book_pager.strategies import paginate_text

    smart = opts.with_strategy("smart")
    if not opts.page_marker:
        logger.debug("marker strategy without a page marker; using smart")
        return paginate_text(text, smart)

    pages: List[str] = []
    for segment in text.split(opts.page_marker):
        if segment:
            pages.extend(paginate_text(segment, smart))
        else:
            pages.append("")
    return pages
