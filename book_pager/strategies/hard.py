from __future__ import annotations

from typing import List

from book_pager.codepoints import safe_substring_by_code_points
from book_pager.options import PageOptions
from book_pager.page_utils import finalize_page


def split_hard(text: str, opts: PageOptions) -> List[str]:
    """Slice ``text`` into consecutive ``max_chars`` pieces with no lookback."""

    step = opts.max_chars
    pieces = (
        safe_substring_by_code_points(text, start, start + step) or ""
        for start in range(0, len(text), step)
    )
    pages = [finalize_page(piece, step, opts.preserve_newlines) for piece in pieces]
    return pages or [""]
