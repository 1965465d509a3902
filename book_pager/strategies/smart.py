"""Budget-edge pagination that prefers paragraph and word boundaries."""

from __future__ import annotations

from typing import List

from book_pager.codepoints import last_index_of
from book_pager.options import PageOptions
from book_pager.page_utils import finalize_page


def _natural_break(text: str, start: int, end: int, threshold: int) -> int | None:
    """Return the cut position after the closest newline or space, if near enough.

    A newline wins over a space; either must sit within ``threshold`` code
    points of ``end``.
    """

    for char in ("\n", " "):
        index = last_index_of(text, char, end - 1, start)
        if index >= start and end - (index + 1) <= threshold:
            return index + 1
    return None


def split_smart(text: str, opts: PageOptions) -> List[str]:
    """Cut ``text`` near every ``max_chars`` boundary, backing off to whitespace."""

    if not text:
        return [""]

    pages: List[str] = []
    length = len(text)
    pos = 0
    while pos < length:
        end = min(pos + opts.max_chars, length)
        if end >= length:
            pages.append(finalize_page(text[pos:], opts.max_chars, opts.preserve_newlines))
            break
        cut = _natural_break(text, pos, end, opts.threshold_cp)
        cut = end if cut is None else cut
        pages.append(finalize_page(text[pos:cut], opts.max_chars, opts.preserve_newlines))
        pos = cut
    return pages
