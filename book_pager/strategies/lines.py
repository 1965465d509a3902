"""Fixed line-count pagination."""

from __future__ import annotations

from typing import Iterator, List

from book_pager.codepoints import code_point_count
from book_pager.options import PageOptions
from book_pager.page_utils import finalize_page


def _line_groups(text: str, max_lines: int) -> Iterator[str]:
    """Yield ``max_lines``-sized groups of lines joined back with ``\\n``.

    Empty lines are kept, including the one after a trailing newline.
    """

    lines = text.split("\n")
    return ("\n".join(lines[i : i + max_lines]) for i in range(0, len(lines), max_lines))


def split_lines(text: str, opts: PageOptions) -> List[str]:
    """Group lines into pages, re-flowing any over-budget group with ``smart``."""

    from book_pager.strategies import paginate_text

    smart = opts.with_strategy("smart")
    pages: List[str] = []
    for group in _line_groups(text, opts.max_lines):
        if code_point_count(group) <= opts.max_chars:
            pages.append(finalize_page(group, opts.max_chars, opts.preserve_newlines))
        else:
            pages.extend(paginate_text(group, smart))
    return pages
