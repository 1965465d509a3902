from __future__ import annotations

from typing import List

from book_pager.codepoints import truncate_by_code_points

_NEWLINE_CHARS = "\n\r"


def normalize_newlines(text: str | None) -> str:
    """Return ``text`` with ``\\r\\n`` and lone ``\\r`` mapped to ``\\n``."""

    if not text:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def trim_trailing_newlines(text: str) -> str:
    """Strip trailing newline characters from ``text``."""

    return text.rstrip(_NEWLINE_CHARS)


def finalize_page(piece: str, max_chars: int, preserve_newlines: bool) -> str:
    """Apply the newline policy and the truncation safety net to ``piece``."""

    page = piece if preserve_newlines else trim_trailing_newlines(piece)
    return truncate_by_code_points(page, max_chars) or ""


def drop_trailing_empty_pages(pages: List[str]) -> List[str]:
    """Return ``pages`` without trailing empty pages, never an empty list."""

    end = len(pages)
    while end and not pages[end - 1]:
        end -= 1
    return pages[:end] or [""]
