"""Code-point arithmetic for page budgets.

Python ``str`` objects are sequences of code points, so indexing and slicing
never land inside a multi-unit encoding. These helpers exist to make the
budget rules explicit (clamping, ``None`` handling, bounded backward search)
rather than to work around the string model.
"""

from __future__ import annotations


def code_point_count(text: str | None) -> int:
    """Return the number of code points in ``text`` (``0`` for ``None``)."""

    return len(text) if text else 0


def truncate_by_code_points(text: str | None, max_code_points: int) -> str | None:
    """Return ``text`` cut to at most ``max_code_points`` code points.

    ``None`` passes through unchanged and a non-positive limit yields ``""``.
    The result is stable under repeated application.
    """

    if text is None:
        return None
    if max_code_points <= 0:
        return ""
    if len(text) <= max_code_points:
        return text
    return text[:max_code_points]


def safe_substring_by_code_points(text: str | None, begin: int, end: int) -> str | None:
    """Return the code-point slice ``[begin, end)`` with both bounds clamped."""

    if text is None:
        return None
    begin = max(begin, 0)
    end = min(end, len(text))
    if begin >= end:
        return ""
    return text[begin:end]


def last_index_of(text: str | None, char: str, from_inclusive: int, floor: int = 0) -> int:
    """Return the last index of ``char`` at or before ``from_inclusive``.

    Matches below ``floor`` are ignored; ``-1`` means no match.
    """

    if not text:
        return -1
    from_inclusive = min(from_inclusive, len(text) - 1)
    if from_inclusive < max(floor, 0):
        return -1
    return text.rfind(char, max(floor, 0), from_inclusive + 1)


__all__ = [
    "code_point_count",
    "last_index_of",
    "safe_substring_by_code_points",
    "truncate_by_code_points",
]
