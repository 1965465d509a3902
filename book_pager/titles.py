from __future__ import annotations

import re

DEFAULT_TITLE = "Book"

_WHITESPACE = re.compile(r"\s+", re.ASCII)

# Space and every control character below it; NBSP and other Unicode spaces stay.
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def extract_title_from_file_name(file_name: str | None) -> str:
    """Derive a display title from ``file_name``.

    ``"books/my_book-title.txt"`` becomes ``"My Book Title"``. Names that
    reduce to nothing fall back to :data:`DEFAULT_TITLE`; ``None`` gives ``""``.
    """

    if file_name is None:
        return ""
    base = re.split(r"[/\\]", file_name)[-1]
    dot = base.rfind(".")
    if dot > 0:
        base = base[:dot]
    base = _WHITESPACE.sub(" ", base.replace("_", " ").replace("-", " ").strip(_TRIM_CHARS))
    title = " ".join(_capitalize(word) for word in base.split(" ") if word).strip(_TRIM_CHARS)
    return title or DEFAULT_TITLE
