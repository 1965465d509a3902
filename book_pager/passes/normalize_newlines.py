from __future__ import annotations

from book_pager.framework import Artifact, register
from book_pager.page_utils import normalize_newlines as _normalize


class _NormalizeNewlinesPass:
    name = "normalize_newlines"
    input_type = str
    output_type = str

    def __call__(self, a: Artifact) -> Artifact:
        payload = a.payload
        if payload is not None and not isinstance(payload, str):
            return a
        meta = dict(a.meta or {})
        metrics = dict(meta.get("metrics") or {})
        metrics["normalized"] = True
        return Artifact(payload=_normalize(payload), meta={**meta, "metrics": metrics})


normalize_newlines = register(_NormalizeNewlinesPass())
