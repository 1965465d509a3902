"""Per-call pagination settings."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

DEFAULT_STRATEGY = "smart"


def derive_threshold(max_chars: int) -> int:
    """Return how far back from a cut point a natural break may be searched."""

    return max(3, max_chars // 8)


@dataclass(frozen=True)
class PageOptions:
    """Resolved, coerced configuration for one pagination call.

    Out-of-range values are coerced instead of rejected: budgets below one
    become one and a missing strategy becomes ``"smart"``.
    """

    max_chars: int = 256
    strategy: str | None = DEFAULT_STRATEGY
    page_marker: str | None = None
    max_lines: int = 14
    preserve_newlines: bool = True
    trim_trailing_empty_pages: bool = False
    threshold_cp: int = field(init=False)

    def __post_init__(self) -> None:
        max_chars = max(1, int(self.max_chars))
        object.__setattr__(self, "max_chars", max_chars)
        object.__setattr__(self, "max_lines", max(1, int(self.max_lines)))
        object.__setattr__(self, "strategy", self.strategy or DEFAULT_STRATEGY)
        object.__setattr__(self, "preserve_newlines", bool(self.preserve_newlines))
        object.__setattr__(
            self, "trim_trailing_empty_pages", bool(self.trim_trailing_empty_pages)
        )
        object.__setattr__(self, "threshold_cp", derive_threshold(max_chars))

    @classmethod
    def from_mapping(cls, opts: Mapping[str, Any] | None) -> PageOptions:
        """Instantiate options from ``opts``, ignoring unrelated keys."""

        names = {f.name for f in fields(cls) if f.init}
        return cls(**{k: v for k, v in (opts or {}).items() if k in names})

    def with_strategy(self, strategy: str) -> PageOptions:
        return replace(self, strategy=strategy)

    def with_meta(self, meta: Mapping[str, Any] | None) -> PageOptions:
        """Merge ``meta["options"]["paginate"]`` overrides into the record."""

        opts = ((meta or {}).get("options") or {}).get("paginate", {})
        if not opts:
            return self
        names = {f.name for f in fields(self) if f.init}
        return replace(self, **{k: v for k, v in opts.items() if k in names})

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.init}


__all__ = ["DEFAULT_STRATEGY", "PageOptions", "derive_threshold"]
