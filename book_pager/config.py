from __future__ import annotations

import os
import pathlib
import warnings
from functools import reduce
from importlib import import_module
from typing import Any, Dict, Iterable, List, Mapping, cast

from pydantic import BaseModel, Field

yaml = cast(Any, import_module("yaml"))

DEFAULT_PIPELINE: List[str] = ["normalize_newlines", "paginate", "page_report"]


class PaginationSpec(BaseModel):
    """Declarative pagination pipeline with per-pass options."""

    pipeline: List[str] = Field(default_factory=lambda: list(DEFAULT_PIPELINE))
    options: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return a dict from YAML or {} if path is None/missing/empty."""
    if not path:
        return {}
    p = pathlib.Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError("pagination.yaml must contain a top-level mapping")
    return data


def _merge_options(
    base: Dict[str, Dict[str, Any]], override: Dict[str, Dict[str, Any]]
) -> Dict[str, Dict[str, Any]]:
    """Shallow-merge per-pass options; override wins."""
    sources = set(base) | set(override)
    return {s: {**base.get(s, {}), **override.get(s, {})} for s in sources}


def _warn_unknown_options(pipeline: Iterable[str], opts: Mapping[str, Any]) -> None:
    """Emit a warning when options name passes absent from the pipeline."""

    steps = set(pipeline)
    unknown = [step for step in opts if step not in steps]
    if unknown:
        warnings.warn(
            f"Unknown pipeline options: {', '.join(sorted(unknown))}",
            stacklevel=2,
        )


def load_spec(
    path: str | os.PathLike | None = "pagination.yaml",
    overrides: Dict[str, Dict[str, Any]] | None = None,
) -> PaginationSpec:
    """Load YAML + caller overrides into a validated PaginationSpec."""
    data = _read_yaml(path)
    sources: Iterable[Dict[str, Dict[str, Any]]] = (
        d for d in (data.get("options") or {}, overrides) if d
    )
    acc: Dict[str, Dict[str, Any]] = {}
    merged = reduce(_merge_options, sources, acc)

    pipeline = data.get("pipeline") or list(DEFAULT_PIPELINE)
    _warn_unknown_options(pipeline, merged)
    return PaginationSpec.model_validate({**data, "pipeline": pipeline, "options": merged})
