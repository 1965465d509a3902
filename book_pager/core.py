from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass, replace
from functools import reduce
from typing import Any, List

import book_pager.passes  # noqa: F401  # registers passes
from book_pager.config import PaginationSpec
from book_pager.framework import Artifact, Pass, registry, resolve

logger = logging.getLogger(__name__)


def _pass_steps(spec: PaginationSpec) -> list[str]:
    """Return pipeline steps, raising on names absent from the registry."""
    return [p.name for p in resolve(spec.pipeline)]


def _ensure_normalize_precedes_paginate(steps: Sequence[str]) -> None:
    """Raise descriptive error if ``paginate`` is missing or runs on raw text."""
    if "paginate" not in steps:
        raise ValueError("pipeline must include paginate")
    paginate_index = steps.index("paginate")
    normalize_index = next(
        (i for i, s in enumerate(steps) if s == "normalize_newlines"), None
    )
    if normalize_index is None or normalize_index > paginate_index:
        raise ValueError("paginate requires normalize_newlines to run beforehand")


def _enforce_invariants(spec: PaginationSpec) -> list[str]:
    """Return validated steps while enforcing registry and ordering invariants."""
    steps = _pass_steps(spec)
    _ensure_normalize_precedes_paginate(steps)
    return steps


def configure_pass(pass_obj: Pass, opts: Mapping[str, Any]) -> Pass:
    """Return a new pass with ``opts`` merged without mutating ``pass_obj``."""

    if not opts or not is_dataclass(pass_obj):
        return pass_obj
    names = {f.name for f in fields(pass_obj) if f.init}
    updates = {k: v for k, v in opts.items() if k in names}
    return replace(pass_obj, **updates) if updates else pass_obj  # type: ignore[type-var]


def _with_pass_options(
    meta: Mapping[str, Any] | None, name: str, overrides: Mapping[str, Any]
) -> dict[str, Any]:
    """Return ``meta`` with ``overrides`` recorded under ``options[name]``."""

    base = {**(meta or {})}
    existing = dict((meta or {}).get("options") or {})
    if overrides:
        existing[name] = dict(overrides)
    if existing:
        base["options"] = existing
    else:
        base.pop("options", None)
    return base


def _time_step(
    acc: tuple[Artifact, dict[str, float]],
    p: Pass,
) -> tuple[Artifact, dict[str, float]]:
    """Apply ``p`` to ``acc`` while recording its execution time."""
    a, timings = acc
    t0 = time.perf_counter()
    a = p(a)
    return a, {**timings, p.name: time.perf_counter() - t0}


def _run_passes(
    steps: Sequence[str], spec: PaginationSpec, a: Artifact
) -> tuple[Artifact, dict[str, float]]:
    """Run ``steps`` configured from ``spec`` capturing per-pass timings."""

    def _apply(
        acc: tuple[Artifact, dict[str, float]], registered: Pass
    ) -> tuple[Artifact, dict[str, float]]:
        artifact, timings = acc
        overrides = spec.options.get(registered.name, {})
        p = configure_pass(registered, overrides)
        seeded = Artifact(
            payload=artifact.payload,
            meta=_with_pass_options(artifact.meta, registered.name, overrides),
        )
        return _time_step((seeded, timings), p)

    return reduce(_apply, resolve(steps), (a, {}))


def run_paginate(
    a: Artifact, spec: PaginationSpec | None = None
) -> tuple[Artifact, dict[str, float]]:
    """Run the pagination pipeline over ``a`` and return it with pass timings."""
    run_spec = spec or PaginationSpec()
    steps = _enforce_invariants(run_spec)
    out, timings = _run_passes(steps, run_spec, a)
    logger.debug(
        "Pagination pipeline finished: "
        + ", ".join(f"{n}={t * 1000:.2f}ms" for n, t in timings.items())
    )
    return out, timings


def paginate_document(text: str | None, spec: PaginationSpec | None = None) -> List[str]:
    """Paginate ``text`` with ``spec`` and return the pages."""
    out, _ = run_paginate(Artifact(payload=text, meta={"metrics": {}}), spec)
    return list(out.payload)


def split_to_pages_safe(
    text: str | None,
    max_chars: int,
    strategy: str | None = None,
    page_marker: str | None = None,
    max_lines: int = 1,
    preserve_newlines: bool = True,
    trim_trailing_empty_pages: bool = False,
) -> List[str]:
    """Split ``text`` into pages of at most ``max_chars`` code points.

    Never raises for odd input: ``None`` text becomes ``""``, budgets below
    one become one, and unknown strategies fall back to ``smart``. The result
    always holds at least one (possibly empty) page.
    """

    overrides = {
        "paginate": {
            "max_chars": max_chars,
            "strategy": strategy,
            "page_marker": page_marker,
            "max_lines": max_lines,
            "preserve_newlines": preserve_newlines,
            "trim_trailing_empty_pages": trim_trailing_empty_pages,
        }
    }
    return paginate_document(text, PaginationSpec(options=overrides))


def run_inspect() -> dict[str, dict[str, str]]:
    """Return a lightweight view of the registry for tests."""
    return {
        name: {"input": str(p.input_type), "output": str(p.output_type)}
        for name, p in registry().items()
    }
