from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Protocol, Type, runtime_checkable


@dataclass(frozen=True)
class Artifact:
    """Text (before ``paginate``) or pages (after it) plus pass metadata."""

    payload: Any
    meta: Dict[str, Any] | None = None


@runtime_checkable
class Pass(Protocol):
    name: str
    input_type: Type
    output_type: Type

    def __call__(self, a: Artifact) -> Artifact:
        """Execute the pass."""
        ...


_PASSES: Mapping[str, Pass] = MappingProxyType({})


def register(p: Pass) -> Pass:
    """Register a pass under its name; re-registering replaces the entry."""
    global _PASSES
    _PASSES = MappingProxyType({**dict(_PASSES), p.name: p})
    return p


def resolve(steps: Iterable[str]) -> List[Pass]:
    """Return the registered passes for ``steps`` in order.

    Every unknown name is reported in a single ``KeyError``.
    """
    names = list(steps)
    unknown = [s for s in names if s not in _PASSES]
    if unknown:
        raise KeyError(f"unknown steps: {unknown}")
    return [_PASSES[s] for s in names]


def registry() -> Dict[str, Pass]:
    """Shallow copy of the registry for inspection/testing."""
    return dict(_PASSES)
