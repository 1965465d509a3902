import pytest

from book_pager.framework import Artifact, register, registry, resolve


def test_resolve_returns_passes_in_pipeline_order():
    passes = resolve(["page_report", "normalize_newlines"])
    assert [p.name for p in passes] == ["page_report", "normalize_newlines"]


def test_resolve_reports_every_unknown_step():
    with pytest.raises(KeyError, match=r"\['typeset', 'bind'\]"):
        resolve(["normalize_newlines", "typeset", "paginate", "bind"])


def test_register_replaces_existing_entry(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("book_pager.framework._PASSES", dict(registry()))

    class _Upper:
        name = "page_report"
        input_type = list
        output_type = list

        def __call__(self, a: Artifact) -> Artifact:
            return Artifact(payload=[p.upper() for p in a.payload], meta=a.meta)

    register(_Upper())
    (p,) = resolve(["page_report"])
    assert p(Artifact(payload=["ab"])).payload == ["AB"]
