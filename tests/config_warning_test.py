import textwrap
import warnings

import pytest

from book_pager.config import DEFAULT_PIPELINE, load_spec


def test_known_options_do_not_warn(tmp_path):
    cfg = tmp_path / "pagination.yaml"
    cfg.write_text(
        textwrap.dedent(
            """
            pipeline: [normalize_newlines, paginate]
            options:
              paginate:
                max_chars: 80
            """
        )
    )
    with warnings.catch_warnings(record=True) as w:
        warnings.simplefilter("always")
        spec = load_spec(cfg)
    assert not w
    assert spec.options == {"paginate": {"max_chars": 80}}


def test_unknown_option_section_emits_warning(tmp_path):
    cfg = tmp_path / "pagination.yaml"
    cfg.write_text(
        textwrap.dedent(
            """
            pipeline: [normalize_newlines, paginate]
            options:
              paginate:
                strategy: lines
              typeset:
                font: serif
            """
        )
    )
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        load_spec(cfg)

    assert [w.message.args[0] for w in caught] == ["Unknown pipeline options: typeset"]


def test_load_spec_merges_overrides(tmp_path):
    cfg = tmp_path / "pagination.yaml"
    cfg.write_text(
        textwrap.dedent(
            """
            options:
              paginate:
                max_chars: 256
                strategy: marker
                page_marker: "---"
            """
        )
    )
    spec = load_spec(cfg, overrides={"paginate": {"max_chars": 128, "max_lines": 4}})

    assert spec.pipeline == DEFAULT_PIPELINE
    assert spec.options["paginate"] == {
        "max_chars": 128,
        "strategy": "marker",
        "page_marker": "---",
        "max_lines": 4,
    }


def test_missing_file_yields_defaults(tmp_path):
    spec = load_spec(tmp_path / "absent.yaml")
    assert spec.pipeline == DEFAULT_PIPELINE
    assert spec.options == {}


def test_non_mapping_yaml_raises(tmp_path):
    cfg = tmp_path / "pagination.yaml"
    cfg.write_text("- not-a-mapping\n- still-not-a-mapping\n")

    with pytest.raises(TypeError, match="top-level mapping"):
        load_spec(cfg)


def test_shipped_config_loads():
    from pathlib import Path

    spec = load_spec(Path(__file__).resolve().parents[1] / "pagination.yaml")
    assert spec.pipeline == DEFAULT_PIPELINE
    assert spec.options["paginate"]["max_chars"] == 256
