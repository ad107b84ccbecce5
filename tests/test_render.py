from __future__ import annotations

import io
import json

import pytest
import yaml

from watson_cli.errors import LocalIOError, RenderError
from watson_cli.render import (
    NESTED_NOTE,
    NOTHING_TO_SHOW,
    Renderer,
    column_for,
    normalize_query,
    project,
    tabulate,
)


def _renderer() -> tuple[Renderer, io.StringIO, io.StringIO]:
    out = io.StringIO()
    err = io.StringIO()
    return Renderer(out, err), out, err


def test_json_output_is_indented() -> None:
    renderer, out, err = _renderer()
    renderer.render({"top_class": "c1", "classes": []}, "json")
    assert json.loads(out.getvalue()) == {"top_class": "c1", "classes": []}
    assert '\n  "top_class": "c1"' in out.getvalue()
    assert err.getvalue() == ""


def test_yaml_output_keeps_key_order() -> None:
    renderer, out, _ = _renderer()
    renderer.render({"b": 1, "a": [1, 2]}, "yaml")
    assert out.getvalue().startswith("b: 1\na:")
    assert yaml.safe_load(out.getvalue()) == {"b": 1, "a": [1, 2]}


def test_query_is_applied_before_rendering() -> None:
    renderer, out, _ = _renderer()
    renderer.render({"top_class": "c1"}, "json", ".top_class")
    assert json.loads(out.getvalue()) == "c1"


def test_leading_dot_is_optional() -> None:
    assert normalize_query(".top_class") == "top_class"
    assert normalize_query(" classes[0] ") == "classes[0]"
    assert project({"a": {"b": 2}}, ".a.b") == 2
    assert project({"a": 1}, ".") == {"a": 1}
    assert project({"a": 1}, None) == {"a": 1}


def test_invalid_query_raises_render_error() -> None:
    renderer, _, _ = _renderer()
    with pytest.raises(RenderError, match="invalid JMESPath query"):
        renderer.render({"a": 1}, "json", "a[")


def test_unknown_format_raises_render_error() -> None:
    renderer, _, _ = _renderer()
    with pytest.raises(RenderError, match="unsupported output format"):
        renderer.render({"a": 1}, "xml")


def test_column_for_uses_last_identifier() -> None:
    assert column_for(None) == "value"
    assert column_for(".top_class") == "top_class"
    assert column_for("classes[0].class_name") == "class_name"
    assert column_for("[0]") == "value"


def test_tabulate_shapes() -> None:
    assert tabulate(None) is None
    assert tabulate([]) is None
    assert tabulate({}) is None
    assert tabulate([{"a": 1}, {"b": 2}]) == (["a", "b"], [[1, None], [None, 2]])
    assert tabulate(["x", "y"], "names") == (["names"], [["x"], ["y"]])
    assert tabulate({"id": "c1", "status": "Available"}) == (
        ["id", "status"],
        [["c1", "Available"]],
    )
    assert tabulate("c1", ".top_class") == (["top_class"], [["c1"]])


def test_tabulate_explodes_single_list_field() -> None:
    value = {"count": 2, "models": [{"id": "m1"}, {"id": "m2"}]}
    assert tabulate(value) == (["count", "id"], [[2, "m1"], [2, "m2"]])
    assert tabulate({"words": ["a", "b"]}) == (["words"], [["a"], ["b"]])
    assert tabulate({"classifiers": []}) is None


def test_table_output_for_list_of_objects() -> None:
    renderer, out, err = _renderer()
    renderer.render({"classifiers": [{"id": "c1", "ok": True}, {"id": "c2", "ok": None}]})
    text = out.getvalue()
    assert "id" in text and "ok" in text
    assert "c1" in text and "true" in text
    assert "c2" in text and "-" in text
    assert err.getvalue() == ""


def test_table_notes_nested_values_on_stderr() -> None:
    renderer, out, err = _renderer()
    renderer.render({"id": "c1", "meta": {"k": 1}}, "table")
    assert '{"k":1}' in out.getvalue()
    assert err.getvalue().strip() == NESTED_NOTE


def test_table_does_not_interpret_markup() -> None:
    renderer, out, _ = _renderer()
    renderer.render({"label": "[bold]x[/bold]"}, "table")
    assert "[bold]x[/bold]" in out.getvalue()


def test_empty_result_prints_nothing_to_show() -> None:
    renderer, out, _ = _renderer()
    renderer.render([], "table")
    assert out.getvalue() == f"{NOTHING_TO_SHOW}\n"


def test_ok_marker() -> None:
    renderer, out, _ = _renderer()
    renderer.ok()
    assert out.getvalue() == "OK\n"


def test_write_binary_copies_chunks(tmp_path) -> None:
    renderer, out, _ = _renderer()
    target = tmp_path / "model.mlmodel"
    renderer.write_binary(iter([b"ab", b"", b"cd"]), str(target))
    assert target.read_bytes() == b"abcd"
    assert out.getvalue() == f"OK\nOutput written to {target}\n"


def test_write_binary_reports_unwritable_path(tmp_path) -> None:
    renderer, out, _ = _renderer()
    target = tmp_path / "missing" / "model.mlmodel"
    with pytest.raises(LocalIOError, match="cannot write"):
        renderer.write_binary(iter([b"ab"]), str(target))
    assert out.getvalue() == ""
