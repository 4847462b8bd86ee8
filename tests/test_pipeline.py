import io
import json
import logging

import pytest

from jsonzoom import transform, transform_with_edges
from jsonzoom.cli import main
from jsonzoom.config import Settings
from jsonzoom.pipeline import build_diagram, run


def test_transform_has_no_edges():
    diagram = transform({"address": {"city": "X"}})
    assert diagram.edges is None
    assert "edges" not in diagram.to_dict()


def test_transform_with_edges():
    result = transform_with_edges({"items": [{"id": 1}]}).to_dict()
    assert result["classes"] == [
        {"name": "Root", "properties": ["items: Items[]"]},
        {"name": "Items", "properties": ["id: number"]},
    ]
    assert result["edges"] == [{"id": "e-Root-Items", "source": "Root", "target": "Items"}]


def test_array_root_name_in_both_modes():
    assert transform([{"a": 1}]).root_name == "RootArray"
    assert transform_with_edges([{"a": 1}]).classes[0].name == "RootArray"


def test_root_name_from_settings():
    diagram = transform({"a": 1}, settings=Settings(root_name="Document"))
    assert diagram.classes[0].name == "Document"


def test_degenerate_inputs():
    for value in (None, 0, "text", True):
        assert transform_with_edges(value).to_dict() == {"classes": [], "edges": []}
    assert transform_with_edges([]).to_dict() == {
        "classes": [{"name": "RootArray", "properties": []}],
        "edges": [],
    }


def test_collisions_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="jsonzoom"):
        diagram = build_diagram({"item": {}, "Item": {}}, Settings())
    assert [c.name for c in diagram.classes] == ["Root", "Item", "Item"]
    assert "Class name 'Item' was inferred 2 times" in caplog.text


def test_cycles_recorded():
    parent = {"name": "p"}
    child = {"parent": parent}
    parent["child"] = {"node": {"child": child}}
    diagram = build_diagram(parent, Settings())
    # Root -> Child -> Node -> Child: Child and Node reference each other
    assert [sorted(c) for c in diagram.cycles] == [["Child", "Node"]]


def test_run_writes_html(tmp_path):
    source = tmp_path / "people.json"
    source.write_text(json.dumps({"person": {"name": "A"}}), encoding="utf-8")
    out = run(source)
    assert out == source.with_suffix(".html")
    page = out.read_text(encoding="utf-8")
    assert "<h1>people</h1>" in page
    assert "e-Root-Person" in page


def test_run_writes_json_beside_input(tmp_path):
    source = tmp_path / "people.json"
    source.write_text('{"person": {"name": "A"}}', encoding="utf-8")
    out = run(source, fmt="json", with_edges=False)
    assert out == tmp_path / "people.classes.json"
    assert json.loads(source.read_text(encoding="utf-8")) == {"person": {"name": "A"}}
    assert json.loads(out.read_text(encoding="utf-8")) == {
        "classes": [
            {"name": "Root", "properties": ["person: Person"]},
            {"name": "Person", "properties": ["name: string"]},
        ]
    }


def test_run_reads_stdin(tmp_path):
    out = run(
        None,
        output=tmp_path / "out.json",
        fmt="json",
        stdin=io.StringIO('{"a": [1]}'),
    )
    assert json.loads(out.read_text(encoding="utf-8")) == {
        "classes": [{"name": "Root", "properties": ["a: number[]"]}],
        "edges": [],
    }


def test_run_uses_directory_settings(tmp_path):
    (tmp_path / ".jsonzoom.toml").write_text('[jsonzoom]\nroot_name = "Doc"\nwith_edges = false\n')
    source = tmp_path / "doc.json"
    source.write_text('{"a": {}}', encoding="utf-8")
    out = run(source, fmt="json")
    assert json.loads(out.read_text(encoding="utf-8")) == {
        "classes": [
            {"name": "Doc", "properties": ["a: A"]},
            {"name": "A", "properties": []},
        ]
    }


def test_run_bad_input_leaves_output_untouched(tmp_path, caplog):
    source = tmp_path / "broken.json"
    source.write_text('{"a": ', encoding="utf-8")
    out = tmp_path / "broken.html"
    out.write_text("previous diagram", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="jsonzoom"):
        with pytest.raises(SystemExit) as excinfo:
            run(source, output=out)
    assert excinfo.value.code == 1
    assert out.read_text(encoding="utf-8") == "previous diagram"
    assert "Could not parse JSON" in caplog.text


def test_run_rejects_unknown_format(tmp_path):
    with pytest.raises(ValueError):
        run(tmp_path / "x.json", fmt="svg")


def test_cli(tmp_path):
    source = tmp_path / "data.yaml"
    source.write_text("users:\n  - name: a\n    roles: [admin]\n", encoding="utf-8")
    out = tmp_path / "diagram.json"
    main([str(source), "-o", str(out), "--format", "json"])
    assert json.loads(out.read_text(encoding="utf-8")) == {
        "classes": [
            {"name": "Root", "properties": ["users: Users[]"]},
            {"name": "Users", "properties": ["name: string", "roles: string[]"]},
        ],
        "edges": [{"id": "e-Root-Users", "source": "Root", "target": "Users"}],
    }


def test_cli_no_edges(tmp_path):
    source = tmp_path / "data.json"
    source.write_text('{"a": {"b": 1}}', encoding="utf-8")
    out = tmp_path / "classes.json"
    main([str(source), "-o", str(out), "-f", "json", "--no-edges", "-v"])
    assert "edges" not in json.loads(out.read_text(encoding="utf-8"))


def test_cli_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope.json")])
    assert excinfo.value.code == 1


def test_run_stdin_not_utf8(tmp_path):
    out = tmp_path / "out.html"
    stdin = io.TextIOWrapper(io.BytesIO(b'{"a": "\xff"}'), encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        run(None, output=out, stdin=stdin)
    assert excinfo.value.code == 1
    assert not out.exists()


def test_run_too_deep_exits_cleanly(tmp_path, caplog):
    source = tmp_path / "deep.json"
    source.write_text("[" * 200000 + "]" * 200000, encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="jsonzoom"):
        with pytest.raises(SystemExit) as excinfo:
            run(source)
    assert excinfo.value.code == 1
    assert not source.with_suffix(".html").exists()
    assert "Could not parse JSON" in caplog.text
