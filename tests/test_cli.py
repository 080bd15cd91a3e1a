from __future__ import annotations

import json
from pathlib import Path

import pytest

from htmlattrs.cli import build_parser, main


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_render_yaml_mapping(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(
        tmp_path / "attrs.yaml",
        "class: [btn, btn-primary]\nid: save\ndisabled: true\ndata:\n  id: 42\n",
    )
    main(["render", str(source)])
    assert capsys.readouterr().out == ' class="btn btn-primary" id="save" disabled data-id="42"\n'


def test_render_document_with_options(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(
        tmp_path / "doc.json",
        json.dumps({"attributes": {"title": "<b>"}, "options": {"encode": False}}),
    )
    main(["render", str(source)])
    assert capsys.readouterr().out == ' title="<b>"\n'


def test_flags_override_document_options(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "attrs.yaml", "title: '<b> &amp;'\n")
    main(["render", "--raw", str(source)])
    assert capsys.readouterr().out == ' title="<b> &amp;"\n'
    main(["render", "--no-double-encode", str(source)])
    assert capsys.readouterr().out == ' title="&lt;b&gt; &amp;"\n'


def test_normalize_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "attrs.yaml", "checked: true\nclass: [a, b]\n")
    main(["normalize", str(source)])
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"class": "a b", "checked": True}
    assert list(payload) == ["class", "checked"]


def test_empty_document_warns(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "empty.yaml", "")
    main(["render", str(source)])
    captured = capsys.readouterr()
    assert captured.out == "\n"
    assert "is empty" in captured.err


def test_missing_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["render", str(tmp_path / "nope.yaml")])


def test_non_mapping_document_exits(tmp_path: Path) -> None:
    source = _write(tmp_path / "list.yaml", "- a\n- b\n")
    with pytest.raises(SystemExit):
        main(["render", str(source)])


def test_invalid_options_exit(tmp_path: Path) -> None:
    source = _write(
        tmp_path / "doc.yaml",
        "attributes:\n  id: x\noptions:\n  encode: [not, a, bool]\n",
    )
    with pytest.raises(SystemExit):
        main(["render", str(source)])


def test_version_flag() -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
