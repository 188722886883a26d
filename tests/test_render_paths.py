from __future__ import annotations

import json

import pytest

from uni_conversations.paths import UniPaths
from uni_conversations.render import build_console, render_paths


LAYOUT = UniPaths(
    uni_dir="/srv/uni",
    archive_dir="/srv/uni/conversation-archive",
    index_dir="/srv/uni/conversation-index",
    db_path="/srv/uni/conversation-index/db.sqlite",
    exclude_config_path="/srv/uni/conversation-index/exclude.txt",
)


def test_render_json() -> None:
    out = render_paths(layout=LAYOUT, output_format="json", color="never")
    assert out is not None
    assert json.loads(out) == LAYOUT.as_dict()


def test_render_markdown_escapes_pipes() -> None:
    layout = UniPaths(
        uni_dir="/odd|dir",
        archive_dir="a",
        index_dir="i",
        db_path="d",
        exclude_config_path="e",
    )
    out = render_paths(layout=layout, output_format="MARKDOWN", color="never")
    assert out is not None
    lines = out.splitlines()
    assert lines[0] == "| name | path |"
    assert lines[2] == "| uni_dir | `/odd\\|dir` |"
    assert len(lines) == 7


def test_render_text_prints(capsys: pytest.CaptureFixture[str]) -> None:
    assert render_paths(layout=LAYOUT, output_format="text", color="never") is None
    out = capsys.readouterr().out
    assert "db_path" in out
    assert "/srv/uni/conversation-index/db.sqlite" in out


def test_render_unknown_format() -> None:
    with pytest.raises(ValueError):
        render_paths(layout=LAYOUT, output_format="yaml", color="never")


def test_render_table_prints(capsys: pytest.CaptureFixture[str]) -> None:
    assert render_paths(layout=LAYOUT, output_format="table", color="never") is None
    out = capsys.readouterr().out
    assert "exclude_config_path" in out
    assert "/srv/uni/conversation-index/exclude.txt" in out


def test_build_console_color_modes() -> None:
    always = build_console("always")
    assert always.is_terminal
    assert not always.no_color
    assert build_console("NEVER").no_color
