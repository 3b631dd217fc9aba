import json
from pathlib import Path

import pytest

from htmlview.cli import main
from htmlview.io_utils import stable_json_dumps
from htmlview.serialize import DOCTYPE

PAGE = {
    "pageName": "テストページ",
    "appName": "テストアプリ",
    "description": "ページの説明",
    "iconUrl": "https://narumincho.com/icon",
    "coverImageUrl": "https://narumincho.com/assets/kamausagi.png",
    "url": "https://narumincho.com",
    "language": "Japanese",
    "body": [
        {"key": "e", "name": "div", "text": "それな"},
        {
            "key": "link",
            "name": "a",
            "attributes": {"href": "/next"},
            "text": "next",
            "events": {"onClick": {"message": {"navigate": "/next"}, "ignoreNewTab": True}},
        },
        {"key": "q", "name": "input", "noEndTag": True, "events": {"onInput": "query"}},
    ],
}


@pytest.fixture()
def page_path(tmp_path: Path) -> Path:
    path = tmp_path / "page.json"
    path.write_text(stable_json_dumps(PAGE), encoding="utf-8")
    return path


def test_render_to_stdout(page_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", str(page_path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith(DOCTYPE + '<html lang="ja">')
    assert "<title>テストページ</title>" in out
    assert "<div>それな</div>" in out
    assert "<noscript>" not in out


def test_render_interactive_and_check(page_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_file = tmp_path / "dist" / "index.html"

    assert main(["render", str(page_path), "--interactive", "--out", str(out_file)]) == 0
    written = out_file.read_text(encoding="utf-8")
    assert "<body><noscript>テストアプリ" in written

    assert main(["render", str(page_path), "--interactive", "--out", str(out_file), "--check"]) == 0

    out_file.write_text(written.replace("それな", "changed"), encoding="utf-8")
    assert main(["render", str(page_path), "--interactive", "--out", str(out_file), "--check"]) == 1
    err = capsys.readouterr().err
    assert str(out_file) in err
    assert "+" in err and "それな" in err


def test_check_requires_out(page_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["render", str(page_path), "--check"])


def test_events_lists_bindings(page_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["events", str(page_path)]) == 0

    assert json.loads(capsys.readouterr().out) == {"/link": ["on_click"], "/q": ["on_input"]}


def test_dispatch_replays_events(page_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    events_file = tmp_path / "events.jsonl"
    events_file.write_text(
        "\n".join(
            [
                json.dumps({"type": "click", "path": "/link"}),
                json.dumps({"type": "click", "path": "/link", "ctrlKey": True}),
                "",
                json.dumps({"type": "input", "path": "/q", "target": {"value": "猫"}}),
                json.dumps({"type": "change", "path": "/missing"}),
            ]
        ),
        encoding="utf-8",
    )

    assert main(["dispatch", str(page_path), "--events", str(events_file)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line) for line in lines] == [
        {"navigate": "/next"},
        {"message": "query", "value": "猫"},
    ]


def test_dispatch_rejects_malformed_payload(page_path: Path, tmp_path: Path) -> None:
    events_file = tmp_path / "events.jsonl"
    events_file.write_text('{"type": "scroll", "path": "/"}\n', encoding="utf-8")

    with pytest.raises(SystemExit, match="line 1"):
        main(["dispatch", str(page_path), "--events", str(events_file)])
