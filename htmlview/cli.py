"""Command-line interface for htmlview."""

from __future__ import annotations

import argparse
import difflib
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from .app import render_view
from .event_map import build_event_map
from .io_utils import stable_json_dumps, write_html
from .page_config import load_page_config
from .render_state import RenderState
from .serialize import to_string

logger = logging.getLogger(__name__)


def _describe_bindings(page: Path) -> dict:
    option = load_page_config(page).to_html_option()
    described: dict[str, list[str]] = {}
    for path, events in build_event_map(option.children).items():
        described[path] = [
            name
            for name in ("on_click", "on_change", "on_input", "on_pointer_move", "on_pointer_down")
            if getattr(events, name) is not None
        ]
    return described


def _diff(expected: str, actual: str, *, fromfile: str, tofile: str) -> str:
    return "".join(
        difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile=fromfile,
            tofile=tofile,
        )
    )


def _handle_render(args: argparse.Namespace) -> int:
    option = load_page_config(args.page).to_html_option()
    html_text = render_view(option) if args.interactive else to_string(option)

    if args.check:
        if args.out is None:
            raise SystemExit("--check requires --out")
        existing = args.out.read_text(encoding="utf-8") if args.out.exists() else ""
        if existing == html_text:
            return 0
        sys.stderr.write(
            _diff(existing, html_text, fromfile=str(args.out), tofile=f"{args.page} (rendered)") + "\n"
        )
        return 1

    if args.out is None:
        sys.stdout.write(html_text + "\n")
    else:
        write_html(args.out, html_text)
        logger.info("wrote %s", args.out)
    return 0


def _handle_events(args: argparse.Namespace) -> int:
    sys.stdout.write(stable_json_dumps(_describe_bindings(args.page)))
    return 0


def _handle_dispatch(args: argparse.Namespace) -> int:
    """Replay newline-delimited browser event payloads and print the resulting messages."""

    option = load_page_config(args.page).to_html_option()
    messages: List[Any] = []
    render_state: RenderState[Any] = RenderState(messages.append)
    render_view(option, render_state)

    for line_number, line in enumerate(args.events, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            render_state.dispatch(json.loads(line))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise SystemExit(f"Invalid event on line {line_number}: {exc}") from exc
        while messages:
            sys.stdout.write(json.dumps(messages.pop(0), ensure_ascii=False) + "\n")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render declarative pages to HTML.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a page file to HTML")
    render.add_argument("page", type=Path, help="YAML or JSON page description")
    render.add_argument("--out", type=Path, default=None, help="Output HTML file (stdout if omitted)")
    render.add_argument(
        "--interactive",
        action="store_true",
        help="Render as an interactive view (prepends the <noscript> notice)",
    )
    render.add_argument(
        "--check",
        action="store_true",
        help="Compare the rendered page with --out instead of writing it; exit 1 on difference",
    )
    render.set_defaults(handler=_handle_render)

    events = subparsers.add_parser("events", help="List the event bindings of a page by path")
    events.add_argument("page", type=Path, help="YAML or JSON page description")
    events.set_defaults(handler=_handle_events)

    dispatch = subparsers.add_parser(
        "dispatch", help="Feed JSON browser events (one per line) through the page bindings"
    )
    dispatch.add_argument("page", type=Path, help="YAML or JSON page description")
    dispatch.add_argument(
        "--events",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="File with one JSON event per line (stdin if omitted)",
    )
    dispatch.set_defaults(handler=_handle_dispatch)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
