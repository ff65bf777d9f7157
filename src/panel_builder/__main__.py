"""Panel Builder CLI.

Usage:
    python -m panel_builder <command> [options]

All commands print JSON on stdout; logging goes to stderr.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import List, Optional

import typer
from pydantic import ValidationError

from panel_builder.errors import InvalidOpening, PanelBuilderError
from panel_builder.export.boxes import story_boxes
from panel_builder.models.geometry import Rect
from panel_builder.models.story import Story
from panel_builder.tiling.surfaces import decompose_story
from panel_builder.tiling.sweep import decompose as decompose_panel
from panel_builder.validators.panel import check_partition

app = typer.Typer(
    name="panel_builder",
    help="Panel Builder: split walls and floors into solid tiles around openings.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(error: str, **extra) -> None:
    _output({"ok": False, "error": error, **extra})
    raise typer.Exit(1)


def _rect_json(rect: Rect) -> list[float]:
    return [round(v, 6) for v in rect.as_tuple()]


def _parse_rect(text: str) -> Rect:
    """Parse 'x,y,width,height'."""
    parts = text.split(",")
    if len(parts) != 4:
        raise ValueError(f"Expected x,y,width,height but got '{text}'")
    x, y, w, h = (float(p) for p in parts)
    return Rect(x=x, y=y, width=w, height=h)


def _error_json(exc: PanelBuilderError) -> dict:
    data: dict = {"ok": False, "error": str(exc), "type": type(exc).__name__}
    if isinstance(exc, InvalidOpening):
        data["issues"] = [
            {"index": i.index, "opening": _rect_json(i.opening), "message": i.message}
            for i in exc.issues
        ]
    return data


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def version() -> None:
    """Show version."""
    from panel_builder import __version__

    _output({"ok": True, "version": __version__})


@app.command()
def decompose(
    width: float = typer.Argument(..., help="Panel width"),
    height: float = typer.Argument(..., help="Panel height"),
    opening: Optional[List[str]] = typer.Option(
        None, "--opening", "-o", help="Opening as x,y,width,height (repeatable)"
    ),
    check: bool = typer.Option(False, "--check", help="Verify the tiling after the sweep"),
):
    """Decompose a single panel anchored at the origin."""
    panel = Rect(x=0.0, y=0.0, width=width, height=height)
    try:
        openings = [_parse_rect(o) for o in opening or []]
    except ValueError as e:
        _fail(str(e))

    try:
        tiles = decompose_panel(panel, openings)
    except PanelBuilderError as e:
        _output(_error_json(e))
        raise typer.Exit(1)

    result: dict = {
        "ok": True,
        "panel": _rect_json(panel),
        "openings": [_rect_json(o) for o in openings],
        "tiles": [_rect_json(t) for t in tiles],
        "tile_area": round(sum(t.area for t in tiles), 6),
    }
    if check:
        issues = check_partition(panel, openings, tiles)
        result["issues"] = [{"kind": i.kind, "message": i.message} for i in issues]
        if issues:
            result["ok"] = False
            _output(result)
            raise typer.Exit(1)
    _output(result)


@app.command()
def story(
    story_json: Optional[str] = typer.Argument(None, help="Story description as JSON"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the story from stdin"),
):
    """Tile every wall and floor of a story and map the tiles to boxes."""
    if stdin:
        raw = sys.stdin.read()
    elif story_json:
        raw = story_json
    else:
        _fail("Provide the story as argument or --stdin")

    try:
        s = Story.model_validate_json(raw)
    except ValidationError as e:
        _fail(f"Invalid story: {e}")

    try:
        tilings = decompose_story(s)
    except PanelBuilderError as e:
        _output(_error_json(e))
        raise typer.Exit(1)

    boxes = story_boxes(s, tilings)
    panels = []
    for t in tilings:
        panels.append({
            "id": t.element_id,
            "name": t.name,
            "kind": t.kind,
            "panel": _rect_json(t.panel),
            "openings": [_rect_json(o) for o in t.openings],
            "tiles": [_rect_json(tile) for tile in t.tiles],
            "boxes": [b.model_dump() for b in boxes[t.element_id]],
        })
    _output({"ok": True, "story": s.name, "panels": panels})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
