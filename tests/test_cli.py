"""Tests for the CLI interface."""
import json
import subprocess
import sys
from pathlib import Path

from panel_builder.models import Door, Floor, Point2D, Staircase, Story, Wall

CLI = [sys.executable, "-m", "panel_builder"]
ROOT = Path(__file__).parent.parent


def run_cli(*args: str, stdin: str | None = None) -> dict:
    """Run CLI command and return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT), input=stdin,
    )
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return json.loads(result.stdout)


def run_cli_expect_fail(*args: str) -> dict:
    """Run CLI command expecting failure, return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode != 0
    return json.loads(result.stdout)


def _story_json() -> str:
    wall = Wall(name="South", start=Point2D(x=0, y=0), end=Point2D(x=6, y=0), height=3.0)
    floor = Floor(name="Floor", center=Point2D(x=3, y=2), width=6, depth=4)
    story = Story(
        name="GF",
        walls=[wall],
        doors=[Door(wall_id=wall.global_id, position=2.5, width=0.9, height=2.1)],
        floors=[floor],
        staircases=[
            Staircase(floor_id=floor.global_id, center=Point2D(x=5, y=3), width=1, length=2)
        ],
    )
    return story.model_dump_json()


class TestVersion:
    def test_version(self):
        data = run_cli("version")
        assert data["ok"] is True
        assert data["version"]


class TestDecompose:
    def test_no_openings(self):
        data = run_cli("decompose", "6", "3")
        assert data["tiles"] == [[0, 0, 6, 3]]

    def test_centered_opening_checked(self):
        data = run_cli("decompose", "10", "10", "-o", "4,4,2,2", "--check")
        assert data["ok"] is True
        assert len(data["tiles"]) == 4
        assert data["tile_area"] == 96
        assert data["issues"] == []

    def test_edge_to_edge(self):
        data = run_cli("decompose", "10", "4", "--opening", "3,0,2,4")
        assert data["tiles"] == [[0, 0, 3, 4], [5, 0, 5, 4]]

    def test_opening_outside_panel(self):
        data = run_cli_expect_fail("decompose", "10", "4", "-o", "9,1,2,2", "-o", "12,0,1,1")
        assert data["ok"] is False
        assert data["type"] == "InvalidOpening"
        assert [i["index"] for i in data["issues"]] == [0, 1]

    def test_zero_panel(self):
        data = run_cli_expect_fail("decompose", "0", "4")
        assert data["type"] == "InvalidPanel"

    def test_malformed_opening(self):
        data = run_cli_expect_fail("decompose", "10", "4", "-o", "1,2,3")
        assert "x,y,width,height" in data["error"]


class TestStory:
    def test_story_argument(self):
        data = run_cli("story", _story_json())
        assert data["ok"] is True
        assert data["story"] == "GF"
        kinds = [p["kind"] for p in data["panels"]]
        assert kinds == ["wall", "floor"]
        for panel in data["panels"]:
            assert len(panel["boxes"]) == len(panel["tiles"])

    def test_story_stdin(self):
        data = run_cli("story", "--stdin", stdin=_story_json())
        assert len(data["panels"]) == 2

    def test_invalid_story_json(self):
        data = run_cli_expect_fail("story", '{"walls": [{"start": {"x": 0}}]}')
        assert "Invalid story" in data["error"]

    def test_missing_story(self):
        data = run_cli_expect_fail("story")
        assert data["ok"] is False
