"""Tests for wall/floor/story decomposition and box export."""

import math

import pytest

from panel_builder.errors import InvalidOpening
from panel_builder.export.boxes import floor_boxes, story_boxes, wall_boxes
from panel_builder.models import Door, Floor, Point2D, Rect, Staircase, Story, Wall, Window
from panel_builder.tiling.surfaces import decompose_floor, decompose_story, decompose_wall
from panel_builder.validators.panel import check_partition


def _simple_story() -> Story:
    """A 6m x 4m room: door in the south wall, window in the east wall, stair void."""
    south = Wall(
        name="South", start=Point2D(x=0, y=0), end=Point2D(x=6, y=0),
        height=3.0, thickness=0.25,
    )
    east = Wall(
        name="East", start=Point2D(x=6, y=0), end=Point2D(x=6, y=4),
        height=3.0, thickness=0.25,
    )
    floor = Floor(name="Floor", center=Point2D(x=3, y=2), width=6, depth=4, thickness=0.2)
    return Story(
        name="Ground Floor",
        elevation=3.0,
        walls=[south, east],
        doors=[Door(name="Door", wall_id=south.global_id, position=2.5, width=0.9, height=2.1)],
        windows=[
            Window(name="Window", wall_id=east.global_id, position=1.2,
                   width=1.2, height=1.5, sill_height=0.9),
        ],
        floors=[floor],
        staircases=[
            Staircase(floor_id=floor.global_id, center=Point2D(x=5, y=3), width=1, length=2)
        ],
    )


class TestDecomposeWall:
    def test_door(self):
        story = _simple_story()
        south = story.walls[0]
        tiling = decompose_wall(south, story.doors, story.windows)
        assert tiling.kind == "wall"
        assert tiling.openings == [Rect(x=2.5, y=0, width=0.9, height=2.1)]
        assert len(tiling.tiles) == 3
        assert tiling.tile_area + tiling.opening_area == pytest.approx(18.0)

    def test_plain_wall(self):
        wall = Wall(start=Point2D(x=0, y=0), end=Point2D(x=4, y=0), height=2.0)
        tiling = decompose_wall(wall)
        assert tiling.tiles == [Rect(x=0, y=0, width=4, height=2)]

    def test_window_past_wall_top(self):
        wall = Wall(start=Point2D(x=0, y=0), end=Point2D(x=4, y=0), height=2.0)
        window = Window(wall_id=wall.global_id, position=1, width=1, height=1.5, sill_height=0.9)
        with pytest.raises(InvalidOpening):
            decompose_wall(wall, windows=[window])


class TestDecomposeFloor:
    def test_stair_void(self):
        story = _simple_story()
        tiling = decompose_floor(story.floors[0], story.staircases)
        assert tiling.openings == [Rect(x=4.5, y=2, width=1, height=2)]
        assert check_partition(tiling.panel, tiling.openings, tiling.tiles) == []

    def test_rotated_stair_void_stays_inside(self):
        floor = Floor(center=Point2D(x=0, y=0), width=8, depth=8)
        stair = Staircase(
            floor_id=floor.global_id, center=Point2D(x=0, y=0), width=1, length=3, rotation=30
        )
        tiling = decompose_floor(floor, [stair])
        assert len(tiling.openings) == 1
        assert check_partition(tiling.panel, tiling.openings, tiling.tiles) == []


class TestDecomposeStory:
    def test_walls_then_floors(self):
        story = _simple_story()
        tilings = decompose_story(story)
        assert [t.kind for t in tilings] == ["wall", "wall", "floor"]
        assert [t.name for t in tilings] == ["South", "East", "Floor"]
        for t in tilings:
            assert check_partition(t.panel, t.openings, t.tiles) == []


class TestWallBoxes:
    def test_boxes_follow_tiles(self):
        story = _simple_story()
        south = story.walls[0]
        tiling = decompose_wall(south, story.doors)
        boxes = wall_boxes(south, tiling.tiles, elevation=story.elevation)
        assert len(boxes) == len(tiling.tiles)
        first = boxes[0]
        assert first.name == "South_0"
        assert first.yaw == 0.0
        assert (first.center.x, first.center.y, first.center.z) == pytest.approx((1.25, 0, 4.5))
        assert (first.size.x, first.size.y, first.size.z) == pytest.approx((2.5, 0.25, 3.0))

    def test_wall_along_y(self):
        wall = Wall(start=Point2D(x=2, y=0), end=Point2D(x=2, y=4), height=3.0)
        boxes = wall_boxes(wall, [Rect(x=1, y=0, width=2, height=3)], prefix="W")
        assert boxes[0].name == "W_0"
        assert boxes[0].yaw == pytest.approx(math.pi / 2)
        assert boxes[0].center.x == pytest.approx(2)
        assert boxes[0].center.y == pytest.approx(2)

    def test_name_falls_back_to_global_id(self):
        wall = Wall(start=Point2D(x=0, y=0), end=Point2D(x=4, y=0))
        boxes = wall_boxes(wall, [Rect(x=0, y=0, width=4, height=2.5)])
        assert boxes[0].name == f"{wall.global_id}_0"


class TestFloorBoxes:
    def test_single_tile_centered_on_floor(self):
        floor = Floor(name="F", center=Point2D(x=5, y=5), width=10, depth=8, thickness=0.2)
        boxes = floor_boxes(floor, [Rect(x=0, y=0, width=10, height=8)], elevation=3.0)
        box = boxes[0]
        assert (box.center.x, box.center.y, box.center.z) == pytest.approx((5, 5, 2.9))
        assert (box.size.x, box.size.y, box.size.z) == pytest.approx((10, 8, 0.2))

    def test_rotated_floor(self):
        floor = Floor(center=Point2D(x=0, y=0), width=4, depth=2, rotation=90)
        boxes = floor_boxes(floor, [Rect(x=0, y=0, width=2, height=2)])
        assert boxes[0].yaw == pytest.approx(math.pi / 2)
        assert boxes[0].center.x == pytest.approx(0)
        assert boxes[0].center.y == pytest.approx(-1)


class TestStoryBoxes:
    def test_keyed_by_element(self):
        story = _simple_story()
        tilings = decompose_story(story)
        boxes = story_boxes(story, tilings)
        assert set(boxes) == {t.element_id for t in tilings}
        for t in tilings:
            assert len(boxes[t.element_id]) == len(t.tiles)

    def test_unknown_element(self):
        story = _simple_story()
        tilings = decompose_story(story)
        with pytest.raises(ValueError, match="not found"):
            story_boxes(Story(name="Empty"), tilings)
