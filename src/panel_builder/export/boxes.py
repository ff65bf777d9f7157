"""Turn panel tiles into 3D box primitives.

Each tile becomes one solid box whose extents are the tile size plus the
element thickness. Boxes are plain data; writing them to a model file is
left to the caller.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from panel_builder.models.elements import Floor, Wall
from panel_builder.models.geometry import Point2D, Point3D, Rect
from panel_builder.models.story import Story
from panel_builder.tiling.surfaces import PanelTiling


class BoxPrimitive(BaseModel):
    """A solid box placed by its center and rotated about z."""

    name: str
    center: Point3D
    yaw: float = Field(default=0.0, description="Rotation about z in radians")
    size: Point3D = Field(description="Extents along the box's local x, y, z")


def _prefix(name: str, global_id: str, prefix: str | None) -> str:
    if prefix:
        return prefix
    return name or global_id


def wall_boxes(
    wall: Wall,
    tiles: list[Rect],
    elevation: float = 0.0,
    prefix: str | None = None,
) -> list[BoxPrimitive]:
    """Boxes for a wall's tiles, centered on the wall centerline."""
    dx, dy = wall.direction
    yaw = math.atan2(dy, dx)
    base = _prefix(wall.name, wall.global_id, prefix)
    boxes = []
    for i, tile in enumerate(tiles):
        along = tile.center
        boxes.append(
            BoxPrimitive(
                name=f"{base}_{i}",
                center=Point3D(
                    x=wall.start.x + dx * along.x,
                    y=wall.start.y + dy * along.x,
                    z=elevation + along.y,
                ),
                yaw=yaw,
                size=Point3D(x=tile.width, y=wall.thickness, z=tile.height),
            )
        )
    return boxes


def floor_boxes(
    floor: Floor,
    tiles: list[Rect],
    elevation: float = 0.0,
    prefix: str | None = None,
) -> list[BoxPrimitive]:
    """Boxes for a floor's tiles; the slab top sits at ``elevation``."""
    yaw = math.radians(floor.rotation)
    base = _prefix(floor.name, floor.global_id, prefix)
    boxes = []
    for i, tile in enumerate(tiles):
        local = Point2D(
            x=tile.center.x - floor.width / 2,
            y=tile.center.y - floor.depth / 2,
        ).rotated(floor.rotation)
        boxes.append(
            BoxPrimitive(
                name=f"{base}_{i}",
                center=Point3D(
                    x=floor.center.x + local.x,
                    y=floor.center.y + local.y,
                    z=elevation - floor.thickness / 2,
                ),
                yaw=yaw,
                size=Point3D(x=tile.width, y=tile.height, z=floor.thickness),
            )
        )
    return boxes


def story_boxes(story: Story, tilings: list[PanelTiling]) -> dict[str, list[BoxPrimitive]]:
    """Boxes for every tiled panel of a story, keyed by element GlobalId."""
    result: dict[str, list[BoxPrimitive]] = {}
    for tiling in tilings:
        if tiling.kind == "wall":
            wall = story.get_wall(tiling.element_id)
            if wall is None:
                raise ValueError(f"Wall {tiling.element_id} not found in '{story.name}'")
            result[tiling.element_id] = wall_boxes(wall, tiling.tiles, story.elevation)
        else:
            floor = story.get_floor(tiling.element_id)
            if floor is None:
                raise ValueError(f"Floor {tiling.element_id} not found in '{story.name}'")
            result[tiling.element_id] = floor_boxes(floor, tiling.tiles, story.elevation)
    return result
