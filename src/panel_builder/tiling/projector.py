"""Project hosted items onto their panel as opening rectangles.

Walls: local x runs along the wall from its start point, local y up from
the base. Doors and windows share the wall's orientation, so their
rectangles come straight from position, sill height and size.

Floors: the panel is anchored at the slab's minimum corner in its own
rotated frame. A staircase rotated relative to the floor is replaced by the
axis-aligned bounding box of its footprint, a deliberate over-approximation.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from panel_builder.models.elements import Door, Floor, Staircase, Wall, Window
from panel_builder.models.geometry import Point2D, Rect

logger = logging.getLogger(__name__)


def wall_panel(wall: Wall) -> Rect:
    return Rect(x=0.0, y=0.0, width=wall.length, height=wall.height)


def floor_panel(floor: Floor) -> Rect:
    return Rect(x=0.0, y=0.0, width=floor.width, height=floor.depth)


def rotated_bounds(width: float, height: float, angle_deg: float) -> tuple[float, float]:
    """Extents of the axis-aligned box around a rotated ``width`` x ``height`` rect."""
    corners = [
        Point2D(x=sx * width / 2, y=sy * height / 2).rotated(angle_deg)
        for sx, sy in ((-1, -1), (1, -1), (1, 1), (-1, 1))
    ]
    xs = [c.x for c in corners]
    ys = [c.y for c in corners]
    return max(xs) - min(xs), max(ys) - min(ys)


def project_wall_openings(
    wall: Wall,
    doors: Iterable[Door] = (),
    windows: Iterable[Window] = (),
) -> list[Rect]:
    """Openings cut by the wall's doors, then its windows.

    Items hosted by other walls are skipped.
    """
    openings: list[Rect] = []
    for door in doors:
        if door.wall_id != wall.global_id:
            continue
        openings.append(Rect(x=door.position, y=0.0, width=door.width, height=door.height))
    for window in windows:
        if window.wall_id != wall.global_id:
            continue
        openings.append(
            Rect(x=window.position, y=window.sill_height, width=window.width, height=window.height)
        )
    logger.debug("Wall %s: %d opening(s)", wall.name or wall.global_id, len(openings))
    return openings


def to_floor_frame(floor: Floor, point: Point2D) -> Point2D:
    """Map a plan point into the floor panel's local frame."""
    offset = Point2D(x=point.x - floor.center.x, y=point.y - floor.center.y)
    local = offset.rotated(-floor.rotation)
    return Point2D(x=local.x + floor.width / 2, y=local.y + floor.depth / 2)


def project_staircase(floor: Floor, staircase: Staircase) -> Rect:
    center = to_floor_frame(floor, staircase.center)
    relative = staircase.rotation - floor.rotation
    if math.isclose(math.remainder(relative, 180.0), 0.0, abs_tol=1e-9):
        bw, bh = staircase.width, staircase.length
    else:
        bw, bh = rotated_bounds(staircase.width, staircase.length, relative)
    return Rect(x=center.x - bw / 2, y=center.y - bh / 2, width=bw, height=bh)


def project_floor_openings(floor: Floor, staircases: Iterable[Staircase] = ()) -> list[Rect]:
    """Stair voids cut through the floor; stairs on other floors are skipped."""
    openings = [
        project_staircase(floor, s) for s in staircases if s.floor_id == floor.global_id
    ]
    logger.debug("Floor %s: %d stair void(s)", floor.name or floor.global_id, len(openings))
    return openings
