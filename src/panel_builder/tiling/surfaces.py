"""Decompose walls, floors and whole stories into tiles."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from panel_builder.config import EPS
from panel_builder.models.elements import Door, Floor, Staircase, Wall, Window
from panel_builder.models.geometry import Rect
from panel_builder.models.story import Story
from panel_builder.tiling.projector import (
    floor_panel,
    project_floor_openings,
    project_wall_openings,
    wall_panel,
)
from panel_builder.tiling.sweep import decompose

logger = logging.getLogger(__name__)


@dataclass
class PanelTiling:
    """Tiles produced for one wall or floor."""

    element_id: str
    name: str
    kind: str  # "wall" | "floor"
    panel: Rect
    openings: list[Rect] = field(default_factory=list)
    tiles: list[Rect] = field(default_factory=list)

    @property
    def tile_area(self) -> float:
        return sum(t.area for t in self.tiles)

    @property
    def opening_area(self) -> float:
        return sum(o.area for o in self.openings)


def decompose_wall(
    wall: Wall,
    doors: Iterable[Door] = (),
    windows: Iterable[Window] = (),
    eps: float = EPS,
) -> PanelTiling:
    panel = wall_panel(wall)
    openings = project_wall_openings(wall, doors, windows)
    tiles = decompose(panel, openings, eps)
    return PanelTiling(wall.global_id, wall.name, "wall", panel, openings, tiles)


def decompose_floor(
    floor: Floor,
    staircases: Iterable[Staircase] = (),
    eps: float = EPS,
) -> PanelTiling:
    panel = floor_panel(floor)
    openings = project_floor_openings(floor, staircases)
    tiles = decompose(panel, openings, eps)
    return PanelTiling(floor.global_id, floor.name, "floor", panel, openings, tiles)


def decompose_story(story: Story, eps: float = EPS) -> list[PanelTiling]:
    """Tile every wall, then every floor, of a story.

    The first panel with invalid openings aborts the whole story.
    """
    results: list[PanelTiling] = []
    for wall in story.walls:
        results.append(
            decompose_wall(
                wall, story.doors_on(wall.global_id), story.windows_on(wall.global_id), eps
            )
        )
    for floor in story.floors:
        results.append(decompose_floor(floor, story.staircases_on(floor.global_id), eps))
    logger.info(
        "Story '%s': %d panel(s), %d tile(s)",
        story.name, len(results), sum(len(r.tiles) for r in results),
    )
    return results
