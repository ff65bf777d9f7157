"""Opening projection and frontier-sweep tiling of wall and floor panels."""

from panel_builder.tiling.projector import (
    floor_panel,
    project_floor_openings,
    project_wall_openings,
    rotated_bounds,
    wall_panel,
)
from panel_builder.tiling.sweep import FrontierSweep, ObstacleSet, decompose
from panel_builder.tiling.surfaces import (
    PanelTiling,
    decompose_floor,
    decompose_story,
    decompose_wall,
)

__all__ = [
    "floor_panel",
    "project_floor_openings",
    "project_wall_openings",
    "rotated_bounds",
    "wall_panel",
    "FrontierSweep",
    "ObstacleSet",
    "decompose",
    "PanelTiling",
    "decompose_floor",
    "decompose_story",
    "decompose_wall",
]
