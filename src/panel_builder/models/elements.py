"""Panel elements: walls and floors, and the items that cut openings in them.

Doors and windows reference their host wall by GlobalId; staircases
reference their host floor the same way.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from panel_builder.config import (
    DEFAULT_FLOOR_THICKNESS,
    DEFAULT_WALL_HEIGHT,
    DEFAULT_WALL_THICKNESS,
    DEFAULT_WINDOW_SILL,
)
from panel_builder.models.geometry import Point2D
from panel_builder.models.ifc_id import generate_ifc_id


class Wall(BaseModel):
    """A wall defined by start/end points, height, and thickness.

    Its face is a panel of ``length`` x ``height``; local x runs from the
    start point toward the end point, local y upward from the wall base.
    """

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    start: Point2D
    end: Point2D
    height: float = Field(default=DEFAULT_WALL_HEIGHT, gt=0, description="Wall height in meters")
    thickness: float = Field(
        default=DEFAULT_WALL_THICKNESS, gt=0, description="Wall thickness in meters"
    )

    @property
    def length(self) -> float:
        """Wall length (centerline)."""
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> tuple[float, float]:
        """Unit direction vector from start to end."""
        length = self.length
        return (
            (self.end.x - self.start.x) / length,
            (self.end.y - self.start.y) / length,
        )

    @model_validator(mode="after")
    def start_and_end_differ(self) -> Wall:
        if self.start == self.end:
            raise ValueError("Wall start and end points must be different")
        return self


class Door(BaseModel):
    """A door hosted in a wall.

    Position is measured as offset along the wall from the start point.
    Doors stand on the wall base.
    """

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    wall_id: str = Field(description="GlobalId of the host wall")
    position: float = Field(ge=0, description="Offset from wall start point in meters")
    width: float = Field(gt=0, description="Door width in meters")
    height: float = Field(gt=0, description="Door height in meters")


class Window(BaseModel):
    """A window hosted in a wall.

    Position is offset along the wall from start point.
    Sill height is the distance from the wall base to bottom of window.
    """

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    wall_id: str = Field(description="GlobalId of the host wall")
    position: float = Field(ge=0, description="Offset from wall start point in meters")
    width: float = Field(gt=0, description="Window width in meters")
    height: float = Field(gt=0, description="Window height in meters")
    sill_height: float = Field(
        default=DEFAULT_WINDOW_SILL, ge=0, description="Height from wall base to window bottom"
    )


class Floor(BaseModel):
    """A rectangular floor slab.

    Placed by its center and rotated about it (degrees, counter-clockwise).
    Its face is a panel of ``width`` x ``depth`` anchored at the slab's
    local minimum corner.
    """

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    center: Point2D
    width: float = Field(gt=0, description="Extent along local x in meters")
    depth: float = Field(gt=0, description="Extent along local y in meters")
    thickness: float = Field(
        default=DEFAULT_FLOOR_THICKNESS, gt=0, description="Slab thickness in meters"
    )
    rotation: float = Field(default=0.0, description="Rotation about the center in degrees")

    @property
    def area(self) -> float:
        return self.width * self.depth


class Staircase(BaseModel):
    """A staircase cutting a void through its host floor.

    Footprint is a ``width`` x ``length`` rectangle centered on ``center``
    and rotated by ``rotation`` degrees in plan.
    """

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    floor_id: str = Field(description="GlobalId of the floor the stair void cuts")
    center: Point2D
    width: float = Field(gt=0, description="Footprint extent across the flight in meters")
    length: float = Field(gt=0, description="Footprint extent along the flight in meters")
    rotation: float = Field(default=0.0, description="Plan rotation in degrees")
