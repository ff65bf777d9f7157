"""Panel element data models."""

from panel_builder.models.ifc_id import generate_ifc_id
from panel_builder.models.geometry import Point2D, Point3D, Rect, snap_rects
from panel_builder.models.elements import Door, Floor, Staircase, Wall, Window
from panel_builder.models.story import Story

__all__ = [
    "generate_ifc_id",
    "Point2D",
    "Point3D",
    "Rect",
    "snap_rects",
    "Wall",
    "Door",
    "Window",
    "Floor",
    "Staircase",
    "Story",
]
