"""Geometric primitives for panels, openings and tiles."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """2D point in the XY plane (meters)."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def rotated(self, angle_deg: float) -> Point2D:
        """This point rotated counter-clockwise about the origin."""
        a = math.radians(angle_deg)
        c, s = math.cos(a), math.sin(a)
        return Point2D(x=self.x * c - self.y * s, y=self.x * s + self.y * c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=1e-6) and math.isclose(
            self.y, other.y, abs_tol=1e-6
        )

    def __hash__(self) -> int:
        return hash((round(self.x, 6), round(self.y, 6)))


class Point3D(BaseModel):
    """3D point (meters)."""

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )


class Rect(BaseModel):
    """Axis-aligned rectangle in a panel's local frame.

    ``(x, y)`` is the corner the sweep grows from. Edge names follow that
    top-left-origin convention: ``bottom`` is ``y + height`` even on a wall,
    where local y runs upward from the wall base.

    Dimensions are not constrained here so that validation can report bad
    panels and openings with context instead of failing at construction.
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def intersection_area(self, other: Rect) -> float:
        """Area shared with another rectangle (0 when they only touch)."""
        w = min(self.right, other.right) - max(self.x, other.x)
        h = min(self.bottom, other.bottom) - max(self.y, other.y)
        if w <= 0 or h <= 0:
            return 0.0
        return w * h

    def overlaps(self, other: Rect, tol: float = 0.0) -> bool:
        """True if the rectangles share more than ``tol`` along both axes."""
        w = min(self.right, other.right) - max(self.x, other.x)
        h = min(self.bottom, other.bottom) - max(self.y, other.y)
        return w > tol and h > tol

    def contains(self, other: Rect, tol: float = 0.0) -> bool:
        """True if ``other`` lies inside this rectangle, within ``tol``."""
        return (
            other.x >= self.x - tol
            and other.y >= self.y - tol
            and other.right <= self.right + tol
            and other.bottom <= self.bottom + tol
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


def _snap_axis(lo: float, hi: float, values: list[float], tol: float) -> dict[float, float]:
    anchors = [lo, hi]
    mapping: dict[float, float] = {}
    for v in sorted(set(values)):
        clamped = min(max(v, lo), hi)
        nearest = min(anchors, key=lambda a: abs(a - clamped))
        if abs(nearest - clamped) <= tol:
            mapping[v] = nearest
        else:
            anchors.append(clamped)
            mapping[v] = clamped
    return mapping


def snap_rects(frame: Rect, rects: list[Rect], tol: float) -> list[Rect]:
    """Clamp ``rects`` to ``frame`` and merge edge coordinates within ``tol``.

    Frame edges win; otherwise a cluster takes its smallest coordinate.
    Afterwards any two distinct edge coordinates on the same axis are more
    than ``tol`` apart. A rect thinner than ``tol`` can collapse to zero
    width or height.
    """
    xs = _snap_axis(frame.x, frame.right, [v for r in rects for v in (r.x, r.right)], tol)
    ys = _snap_axis(frame.y, frame.bottom, [v for r in rects for v in (r.y, r.bottom)], tol)
    snapped = []
    for r in rects:
        x0, x1 = xs[r.x], xs[r.right]
        y0, y1 = ys[r.y], ys[r.bottom]
        snapped.append(Rect(x=x0, y=y0, width=x1 - x0, height=y1 - y0))
    return snapped
