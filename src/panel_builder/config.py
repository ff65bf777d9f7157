"""Tolerances and default element dimensions (meters)."""

# Equality/containment tolerance shared by validation and the sweep.
EPS = 1e-3

DEFAULT_WALL_HEIGHT = 2.5
DEFAULT_WALL_THICKNESS = 0.2
DEFAULT_FLOOR_THICKNESS = 0.15
DEFAULT_WINDOW_SILL = 0.9
