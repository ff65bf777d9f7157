"""A story: the walls and floors of one level, with their hosted items."""

from __future__ import annotations

from pydantic import BaseModel, Field

from panel_builder.models.elements import Door, Floor, Staircase, Wall, Window


class Story(BaseModel):
    """A single story (floor level).

    Elevation is the absolute height of the story floor from ground (z=0).
    """

    name: str = Field(default="Story", description="Story name, e.g. 'Ground Floor'")
    elevation: float = Field(default=0.0, description="Absolute elevation in meters")
    walls: list[Wall] = Field(default_factory=list)
    doors: list[Door] = Field(default_factory=list)
    windows: list[Window] = Field(default_factory=list)
    floors: list[Floor] = Field(default_factory=list)
    staircases: list[Staircase] = Field(default_factory=list)

    def get_wall(self, wall_id: str) -> Wall | None:
        """Find a wall by GlobalId."""
        return next((w for w in self.walls if w.global_id == wall_id), None)

    def get_wall_by_name(self, name: str) -> Wall | None:
        """Find a wall by name (case-insensitive)."""
        return next(
            (w for w in self.walls if w.name.lower() == name.lower()), None
        )

    def get_floor(self, floor_id: str) -> Floor | None:
        """Find a floor by GlobalId."""
        return next((f for f in self.floors if f.global_id == floor_id), None)

    def doors_on(self, wall_id: str) -> list[Door]:
        return [d for d in self.doors if d.wall_id == wall_id]

    def windows_on(self, wall_id: str) -> list[Window]:
        return [w for w in self.windows if w.wall_id == wall_id]

    def staircases_on(self, floor_id: str) -> list[Staircase]:
        return [s for s in self.staircases if s.floor_id == floor_id]
