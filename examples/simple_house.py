"""Simple single-room house, tiled for export.

One room: 6m x 4m, 3m high
- 4 walls (0.25m thick)
- 1 door (south wall, 0.9m wide, 2.1m high)
- 3 windows (east, west, north walls, 1.2m wide, 1.5m high, 0.9m sill)
- 1 floor slab with a stair void in the north-east corner

Layout (top view):
   (0,4) -------- (6,4)
     |          [S] |
  W  |    room      |  E
     |              |
   (0,0) -------- (6,0)
           S (door here)
"""

from panel_builder.export.boxes import story_boxes
from panel_builder.models import Door, Floor, Point2D, Staircase, Story, Wall, Window
from panel_builder.tiling.surfaces import decompose_story
from panel_builder.validators.panel import check_partition

# Room dimensions
WIDTH = 6.0   # x-axis
DEPTH = 4.0   # y-axis
HEIGHT = 3.0  # wall height
WALL_T = 0.25  # wall thickness

corners = [
    Point2D(x=0, y=0),
    Point2D(x=WIDTH, y=0),
    Point2D(x=WIDTH, y=DEPTH),
    Point2D(x=0, y=DEPTH),
]
names = ["South Wall", "East Wall", "North Wall", "West Wall"]
walls = [
    Wall(name=name, start=corners[i], end=corners[(i + 1) % 4], height=HEIGHT, thickness=WALL_T)
    for i, name in enumerate(names)
]
wall_south, wall_east, wall_north, wall_west = walls

door = Door(name="Front Door", wall_id=wall_south.global_id, position=2.5, width=0.9, height=2.1)

windows = [
    Window(name="East Window", wall_id=wall_east.global_id, position=1.2,
           width=1.2, height=1.5, sill_height=0.9),
    Window(name="West Window", wall_id=wall_west.global_id, position=1.2,
           width=1.2, height=1.5, sill_height=0.9),
    Window(name="North Window", wall_id=wall_north.global_id, position=2.4,
           width=1.2, height=1.5, sill_height=0.9),
]

floor = Floor(
    name="Ground Floor Slab",
    center=Point2D(x=WIDTH / 2, y=DEPTH / 2),
    width=WIDTH,
    depth=DEPTH,
    thickness=0.25,
)
stairs = Staircase(
    name="Stairs",
    floor_id=floor.global_id,
    center=Point2D(x=5.2, y=2.8),
    width=1.0,
    length=2.4,
)

story = Story(
    name="Ground Floor",
    walls=walls,
    doors=[door],
    windows=windows,
    floors=[floor],
    staircases=[stairs],
)

tilings = decompose_story(story)
boxes = story_boxes(story, tilings)

for tiling in tilings:
    issues = check_partition(tiling.panel, tiling.openings, tiling.tiles)
    status = "ok" if not issues else f"{len(issues)} issue(s)"
    print(
        f"{tiling.name:<18} {len(tiling.openings)} opening(s) -> "
        f"{len(tiling.tiles)} tile(s), {tiling.tile_area:.2f} m² solid [{status}]"
    )
    for box in boxes[tiling.element_id]:
        c, s = box.center, box.size
        print(f"    {box.name:<22} at ({c.x:.2f}, {c.y:.2f}, {c.z:.2f}) size {s.x:.2f} x {s.y:.2f} x {s.z:.2f}")
