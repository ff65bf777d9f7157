"""Frontier-sweep decomposition of a rectangular panel around its openings.

Subdivision steps (tiles are logged as blocks):
1. Seed starting points at the panel corner, beside openings touching the
   top and left borders, and along the bottom/right edges of every opening
2. Pop the topmost (then leftmost) starting point
3. Walk down from it to the first obstacle spanning its x, giving the height
4. Walk right to the first obstacle in that horizontal strip, giving the width
5. Emit the block and make it an obstacle for later blocks
6. Walk the block's bottom and right edges; every stretch not already
   bordered by an obstacle starts a new starting point
7. Repeat 2~6 until there are no more starting points
"""

from __future__ import annotations

import bisect
import heapq
import logging

from panel_builder.config import EPS
from panel_builder.errors import DegenerateTile
from panel_builder.models.geometry import Rect, snap_rects
from panel_builder.validators.panel import check_decomposition_input

logger = logging.getLogger(__name__)


class ObstacleSet:
    """Openings plus emitted tiles, kept sorted by x and by y."""

    def __init__(self, rects: list[Rect] | None = None):
        self.by_x: list[Rect] = []
        self.by_y: list[Rect] = []
        for rect in rects or []:
            self.add(rect)

    def __len__(self) -> int:
        return len(self.by_x)

    def add(self, rect: Rect) -> None:
        bisect.insort(self.by_x, rect, key=lambda r: r.x)
        bisect.insort(self.by_y, rect, key=lambda r: r.y)


class FrontierSweep:
    """Single-use sweep over one panel.

    Input is assumed valid (see ``check_decomposition_input``) and snapped
    (see ``snap_rects``); use ``decompose`` unless the caller has done both.
    """

    def __init__(self, panel: Rect, openings: list[Rect], eps: float = EPS):
        self.panel = panel
        self.eps = eps
        self.obstacles = ObstacleSet(openings)
        self.frontier: list[tuple[float, float]] = []
        self.tiles: list[Rect] = []
        self._seed(openings)

    def run(self) -> list[Rect]:
        while self.frontier:
            y, x = heapq.heappop(self.frontier)
            # Duplicates and points claimed by a later tile are stale
            if self._is_covered(x, y):
                continue
            block = self._grow(x, y)
            self.obstacles.add(block)
            self.tiles.append(block)
            logger.debug("block %d at (%.3f, %.3f) size %.3f x %.3f",
                         len(self.tiles) - 1, block.x, block.y, block.width, block.height)
            self._walk_edges(block)
        return self.tiles

    def _push(self, x: float, y: float) -> None:
        if x >= self.panel.right - self.eps or y >= self.panel.bottom - self.eps:
            return
        heapq.heappush(self.frontier, (y, x))

    def _seed(self, openings: list[Rect]) -> None:
        panel, eps = self.panel, self.eps
        self._push(panel.x, panel.y)
        for o in self.obstacles.by_x:
            if abs(o.y - panel.y) < eps:
                self._push(o.right, panel.y)
            if abs(o.x - panel.x) < eps:
                self._push(panel.x, o.bottom)
        # A corner enclosed by one opening above and another to its left is
        # reachable from no tile edge, so openings get their own edge walks.
        for o in openings:
            self._walk_edges(o)

    def _is_covered(self, x: float, y: float) -> bool:
        eps = self.eps
        for o in self.obstacles.by_y:
            if o.y > y + eps:
                break
            if o.x - eps <= x < o.right - eps and y < o.bottom - eps:
                return True
        return False

    def _grow(self, x: float, y: float) -> Rect:
        eps = self.eps

        # walk along y
        max_y = self.panel.bottom
        for o in self.obstacles.by_y:
            if o.y >= max_y:
                break
            if o.y > y + eps and o.x <= x + eps and x < o.right - eps:
                max_y = o.y

        # find next obstacle in x dir
        max_x = self.panel.right
        for o in self.obstacles.by_x:
            if o.x >= max_x:
                break
            if o.x > x + eps and o.y < max_y - eps and o.bottom > y + eps:
                max_x = o.x

        width, height = max_x - x, max_y - y
        if width < eps or height < eps:
            raise DegenerateTile(
                f"Block at ({x}, {y}) collapsed to {width} x {height} "
                f"on panel {self.panel.as_tuple()}"
            )
        return Rect(x=x, y=y, width=width, height=height)

    def _walk_edges(self, rect: Rect) -> None:
        """Queue the start of every unbordered stretch below and right of ``rect``."""
        eps = self.eps

        # bottom edge, left to right
        edge = rect.bottom
        if edge < self.panel.bottom - eps:
            cursor = rect.x
            for o in self.obstacles.by_x:
                if o.x >= rect.right - eps:
                    break
                if abs(o.y - edge) >= eps or o.right <= cursor + eps:
                    continue
                if o.x > cursor + eps:
                    self._push(cursor, edge)
                cursor = o.right
            if cursor < rect.right - eps:
                self._push(cursor, edge)

        # right edge, top to bottom
        edge = rect.right
        if edge < self.panel.right - eps:
            cursor = rect.y
            for o in self.obstacles.by_y:
                if o.y >= rect.bottom - eps:
                    break
                if abs(o.x - edge) >= eps or o.bottom <= cursor + eps:
                    continue
                if o.y > cursor + eps:
                    self._push(edge, cursor)
                cursor = o.bottom
            if cursor < rect.bottom - eps:
                self._push(edge, cursor)


def decompose(panel: Rect, openings: list[Rect] | None = None, eps: float = EPS) -> list[Rect]:
    """Split ``panel`` minus ``openings`` into non-overlapping tiles.

    Opening edges within ``eps`` of each other or of the panel border are
    snapped together first, so tiles fill those slivers exactly.
    Tiles come back in emission order. Raises InvalidPanel/InvalidOpening
    for malformed input and DegenerateTile if the sweep breaks down.
    """
    openings = list(openings or [])
    check_decomposition_input(panel, openings, eps)
    tiles = FrontierSweep(panel, snap_rects(panel, openings, eps), eps).run()
    logger.debug(
        "Panel %.3f x %.3f with %d opening(s) -> %d tile(s)",
        panel.width, panel.height, len(openings), len(tiles),
    )
    return tiles
