"""Panel and opening validation.

Input checks run once before the sweep; every bad opening is reported,
not just the first one. ``check_partition`` verifies a finished tiling.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from panel_builder.config import EPS
from panel_builder.errors import InvalidOpening, InvalidPanel
from panel_builder.models.geometry import Rect, snap_rects

logger = logging.getLogger(__name__)


@dataclass
class OpeningIssue:
    """A single problem with one opening."""

    index: int
    opening: Rect
    message: str


@dataclass
class PartitionIssue:
    """A single violation found in a finished tiling."""

    kind: str  # "overlap" | "containment" | "coverage"
    message: str


def validate_panel(panel: Rect) -> list[str]:
    """Return the problems with a panel rectangle (empty when valid)."""
    problems: list[str] = []
    if not all(math.isfinite(v) for v in panel.as_tuple()):
        problems.append(f"Panel has non-finite geometry {panel.as_tuple()}")
        return problems
    if panel.width <= 0:
        problems.append(f"Panel width {panel.width} must be positive")
    if panel.height <= 0:
        problems.append(f"Panel height {panel.height} must be positive")
    return problems


def validate_openings(panel: Rect, openings: list[Rect], eps: float = EPS) -> list[OpeningIssue]:
    """Check every opening against the panel and against each other.

    Edges within ``eps`` of each other or of the panel border count as the
    same edge, so the pairwise checks run on the snapped openings the sweep
    will see.
    """
    issues: list[OpeningIssue] = []
    placed: list[tuple[int, Rect]] = []

    for i, o in enumerate(openings):
        if not all(math.isfinite(v) for v in o.as_tuple()):
            issues.append(OpeningIssue(i, o, f"Opening has non-finite geometry {o.as_tuple()}"))
            continue
        if o.width <= 0 or o.height <= 0:
            issues.append(
                OpeningIssue(
                    i, o, f"Opening size {o.width} x {o.height} must be positive"
                )
            )
            continue
        if not panel.contains(o, tol=eps):
            issues.append(
                OpeningIssue(
                    i,
                    o,
                    (
                        f"Opening ({o.x:.3f}, {o.y:.3f}) - ({o.right:.3f}, {o.bottom:.3f}) "
                        f"extends past panel ({panel.x:.3f}, {panel.y:.3f}) - "
                        f"({panel.right:.3f}, {panel.bottom:.3f})"
                    ),
                )
            )
            continue
        placed.append((i, o))

    snapped = snap_rects(panel, [o for _, o in placed], eps)
    for (i, o), s in zip(placed, snapped):
        if s.width <= 0 or s.height <= 0:
            issues.append(
                OpeningIssue(
                    i, o, f"Opening size {o.width} x {o.height} is below tolerance {eps}"
                )
            )

    for a, ((i, o1), s1) in enumerate(zip(placed, snapped)):
        for (j, _), s2 in zip(placed[a + 1 :], snapped[a + 1 :]):
            if s1.overlaps(s2):
                issues.append(
                    OpeningIssue(
                        i,
                        o1,
                        f"Opening overlaps opening [{j}] by {s1.intersection_area(s2):.4f} m²",
                    )
                )
    return issues


def check_decomposition_input(panel: Rect, openings: list[Rect], eps: float = EPS) -> None:
    """Raise InvalidPanel or InvalidOpening if the sweep can't run on this input."""
    problems = validate_panel(panel)
    if problems:
        logger.warning("Rejected panel %s: %s", panel.as_tuple(), "; ".join(problems))
        raise InvalidPanel("; ".join(problems))

    issues = validate_openings(panel, openings, eps)
    if issues:
        logger.warning("Rejected %d opening(s) on panel %s", len(issues), panel.as_tuple())
        raise InvalidOpening(issues)


def check_partition(
    panel: Rect, openings: list[Rect], tiles: list[Rect], eps: float = EPS
) -> list[PartitionIssue]:
    """Verify tiles are disjoint, inside the panel, clear of openings, and complete."""
    issues: list[PartitionIssue] = []
    openings = snap_rects(panel, openings, eps)

    for i, t in enumerate(tiles):
        if not panel.contains(t, tol=eps):
            issues.append(
                PartitionIssue("containment", f"Tile {i} {t.as_tuple()} leaves the panel")
            )
        for k, o in enumerate(openings):
            if t.intersection_area(o) > eps * eps:
                issues.append(
                    PartitionIssue(
                        "containment", f"Tile {i} {t.as_tuple()} covers opening {k}"
                    )
                )

    for i, t1 in enumerate(tiles):
        for j in range(i + 1, len(tiles)):
            overlap = t1.intersection_area(tiles[j])
            if overlap > eps * eps:
                issues.append(
                    PartitionIssue(
                        "overlap", f"Tiles {i} and {j} overlap by {overlap:.6f}"
                    )
                )

    covered = sum(t.area for t in tiles) + sum(o.area for o in openings)
    if abs(covered - panel.area) > eps * eps:
        issues.append(
            PartitionIssue(
                "coverage",
                f"Tiles and openings cover {covered:.6f} of panel area {panel.area:.6f}",
            )
        )
    return issues
