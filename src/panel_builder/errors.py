"""Exceptions raised by panel decomposition."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from panel_builder.validators.panel import OpeningIssue


class PanelBuilderError(ValueError):
    """Base class for rejected decomposition input."""


class InvalidPanel(PanelBuilderError):
    """The panel rectangle has a non-positive or non-finite dimension."""


class InvalidOpening(PanelBuilderError):
    """One or more openings are malformed or do not fit the panel.

    Every offending opening is collected in ``issues`` so the caller can
    report them all at once.
    """

    def __init__(self, issues: list[OpeningIssue]):
        self.issues = issues
        lines = [f"{len(issues)} invalid opening(s):"]
        lines.extend(f"  [{i.index}] {i.message}" for i in issues)
        super().__init__("\n".join(lines))


class DegenerateTile(RuntimeError):
    """The sweep produced a tile thinner than the tolerance.

    This is an internal bug, never a recoverable input problem.
    """
