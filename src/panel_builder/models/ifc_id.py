"""Element identifiers.

Walls, floors and their openings carry IFC-compatible GlobalIds
(22-character compressed GUIDs) so hosted items can reference their
host and tiles can be traced back to the element they were cut from.
"""

from __future__ import annotations

import uuid

import ifcopenshell.guid


def generate_ifc_id() -> str:
    """Generate a new IFC-compatible GlobalId (22 characters)."""
    return ifcopenshell.guid.compress(uuid.uuid4().hex)


def is_valid_ifc_id(value: str) -> bool:
    """Check if a string is a valid 22-character IFC GlobalId."""
    return isinstance(value, str) and len(value) == 22
