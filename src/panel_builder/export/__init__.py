"""Export of tiled panels as box primitives."""
