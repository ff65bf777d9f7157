"""Panel Builder: split walls and floors into solid tiles around their openings."""

__version__ = "0.1.0"
