"""Validation for decomposition input and output.

- panel: panel/opening preconditions, checked before the sweep
- panel.check_partition: coverage, overlap and containment of a finished tiling
"""
