"""
Conversion between physical lengths and stitch/row counts.

Lengths are in whatever unit the gauge is expressed in. All functions are
pure: no side effects, no state.
"""

from __future__ import annotations

from .types import Gauge


def length_to_stitch_count(length: float, gauge: Gauge) -> float:
    """Convert a length to a raw (non-integer) stitch count."""
    return length * gauge.stitches_per_unit


def length_to_row_count(length: float, gauge: Gauge) -> float:
    """Convert a length to a raw (non-integer) row count."""
    return length * gauge.rows_per_unit


def select_stitch_count(length: float, gauge: Gauge) -> int:
    """Convert a length to the nearest whole stitch count.

    Uses Python's ``round`` (half-to-even) so every row of a pattern is
    rounded the same way.
    """
    return round(length_to_stitch_count(length, gauge))
