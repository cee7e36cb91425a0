"""
Shared utilities for the knitsphere pattern generator.

Provides the gauge value type and the length-to-count conversions used by
the geometry model.
"""

from .conversion import length_to_row_count, length_to_stitch_count, select_stitch_count
from .types import Gauge, require_positive

__all__ = [
    # types
    "Gauge",
    "require_positive",
    # conversion
    "length_to_stitch_count",
    "length_to_row_count",
    "select_stitch_count",
]
