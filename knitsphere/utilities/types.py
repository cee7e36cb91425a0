"""
Core type definitions for the shared utilities layer.

All types are frozen dataclasses with fail-fast validation in __post_init__.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from knitsphere.errors import InvalidInputError


def require_positive(name: str, value: object) -> float:
    """
    Return *value* as a float, or raise InvalidInputError.

    Accepts ints and floats (not bools) that are finite and strictly positive.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")
    return float(value)


@dataclass(frozen=True)
class Gauge:
    """
    Knitting gauge: stitch and row density per unit of length.

    The unit is whatever the sphere diameter is measured in; both values must
    be finite and strictly positive. Gauges are immutable after construction
    and safe to share across modules.
    """

    stitches_per_unit: float
    rows_per_unit: float

    def __post_init__(self) -> None:
        require_positive("stitches_per_unit", self.stitches_per_unit)
        require_positive("rows_per_unit", self.rows_per_unit)
