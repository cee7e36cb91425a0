"""
SphereSpec — the immutable input to one pattern computation.

Units are implicit: diameter and gauge must be expressed in the same unit of
length, whichever it is.
"""

from __future__ import annotations

from dataclasses import dataclass

from knitsphere.utilities.types import Gauge, require_positive


@dataclass(frozen=True)
class SphereSpec:
    """
    Sphere diameter and knitting gauge.

    Attributes:
        diameter: Sphere diameter, finite and > 0.
        stitches_per_unit: Stitch gauge, finite and > 0.
        rows_per_unit: Row gauge, finite and > 0.

    Raises InvalidInputError from __post_init__ if any value is out of range.
    """

    diameter: float
    stitches_per_unit: float
    rows_per_unit: float

    def __post_init__(self) -> None:
        require_positive("diameter", self.diameter)
        require_positive("stitches_per_unit", self.stitches_per_unit)
        require_positive("rows_per_unit", self.rows_per_unit)

    @property
    def radius(self) -> float:
        return self.diameter / 2.0

    @property
    def gauge(self) -> Gauge:
        return Gauge(
            stitches_per_unit=self.stitches_per_unit,
            rows_per_unit=self.rows_per_unit,
        )
