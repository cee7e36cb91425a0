"""
RowGeometryModel — latitude rows of a hemisphere from pole to equator.

The quarter meridian (pole to equator) is converted to a physical row count
at the row gauge. Rows are worked two at a time (a shaping row and a plain
row), so the quarter circle is divided into N equal angular steps, one per
row-pair, with N = ceil(rows / 2). Each step's latitude circle gives a target
stitch count at the stitch gauge.

Because sin is increasing on (0, π/2] and rounding is monotone, the stitch
counts are non-decreasing in index.
"""

from __future__ import annotations

import logging
import math

from knitsphere.errors import DegenerateGeometryError, InvalidInputError
from knitsphere.schemas.rows import RowPair
from knitsphere.schemas.sphere import SphereSpec
from knitsphere.utilities.conversion import length_to_row_count, select_stitch_count

logger = logging.getLogger(__name__)


def row_pair_count(spec: SphereSpec) -> int:
    """
    Number of row-pairs N between the pole and the equator.

    Raises InvalidInputError if the row estimate is not finite (e.g. an
    overflowing diameter). N is clamped to at least 1.
    """
    quarter_arc = 2.0 * math.pi * spec.radius / 4.0
    rough_rows = length_to_row_count(quarter_arc, spec.gauge)
    if not math.isfinite(rough_rows):
        raise InvalidInputError(
            f"row estimate is not finite for diameter={spec.diameter}, "
            f"rows_per_unit={spec.rows_per_unit}"
        )
    return max(1, math.ceil(rough_rows / 2.0))


class RowGeometryModel:
    """Computes the RowPair sequence for a sphere. Stateless."""

    def compute(self, spec: SphereSpec) -> tuple[RowPair, ...]:
        """
        Return one RowPair per latitude step, index 1 (pole) to N (equator).

        Raises
        ------
        InvalidInputError
            If the geometry produces a non-finite row estimate.
        DegenerateGeometryError
            If the first latitude circle rounds to zero stitches.
        """
        r = spec.radius
        n = row_pair_count(spec)
        step_angle = (math.pi / 2.0) / n

        rows: list[RowPair] = []
        for index in range(1, n + 1):
            angle = index * step_angle
            # Equator radius is exactly r.
            radius = r if index == n else r * math.sin(angle)
            circumference = 2.0 * math.pi * radius
            stitch_count = select_stitch_count(circumference, spec.gauge)
            rows.append(
                RowPair(
                    index=index,
                    angle=angle,
                    radius=radius,
                    circumference=circumference,
                    stitch_count=stitch_count,
                )
            )

        if rows[0].stitch_count < 1:
            raise DegenerateGeometryError(
                f"first row rounds to {rows[0].stitch_count} stitches "
                f"(circumference {rows[0].circumference:.4g} at "
                f"{spec.stitches_per_unit} stitches per unit); sphere too small for gauge"
            )

        logger.debug(
            "geometry: diameter=%s row_pairs=%d stitch_counts=%s",
            spec.diameter,
            n,
            [row.stitch_count for row in rows],
        )
        return tuple(rows)
