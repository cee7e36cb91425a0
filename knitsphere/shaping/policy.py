"""
Shaping policy selection: turn a RowDelta into a RowShaping.

Policies, in priority order, for a row-pair after the cast-on:

  1. UNIFORM_DOUBLING — increase equals the base stitch count, so every base
     stitch gets one increase (``*k1, inc`` across the row).
  2. DISTRIBUTED      — more than one increase: the base stitches are split
     into ``increase + 1`` equal blocks with an increase between each, and
     the leftover stitches are shared between the two ends of the row.
  3. SINGLE           — exactly one increase, placement left to the knitter.
  4. NO_INCREASE      — zero or negative change; the row is knit plain.

For DISTRIBUTED rows the split between the start and end of the row is drawn
from the supplied random generator so increases do not stack into a visible
line across rows. The generator is consumed once per DISTRIBUTED row only.
"""

from __future__ import annotations

import logging
import random

from knitsphere.schemas.rows import RowDelta
from knitsphere.schemas.shaping import RowShaping, ShapingPolicy

logger = logging.getLogger(__name__)


def plan_distributed(row_index: int, increase: int, count: int, rng: random.Random) -> RowShaping:
    """
    Lay out *increase* evenly spaced increases over a row ending at *count* stitches.

    Requires ``increase > 1`` and at least one base stitch (``count > increase``).
    """
    if increase < 2:
        raise ValueError(f"distributed shaping needs at least 2 increases, got {increase}")
    base = count - increase
    if base < 1:
        raise ValueError(
            f"row {row_index}: distributed shaping needs base stitches, "
            f"got {increase} increases for {count} stitches"
        )

    blocks = increase + 1
    block_size = base // blocks
    # Floor division leaves 0 <= remainder < blocks base stitches unplaced.
    remainder = count - (blocks * block_size + increase)
    span = remainder + block_size
    before_count = rng.randrange(span)
    after_count = span - before_count - 1

    shaping = RowShaping(
        policy=ShapingPolicy.DISTRIBUTED,
        row_index=row_index,
        increase=increase,
        stitch_count=count,
        blocks=blocks,
        block_size=block_size,
        remainder=remainder,
        before_count=before_count,
        after_count=after_count,
    )
    logger.debug(
        "row %d: block_size=%d rem=%d before=%d after=%d blocks=%d count=%d sum=%d",
        row_index,
        block_size,
        remainder,
        before_count,
        after_count,
        blocks,
        count,
        shaping.accounted_stitch_count,
    )
    return shaping


def plan_shaping(delta: RowDelta, rng: random.Random) -> RowShaping:
    """
    Select the shaping policy for *delta* and compute its numeric fields.

    Parameters
    ----------
    delta:
        The row-pair and its increase (None for the cast-on).
    rng:
        Placement generator; drawn from only for DISTRIBUTED rows.

    Returns
    -------
    RowShaping
        Policy tag plus every number the row needs.
    """
    row = delta.row_pair
    count = row.stitch_count
    inc = delta.increase

    if inc is None:
        return RowShaping(
            policy=ShapingPolicy.CAST_ON,
            row_index=row.index,
            increase=0,
            stitch_count=count,
        )
    if inc > 0 and inc * 2 == count:
        return RowShaping(
            policy=ShapingPolicy.UNIFORM_DOUBLING,
            row_index=row.index,
            increase=inc,
            stitch_count=count,
        )
    if inc > 1:
        return plan_distributed(row.index, inc, count, rng)
    if inc == 1:
        return RowShaping(
            policy=ShapingPolicy.SINGLE,
            row_index=row.index,
            increase=inc,
            stitch_count=count,
        )
    return RowShaping(
        policy=ShapingPolicy.NO_INCREASE,
        row_index=row.index,
        increase=inc,
        stitch_count=count,
    )
