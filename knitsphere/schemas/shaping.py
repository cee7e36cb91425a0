"""
Structured shaping decision for a single row-pair.

A RowShaping records which increase policy applies to a row and every number
needed to work it. The Writer renders it to prose; the accounting checker
verifies it without parsing any text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ShapingPolicy(str, Enum):
    """How the shaping row of a row-pair is worked."""

    CAST_ON = "cast_on"
    UNIFORM_DOUBLING = "uniform_doubling"
    DISTRIBUTED = "distributed"
    SINGLE = "single"
    NO_INCREASE = "no_increase"


@dataclass(frozen=True)
class RowShaping:
    """
    Policy tag and numeric fields for one shaping row.

    Attributes:
        policy: Which of the shaping policies applies.
        row_index: Row-pair index (1 = cast-on).
        increase: Stitches added on this row; 0 for the cast-on, may be
            negative for NO_INCREASE when rounding shrinks a row.
        stitch_count: Stitch count after this row.
        blocks: DISTRIBUTED only: number of base-stitch groups (increase + 1).
        block_size: DISTRIBUTED only: base stitches per full group.
        remainder: DISTRIBUTED only: leftover base stitches split between
            the row's ends.
        before_count: DISTRIBUTED only: stitches knit before the first increase.
        after_count: DISTRIBUTED only: stitches knit after the last group.
    """

    policy: ShapingPolicy
    row_index: int
    increase: int
    stitch_count: int
    blocks: int = 0
    block_size: int = 0
    remainder: int = 0
    before_count: int = 0
    after_count: int = 0

    @property
    def base_stitch_count(self) -> int:
        """Stitches on the needles before this row is worked."""
        if self.policy == ShapingPolicy.CAST_ON:
            return 0
        return self.stitch_count - self.increase

    @property
    def accounted_stitch_count(self) -> int:
        """Stitch total implied by the DISTRIBUTED row layout.

        before + the first increase + (block + increase) repeated
        ``blocks - 1`` times + after.
        """
        return (
            self.before_count
            + 1
            + (self.block_size + 1) * (self.blocks - 1)
            + self.after_count
        )
