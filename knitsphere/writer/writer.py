"""
RowInstructionGenerator — converts RowDeltas into numbered row prose.

Pipeline (for each row-pair in increasing index order):
  1. plan_shaping() picks the shaping policy and its numbers (drawing from
     the placement generator for distributed rows only).
  2. The shaping row and its companion plain row are rendered via templates.
  3. Both rows are numbered according to the configured RowNumbering.

The placement generator is an explicit argument: identical deltas and an
identically seeded generator always produce identical instructions.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from knitsphere.config.settings import RowNumbering
from knitsphere.schemas.rows import Instruction, RowDelta
from knitsphere.schemas.shaping import RowShaping
from knitsphere.shaping.policy import plan_shaping
from knitsphere.writer.templates import render_plain, render_shaping

logger = logging.getLogger(__name__)


def row_numbers(index: int, numbering: RowNumbering) -> tuple[int, int]:
    """
    Return (shaping_row, plain_row) numbers for row-pair *index*.

    SEQUENTIAL numbers row-pair n as rows 2n-1 and 2n. LEGACY keeps the
    cast-on pair as rows 1 and 2 but numbers later pairs 2n-1 and 2n-2,
    so row 2 appears twice and each plain row precedes its shaping row.
    """
    if index == 1 or numbering == RowNumbering.SEQUENTIAL:
        return 2 * index - 1, 2 * index
    return 2 * index - 1, 2 * index - 2


@dataclass(frozen=True)
class GeneratedRows:
    """Output of a generator run: the per-row decisions and their prose."""

    shapings: tuple[RowShaping, ...]
    instructions: tuple[Instruction, ...]

    @property
    def lines(self) -> list[str]:
        """All instruction lines in order, two per row-pair."""
        return [line for instruction in self.instructions for line in instruction.lines]


class RowInstructionGenerator:
    """
    Deterministic row writer.

    Parameters
    ----------
    numbering:
        Row numbering scheme; SEQUENTIAL by default.
    warn_on_negative_increase:
        Log a warning when a row-pair has fewer stitches than the one before.
    """

    def __init__(
        self,
        numbering: RowNumbering = RowNumbering.SEQUENTIAL,
        warn_on_negative_increase: bool = True,
    ) -> None:
        self.numbering = numbering
        self.warn_on_negative_increase = warn_on_negative_increase

    def plan(self, deltas: Iterable[RowDelta], rng: random.Random) -> tuple[RowShaping, ...]:
        """Return the RowShaping for every delta, consuming *rng* in index order."""
        shapings: list[RowShaping] = []
        for delta in sorted(deltas, key=lambda d: d.row_pair.index):
            if (
                self.warn_on_negative_increase
                and delta.increase is not None
                and delta.increase < 0
            ):
                logger.warning(
                    "row-pair %d shrinks by %d stitches after rounding; knitting it plain",
                    delta.row_pair.index,
                    -delta.increase,
                )
            shapings.append(plan_shaping(delta, rng))
        return tuple(shapings)

    def render(
        self, deltas: Sequence[RowDelta], shapings: Sequence[RowShaping]
    ) -> tuple[Instruction, ...]:
        """Render already-planned rows. *deltas* and *shapings* must align by index."""
        instructions: list[Instruction] = []
        for delta, shaping in zip(deltas, shapings, strict=True):
            shaping_row, plain_row = row_numbers(shaping.row_index, self.numbering)
            instructions.append(
                Instruction(
                    row_pair=delta.row_pair,
                    shaping_row=shaping_row,
                    shaping_text=render_shaping(shaping),
                    plain_row=plain_row,
                    plain_text=render_plain(shaping.stitch_count),
                )
            )
        return tuple(instructions)

    def generate(self, deltas: Sequence[RowDelta], rng: random.Random) -> GeneratedRows:
        """
        Plan and render every row-pair.

        Parameters
        ----------
        deltas:
            RowDeltas for one pattern; processed in increasing index order.
        rng:
            Placement generator, seeded by the caller.

        Returns
        -------
        GeneratedRows
            The structured decisions and the numbered instructions.
        """
        ordered = sorted(deltas, key=lambda d: d.row_pair.index)
        shapings = self.plan(ordered, rng)
        return GeneratedRows(shapings=shapings, instructions=self.render(ordered, shapings))
