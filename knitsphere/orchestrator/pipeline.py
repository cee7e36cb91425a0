"""
SpherePatternOrchestrator — wires the full pipeline from SphereSpec to row prose.

Pipeline stages:

  1. RowGeometryModel.compute()          → RowPair per latitude step
  2. IncreaseDiffEngine.diff()           → RowDelta per row-pair
  3. RowInstructionGenerator.generate()  → RowShaping + Instruction per row-pair,
                                           using a random.Random seeded per run
  4. check_all()                         → ShapingCheckError on any accounting failure

Geometry failures surface as InvalidInputError or DegenerateGeometryError.
Nothing is retried: the same inputs and seed always give the same result.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from knitsphere.checker.accounting import CheckerResult, check_all
from knitsphere.config.settings import PatternSettings, get_settings
from knitsphere.errors import ShapingCheckError
from knitsphere.geometry.model import RowGeometryModel
from knitsphere.schemas.rows import Instruction, RowDelta, RowPair
from knitsphere.schemas.shaping import RowShaping
from knitsphere.schemas.sphere import SphereSpec
from knitsphere.shaping.diff import IncreaseDiffEngine
from knitsphere.writer.writer import RowInstructionGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrchestratorOutput:
    """Output of a successful pipeline run."""

    spec: SphereSpec
    rows: tuple[RowPair, ...]
    deltas: tuple[RowDelta, ...]
    shapings: tuple[RowShaping, ...]
    instructions: tuple[Instruction, ...]
    checker_result: CheckerResult

    @property
    def lines(self) -> list[str]:
        """The flat pattern: two lines per row-pair, in row order."""
        return [line for instruction in self.instructions for line in instruction.lines]


class SpherePatternOrchestrator:
    """
    Fully deterministic pipeline orchestrator.

    Parameters
    ----------
    settings:
        Seed, numbering and logging behaviour; the packaged defaults if None.
    """

    def __init__(self, settings: PatternSettings | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()

    def run(self, spec: SphereSpec) -> OrchestratorOutput:
        """Execute the full pipeline and return a completed :class:`OrchestratorOutput`.

        Raises
        ------
        InvalidInputError
            If the sphere geometry cannot be computed from *spec*.
        DegenerateGeometryError
            If the sphere is too small for the gauge to cast on.
        ShapingCheckError
            If any row fails the stitch accounting check.
        """
        logger.info(
            "generating sphere pattern: diameter=%s stitches_per_unit=%s rows_per_unit=%s",
            spec.diameter,
            spec.stitches_per_unit,
            spec.rows_per_unit,
        )

        # Stage 1: Geometry → RowPairs
        rows = RowGeometryModel().compute(spec)

        # Stage 2: Deltas between consecutive row-pairs
        deltas = IncreaseDiffEngine().diff(rows)

        # Stage 3: Shaping decisions and prose; one fresh generator per run
        rng = random.Random(self.settings.seed)
        generator = RowInstructionGenerator(
            numbering=self.settings.row_numbering,
            warn_on_negative_increase=self.settings.warn_on_negative_increase,
        )
        generated = generator.generate(deltas, rng)

        # Stage 4: Stitch accounting
        checker_result = check_all(generated.shapings)
        if not checker_result.passed:
            error_msgs = "; ".join(
                f"row-pair {e.row_index}: {e.message}" for e in checker_result.errors
            )
            raise ShapingCheckError(error_msgs)

        logger.info(
            "pattern ready: %d row-pairs, cast on %d, %d stitches at the equator",
            len(rows),
            rows[0].stitch_count,
            rows[-1].stitch_count,
        )
        return OrchestratorOutput(
            spec=spec,
            rows=rows,
            deltas=deltas,
            shapings=generated.shapings,
            instructions=generated.instructions,
            checker_result=checker_result,
        )
