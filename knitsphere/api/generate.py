"""
Public sphere pattern generation API.

generate_pattern() is the single entry point that takes a diameter and a
gauge and returns the pattern as an ordered list of row lines. It wires the
full pipeline: SphereSpec → SpherePatternOrchestrator → instruction lines.

pattern_from_inputs() does the same for raw user inputs, distinguishing
"nothing entered yet" (empty result) from "entered but invalid" (error).
"""

from __future__ import annotations

from knitsphere.api.inputs import SphereInputs
from knitsphere.config.settings import PatternSettings
from knitsphere.errors import InvalidInputError
from knitsphere.orchestrator.pipeline import SpherePatternOrchestrator
from knitsphere.schemas.sphere import SphereSpec


def generate_pattern(
    diameter: float | None,
    stitches_per_unit: float | None,
    rows_per_unit: float | None,
    settings: PatternSettings | None = None,
) -> list[str]:
    """
    Generate the row-by-row pattern for a knitted sphere.

    Parameters
    ----------
    diameter:
        Sphere diameter, in the same unit as the gauge.
    stitches_per_unit:
        Stitch gauge.
    rows_per_unit:
        Row gauge.
    settings:
        Seed and numbering; the packaged defaults if None.

    Returns
    -------
    list[str]
        Two lines per row-pair, from the cast-on at the pole to the equator.
        Empty if any input is None.

    Raises
    ------
    InvalidInputError
        If any input is not a finite positive number.
    DegenerateGeometryError
        If the sphere is too small for the gauge to cast on.
    """
    if diameter is None or stitches_per_unit is None or rows_per_unit is None:
        return []

    spec = SphereSpec(
        diameter=diameter,
        stitches_per_unit=stitches_per_unit,
        rows_per_unit=rows_per_unit,
    )
    return SpherePatternOrchestrator(settings).run(spec).lines


def pattern_from_inputs(
    inputs: SphereInputs,
    settings: PatternSettings | None = None,
) -> list[str]:
    """
    Generate a pattern from parsed user inputs.

    Returns an empty list while any input is MISSING; raises InvalidInputError
    if any entered input is INVALID.
    """
    problems = inputs.problems()
    if problems:
        raise InvalidInputError("; ".join(problems))
    if inputs.is_missing:
        return []
    return SpherePatternOrchestrator(settings).run(inputs.to_spec()).lines
