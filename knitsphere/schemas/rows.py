"""
Row-level records produced by the pattern pipeline.

RowPair is one latitude step of the hemisphere (a shaping row followed by a
plain row). RowDelta attaches the increase needed to reach that row-pair from
the previous one. Instruction is the rendered text for one row-pair.

All records are frozen; each pipeline run creates fresh instances.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RowPair:
    """
    One latitude circle of the sphere.

    Attributes:
        index: 1 nearest the pole, N at the equator.
        angle: Latitude angle from the pole in radians, in (0, π/2].
        radius: Radius of the latitude circle.
        circumference: Circumference of the latitude circle.
        stitch_count: Target stitch count, rounded to the nearest integer.
    """

    index: int
    angle: float
    radius: float
    circumference: float
    stitch_count: int

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError(f"index must be >= 1, got {self.index}")
        if self.stitch_count < 0:
            raise ValueError(f"stitch_count cannot be negative, got {self.stitch_count}")


@dataclass(frozen=True)
class RowDelta:
    """
    Stitch-count change from the previous row-pair.

    ``increase`` is None for the cast-on row-pair (index 1) and the raw
    difference of rounded stitch counts otherwise; it may be zero or negative.
    """

    row_pair: RowPair
    increase: int | None

    @property
    def is_cast_on(self) -> bool:
        return self.increase is None

    @property
    def base_stitch_count(self) -> int:
        """Stitch count before this row-pair's increases are worked."""
        if self.increase is None:
            return 0
        return self.row_pair.stitch_count - self.increase


@dataclass(frozen=True)
class Instruction:
    """
    Rendered instructions for one row-pair.

    Attributes:
        row_pair: The latitude step these rows knit.
        shaping_row: Row number of the cast-on or increase row.
        shaping_text: Cast-on or increase row prose, without the row prefix.
        plain_row: Row number of the following plain row.
        plain_text: Plain row prose, without the row prefix.
    """

    row_pair: RowPair
    shaping_row: int
    shaping_text: str
    plain_row: int
    plain_text: str

    @property
    def lines(self) -> tuple[str, str]:
        return (
            f"Row {self.shaping_row}: {self.shaping_text}",
            f"Row {self.plain_row}: {self.plain_text}",
        )
