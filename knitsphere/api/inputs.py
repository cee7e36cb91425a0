"""
Input boundary: raw user text to validated quantities.

Each of the three numeric inputs is in exactly one state:

  MISSING — nothing entered yet (None, empty or whitespace-only text)
  INVALID — something entered that is not a finite positive number
  VALID   — a usable value

A pattern is produced only when all three are VALID. Any MISSING input means
there is nothing to show yet; an INVALID input is reported explicitly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from knitsphere.errors import InvalidInputError
from knitsphere.schemas.sphere import SphereSpec


class QuantityState(str, Enum):
    """Parse state of a single numeric input."""

    MISSING = "missing"
    INVALID = "invalid"
    VALID = "valid"


@dataclass(frozen=True)
class Quantity:
    """
    A parsed numeric input.

    Attributes:
        state: MISSING, INVALID, or VALID.
        value: The parsed number; set only when VALID.
        raw: The text as entered, for echoing back in messages.
    """

    state: QuantityState
    value: float | None = None
    raw: str = ""

    def __post_init__(self) -> None:
        if (self.state == QuantityState.VALID) != (self.value is not None):
            raise ValueError(
                f"value must be set iff state is VALID, got {self.state.value} / {self.value}"
            )

    @property
    def is_valid(self) -> bool:
        return self.state == QuantityState.VALID


def parse_quantity(text: str | None) -> Quantity:
    """Parse a user-entered number into a Quantity."""
    if text is None or not text.strip():
        return Quantity(QuantityState.MISSING, raw=text or "")
    try:
        value = float(text.strip())
    except ValueError:
        return Quantity(QuantityState.INVALID, raw=text)
    if not math.isfinite(value) or value <= 0:
        return Quantity(QuantityState.INVALID, raw=text)
    return Quantity(QuantityState.VALID, value=value, raw=text)


@dataclass(frozen=True)
class SphereInputs:
    """The three numeric inputs plus the display-only unit label."""

    diameter: Quantity
    stitches_per_unit: Quantity
    rows_per_unit: Quantity
    units: str = "in"

    @classmethod
    def from_text(
        cls,
        diameter: str | None,
        stitches_per_unit: str | None,
        rows_per_unit: str | None,
        units: str = "in",
    ) -> SphereInputs:
        return cls(
            diameter=parse_quantity(diameter),
            stitches_per_unit=parse_quantity(stitches_per_unit),
            rows_per_unit=parse_quantity(rows_per_unit),
            units=units,
        )

    def _fields(self) -> tuple[tuple[str, Quantity], ...]:
        return (
            ("diameter", self.diameter),
            ("stitches_per_unit", self.stitches_per_unit),
            ("rows_per_unit", self.rows_per_unit),
        )

    @property
    def is_missing(self) -> bool:
        """True if any input has not been entered yet."""
        return any(q.state == QuantityState.MISSING for _, q in self._fields())

    @property
    def is_ready(self) -> bool:
        """True if all three inputs are VALID."""
        return all(q.is_valid for _, q in self._fields())

    def problems(self) -> list[str]:
        """Human-readable messages for every INVALID input."""
        return [
            f"{name} must be a positive number, got {q.raw!r}"
            for name, q in self._fields()
            if q.state == QuantityState.INVALID
        ]

    def to_spec(self) -> SphereSpec:
        """
        Build the SphereSpec.

        Raises InvalidInputError if any input is MISSING or INVALID.
        """
        if not self.is_ready:
            missing = [name for name, q in self._fields() if q.state == QuantityState.MISSING]
            detail = self.problems() + [f"{name} is missing" for name in missing]
            raise InvalidInputError("; ".join(detail))
        return SphereSpec(
            diameter=self.diameter.value,  # type: ignore[arg-type]
            stitches_per_unit=self.stitches_per_unit.value,  # type: ignore[arg-type]
            rows_per_unit=self.rows_per_unit.value,  # type: ignore[arg-type]
        )
