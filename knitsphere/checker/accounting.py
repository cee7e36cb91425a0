"""
Stitch accounting checker for RowShaping sequences.

check_shaping verifies one row's numbers are self-consistent for its policy;
check_all also verifies that each row starts from the previous row's count.
Both return results rather than raising so the caller can collect every
failure before reporting.

Per-policy rules:
  - CAST_ON:          at least one stitch is cast on.
  - UNIFORM_DOUBLING: base stitches == increases.
  - DISTRIBUTED:      blocks == increase + 1, 0 <= remainder < blocks,
                      0 <= before < remainder + block_size, after >= 0, and
                      before + 1 + (block_size + 1)(blocks - 1) + after == count.
  - SINGLE:           increase == 1.
  - NO_INCREASE:      increase <= 0.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from knitsphere.schemas.shaping import RowShaping, ShapingPolicy


@dataclass(frozen=True)
class CheckerError:
    """A single accounting failure."""

    row_index: int
    message: str


@dataclass(frozen=True)
class CheckerResult:
    """Outcome of checking a whole pattern."""

    passed: bool
    errors: tuple[CheckerError, ...]


def _distributed_errors(s: RowShaping) -> list[str]:
    problems: list[str] = []
    if s.blocks != s.increase + 1:
        problems.append(f"blocks ({s.blocks}) != increase + 1 ({s.increase + 1})")
    if not 0 <= s.remainder < s.blocks:
        problems.append(f"remainder ({s.remainder}) outside [0, {s.blocks})")
    if not 0 <= s.before_count < s.remainder + s.block_size:
        problems.append(
            f"before_count ({s.before_count}) outside [0, {s.remainder + s.block_size})"
        )
    if s.after_count < 0:
        problems.append(f"after_count cannot be negative, got {s.after_count}")
    if s.accounted_stitch_count != s.stitch_count:
        problems.append(
            f"row layout totals {s.accounted_stitch_count} stitches, "
            f"expected {s.stitch_count}"
        )
    return problems


def check_shaping(shaping: RowShaping) -> tuple[CheckerError, ...]:
    """Return every accounting error in a single row (empty if consistent)."""
    problems: list[str] = []
    match shaping.policy:
        case ShapingPolicy.CAST_ON:
            if shaping.stitch_count < 1:
                problems.append(f"cast-on needs at least 1 stitch, got {shaping.stitch_count}")
        case ShapingPolicy.UNIFORM_DOUBLING:
            if shaping.base_stitch_count != shaping.increase:
                problems.append(
                    f"uniform doubling needs base ({shaping.base_stitch_count}) "
                    f"== increase ({shaping.increase})"
                )
        case ShapingPolicy.DISTRIBUTED:
            problems.extend(_distributed_errors(shaping))
        case ShapingPolicy.SINGLE:
            if shaping.increase != 1:
                problems.append(f"single increase row declares {shaping.increase} increases")
        case ShapingPolicy.NO_INCREASE:
            if shaping.increase > 0:
                problems.append(f"plain row declares {shaping.increase} increases")
    return tuple(CheckerError(row_index=shaping.row_index, message=p) for p in problems)


def check_all(shapings: Sequence[RowShaping]) -> CheckerResult:
    """
    Check every row and the continuity between consecutive rows.

    A row's base stitch count must equal the previous row's stitch count.
    """
    errors: list[CheckerError] = []
    previous: RowShaping | None = None
    for shaping in shapings:
        errors.extend(check_shaping(shaping))
        if previous is None:
            if shaping.policy != ShapingPolicy.CAST_ON:
                errors.append(
                    CheckerError(shaping.row_index, "pattern does not start with a cast-on")
                )
        elif shaping.base_stitch_count != previous.stitch_count:
            errors.append(
                CheckerError(
                    row_index=shaping.row_index,
                    message=(
                        f"row starts from {shaping.base_stitch_count} stitches but the "
                        f"previous row ends with {previous.stitch_count}"
                    ),
                )
            )
        previous = shaping
    return CheckerResult(passed=len(errors) == 0, errors=tuple(errors))
