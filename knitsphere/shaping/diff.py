"""
IncreaseDiffEngine — pairwise stitch-count differences between row-pairs.

The first row-pair has no predecessor and is marked as the cast-on
(``increase=None``). Every later row-pair carries ``count[i] - count[i-1]``
exactly as computed: no smoothing, clamping, or validation.
"""

from __future__ import annotations

from collections.abc import Sequence

from knitsphere.schemas.rows import RowDelta, RowPair


class IncreaseDiffEngine:
    """Stateless pairwise differencer."""

    def diff(self, rows: Sequence[RowPair]) -> tuple[RowDelta, ...]:
        """Return one RowDelta per RowPair, in the same order."""
        deltas: list[RowDelta] = []
        previous: RowPair | None = None
        for row in rows:
            increase = None if previous is None else row.stitch_count - previous.stitch_count
            deltas.append(RowDelta(row_pair=row, increase=increase))
            previous = row
        return tuple(deltas)
