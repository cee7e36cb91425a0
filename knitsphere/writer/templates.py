"""
Row prose templates for the RowInstructionGenerator.

render_shaping converts a RowShaping into the text of its shaping row;
render_plain gives the companion plain row. Neither adds the ``Row N:``
prefix; numbering is the writer's job.
"""

from __future__ import annotations

from knitsphere.schemas.shaping import RowShaping, ShapingPolicy


def render_plain(stitch_count: int) -> str:
    """Render a plain knit row."""
    return f"k{stitch_count}"


def render_shaping(shaping: RowShaping) -> str:
    """Render the shaping row of a row-pair as pattern prose."""
    count = shaping.stitch_count
    inc = shaping.increase
    match shaping.policy:
        case ShapingPolicy.CAST_ON:
            return f"Cast on {count} stitches"
        case ShapingPolicy.UNIFORM_DOUBLING:
            return f"*k1, inc; rep from * to end (total of {inc} inc, {count} st total)"
        case ShapingPolicy.DISTRIBUTED:
            return (
                f"k{shaping.before_count}, inc, *k{shaping.block_size}, inc; "
                f"rep from * {shaping.blocks - 1} times, k{shaping.after_count} "
                f"(total of {inc} inc, {count} st total)"
            )
        case ShapingPolicy.SINGLE:
            return f"Knit, inc by total of 1 st for total of {count} st in row"
        case _:
            return render_plain(count)
