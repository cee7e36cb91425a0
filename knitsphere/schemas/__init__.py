"""schemas — immutable records exchanged between pipeline stages."""

from knitsphere.schemas.rows import Instruction, RowDelta, RowPair
from knitsphere.schemas.shaping import RowShaping, ShapingPolicy
from knitsphere.schemas.sphere import SphereSpec

__all__ = [
    "SphereSpec",
    "RowPair",
    "RowDelta",
    "Instruction",
    "RowShaping",
    "ShapingPolicy",
]
