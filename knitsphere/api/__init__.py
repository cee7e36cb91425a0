"""api — public entry points for pattern generation."""

from knitsphere.api.generate import generate_pattern, pattern_from_inputs
from knitsphere.api.inputs import Quantity, QuantityState, SphereInputs, parse_quantity

__all__ = [
    "generate_pattern",
    "pattern_from_inputs",
    "Quantity",
    "QuantityState",
    "SphereInputs",
    "parse_quantity",
]
