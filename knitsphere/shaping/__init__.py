"""shaping — row deltas and per-row increase policies."""

from knitsphere.shaping.diff import IncreaseDiffEngine
from knitsphere.shaping.policy import plan_distributed, plan_shaping

__all__ = ["IncreaseDiffEngine", "plan_distributed", "plan_shaping"]
