"""
Stitch accounting checker — public API.

Exposed names
-------------
check_all      -- check a full RowShaping sequence, including row continuity
check_shaping  -- check the internal consistency of a single row
CheckerResult  -- aggregate result (passed: bool, errors: tuple[CheckerError, ...])
CheckerError   -- a single failure (row_index, message)
"""

from knitsphere.checker.accounting import CheckerError, CheckerResult, check_all, check_shaping

__all__ = ["check_all", "check_shaping", "CheckerResult", "CheckerError"]
