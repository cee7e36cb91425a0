"""
Structured failures raised by the pattern pipeline.

Every failure is a PatternError carrying a machine-readable ``kind`` and a
human-readable ``detail``, so a presentation layer can show "no pattern yet"
instead of malformed text.
"""

from __future__ import annotations


class PatternError(Exception):
    """Raised when a pattern cannot be produced.

    Attributes:
        kind: Failure category (``"invalid_input"``, ``"degenerate_geometry"``,
            or ``"checker"``).
        detail: Human-readable description of the failure.
    """

    def __init__(self, kind: str, detail: str) -> None:
        super().__init__(f"[{kind}] {detail}")
        self.kind = kind
        self.detail = detail


class InvalidInputError(PatternError, ValueError):
    """A diameter or gauge value is absent, non-numeric, non-finite, or not positive."""

    def __init__(self, detail: str) -> None:
        super().__init__("invalid_input", detail)


class DegenerateGeometryError(PatternError):
    """The sphere is too small for the gauge to produce a workable cast-on."""

    def __init__(self, detail: str) -> None:
        super().__init__("degenerate_geometry", detail)


class ShapingCheckError(PatternError):
    """A computed row failed the stitch accounting check."""

    def __init__(self, detail: str) -> None:
        super().__init__("checker", detail)
