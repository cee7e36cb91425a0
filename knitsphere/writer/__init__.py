"""writer — RowInstructionGenerator public API."""

from knitsphere.writer.writer import GeneratedRows, RowInstructionGenerator, row_numbers

__all__ = ["GeneratedRows", "RowInstructionGenerator", "row_numbers"]
