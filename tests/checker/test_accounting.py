"""Tests for checker.accounting — check_shaping and check_all."""

from __future__ import annotations

from dataclasses import replace

from knitsphere.checker.accounting import CheckerError, CheckerResult, check_all, check_shaping
from knitsphere.schemas.shaping import RowShaping, ShapingPolicy

# ── Shared rows (reference sphere, seed-independent layout) ────────────────────

_CAST_ON = RowShaping(ShapingPolicy.CAST_ON, row_index=1, increase=0, stitch_count=10)
_ROW_2 = RowShaping(
    ShapingPolicy.DISTRIBUTED,
    row_index=2,
    increase=8,
    stitch_count=18,
    blocks=9,
    block_size=1,
    remainder=1,
    before_count=0,
    after_count=1,
)
_ROW_3 = RowShaping(
    ShapingPolicy.DISTRIBUTED,
    row_index=3,
    increase=5,
    stitch_count=23,
    blocks=6,
    block_size=3,
    remainder=0,
    before_count=2,
    after_count=0,
)
_ROW_4 = RowShaping(
    ShapingPolicy.DISTRIBUTED,
    row_index=4,
    increase=2,
    stitch_count=25,
    blocks=3,
    block_size=7,
    remainder=2,
    before_count=4,
    after_count=4,
)


class TestCheckShaping:
    def test_valid_rows_pass(self):
        for row in (_CAST_ON, _ROW_2, _ROW_3, _ROW_4):
            assert check_shaping(row) == ()

    def test_zero_cast_on_fails(self):
        errors = check_shaping(replace(_CAST_ON, stitch_count=0))
        assert len(errors) == 1
        assert "cast-on" in errors[0].message

    def test_bad_accounting_fails(self):
        errors = check_shaping(replace(_ROW_4, after_count=5))
        assert any("totals 26 stitches, expected 25" in e.message for e in errors)

    def test_before_out_of_range_fails(self):
        errors = check_shaping(replace(_ROW_4, before_count=9, after_count=-1))
        messages = " ".join(e.message for e in errors)
        assert "before_count" in messages
        assert "after_count" in messages

    def test_wrong_block_count_fails(self):
        errors = check_shaping(replace(_ROW_2, blocks=8))
        assert any("blocks" in e.message for e in errors)

    def test_uniform_doubling(self):
        good = RowShaping(ShapingPolicy.UNIFORM_DOUBLING, row_index=2, increase=6, stitch_count=12)
        assert check_shaping(good) == ()
        bad = replace(good, stitch_count=13)
        assert len(check_shaping(bad)) == 1

    def test_single(self):
        good = RowShaping(ShapingPolicy.SINGLE, row_index=5, increase=1, stitch_count=26)
        assert check_shaping(good) == ()
        assert len(check_shaping(replace(good, increase=2))) == 1

    def test_no_increase_allows_negative(self):
        row = RowShaping(ShapingPolicy.NO_INCREASE, row_index=5, increase=-1, stitch_count=24)
        assert check_shaping(row) == ()

    def test_no_increase_rejects_positive(self):
        row = RowShaping(ShapingPolicy.NO_INCREASE, row_index=5, increase=2, stitch_count=27)
        assert len(check_shaping(row)) == 1

    def test_errors_carry_row_index(self):
        errors = check_shaping(replace(_ROW_3, after_count=3))
        assert all(e.row_index == 3 for e in errors)


class TestCheckAll:
    def test_reference_pattern_passes(self):
        result = check_all([_CAST_ON, _ROW_2, _ROW_3, _ROW_4])
        assert result == CheckerResult(passed=True, errors=())

    def test_missing_cast_on_fails(self):
        result = check_all([_ROW_2, _ROW_3])
        assert not result.passed
        assert CheckerError(2, "pattern does not start with a cast-on") in result.errors

    def test_discontinuity_fails(self):
        """Skipping row 3 leaves row 4 starting from 23 stitches after an 18-stitch row."""
        result = check_all([_CAST_ON, _ROW_2, _ROW_4])
        assert not result.passed
        assert result.errors[0].row_index == 4
        assert "previous row ends with 18" in result.errors[0].message

    def test_collects_every_error(self):
        result = check_all([replace(_CAST_ON, stitch_count=0), replace(_ROW_2, after_count=9)])
        assert len(result.errors) >= 3

    def test_empty_pattern_passes(self):
        assert check_all([]).passed
