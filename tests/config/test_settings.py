"""Tests for config.settings — YAML loading and validation."""

from __future__ import annotations

import pytest

from knitsphere.config.settings import (
    PatternSettings,
    RowNumbering,
    get_settings,
    load_settings,
)


class TestPackagedDefaults:
    def test_defaults(self):
        s = load_settings()
        assert s.seed == 123
        assert s.row_numbering is RowNumbering.SEQUENTIAL
        assert s.default_units == "in"
        assert s.warn_on_negative_increase is True

    def test_get_settings_matches_packaged_file(self):
        assert get_settings() == load_settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestUserOverrides:
    def test_partial_override(self, tmp_path):
        path = tmp_path / "knitsphere.yaml"
        path.write_text("seed: 7\ndefault_units: cm\n")
        s = load_settings(path)
        assert s.seed == 7
        assert s.default_units == "cm"
        assert s.row_numbering is RowNumbering.SEQUENTIAL

    def test_string_path(self, tmp_path):
        path = tmp_path / "knitsphere.yaml"
        path.write_text("row_numbering: legacy\n")
        assert load_settings(str(path)).row_numbering is RowNumbering.LEGACY

    def test_empty_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(path) == load_settings()

    def test_unknown_key_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("sead: 7\n")
        with pytest.raises(ValueError, match="unknown setting"):
            load_settings(path)

    def test_bad_numbering_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("row_numbering: backwards\n")
        with pytest.raises(ValueError, match="row_numbering must be one of"):
            load_settings(path)

    def test_non_integer_seed_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("seed: abc\n")
        with pytest.raises(ValueError, match="seed"):
            load_settings(path)

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- seed\n- 7\n")
        with pytest.raises(ValueError, match="mapping"):
            load_settings(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml")


class TestPatternSettings:
    def test_is_frozen(self):
        s = PatternSettings()
        with pytest.raises(AttributeError):
            s.seed = 1  # type: ignore[misc]

    def test_bool_seed_rejected(self):
        with pytest.raises(ValueError, match="seed"):
            PatternSettings(seed=True)

    def test_blank_units_rejected(self):
        with pytest.raises(ValueError, match="default_units"):
            PatternSettings(default_units="  ")

    def test_numbering_must_be_enum(self):
        with pytest.raises(ValueError, match="row_numbering"):
            PatternSettings(row_numbering="legacy")  # type: ignore[arg-type]
