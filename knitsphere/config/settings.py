"""
Pattern settings: loaded from YAML, validated once, then read-only.

The packaged defaults live in ``data/defaults.yaml``. A user file may
override any subset of keys; unknown keys and out-of-range values are
rejected at load time rather than surfacing mid-pipeline.

Call get_settings() for the cached packaged defaults, or load_settings(path)
to overlay a user file.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULTS_FILE = _DATA_DIR / "defaults.yaml"


class RowNumbering(str, Enum):
    """Row numbering scheme for the shaping/plain row pair."""

    SEQUENTIAL = "sequential"
    LEGACY = "legacy"


@dataclass(frozen=True)
class PatternSettings:
    """
    Tunable behaviour of a pattern run.

    Attributes:
        seed: Seed of the increase-placement random generator.
        row_numbering: SEQUENTIAL (default) or LEGACY numbering.
        default_units: Unit label used when the caller supplies none.
        warn_on_negative_increase: Log a warning for rows that shrink.
    """

    seed: int = 123
    row_numbering: RowNumbering = RowNumbering.SEQUENTIAL
    default_units: str = "in"
    warn_on_negative_increase: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not isinstance(self.row_numbering, RowNumbering):
            raise ValueError(f"row_numbering must be a RowNumbering, got {self.row_numbering!r}")
        if not isinstance(self.default_units, str) or not self.default_units.strip():
            raise ValueError(f"default_units must be a non-empty string, got {self.default_units!r}")
        if not isinstance(self.warn_on_negative_increase, bool):
            raise ValueError(
                f"warn_on_negative_increase must be a boolean, got {self.warn_on_negative_increase!r}"
            )


_KNOWN_KEYS = frozenset({"seed", "row_numbering", "default_units", "warn_on_negative_increase"})


def _load_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return data


def _apply(settings: PatternSettings, data: dict[str, Any], source: Path) -> PatternSettings:
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"{source}: unknown setting(s): {', '.join(sorted(unknown))}")

    overrides: dict[str, Any] = dict(data)
    if "row_numbering" in overrides:
        try:
            overrides["row_numbering"] = RowNumbering(overrides["row_numbering"])
        except ValueError:
            choices = ", ".join(m.value for m in RowNumbering)
            raise ValueError(
                f"{source}: row_numbering must be one of {choices}, "
                f"got {overrides['row_numbering']!r}"
            ) from None
    return replace(settings, **overrides)


def load_settings(path: Optional[Path | str] = None) -> PatternSettings:
    """
    Load the packaged defaults and overlay *path* if given.

    Parameters
    ----------
    path:
        Optional user YAML file. Keys it omits keep their default value.

    Returns
    -------
    PatternSettings
        The validated settings.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If a file is malformed, names an unknown key, or sets an invalid value.
    """
    settings = _apply(PatternSettings(), _load_yaml(_DEFAULTS_FILE), _DEFAULTS_FILE)
    if path is not None:
        user_path = Path(path)
        settings = _apply(settings, _load_yaml(user_path), user_path)
    return settings


_settings: PatternSettings = load_settings()


def get_settings() -> PatternSettings:
    """Return the module-level settings loaded from the packaged defaults."""
    return _settings
