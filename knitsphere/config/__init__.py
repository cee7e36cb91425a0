from .settings import PatternSettings, RowNumbering, get_settings, load_settings

__all__ = [
    "PatternSettings",
    "RowNumbering",
    "get_settings",
    "load_settings",
]
