"""geometry — RowGeometryModel public API."""

from knitsphere.geometry.model import RowGeometryModel, row_pair_count

__all__ = ["RowGeometryModel", "row_pair_count"]
