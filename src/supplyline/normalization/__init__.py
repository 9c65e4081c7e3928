"""Header normalization and column mapping."""

from supplyline.normalization.columns import map_columns

__all__ = ["map_columns"]
