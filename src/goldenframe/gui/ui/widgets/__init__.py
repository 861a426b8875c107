"""Reusable widgets for the goldenframe window."""

from .drop_area import DropArea

__all__ = ["DropArea"]
