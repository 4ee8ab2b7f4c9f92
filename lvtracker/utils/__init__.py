"""Utility modules for lv-stock-tracker."""

from .json_navigator import MISSING, find_index, find_value, is_missing, walk

__all__ = ["MISSING", "find_index", "find_value", "is_missing", "walk"]
