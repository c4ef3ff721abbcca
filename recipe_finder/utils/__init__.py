"""Shared utilities for Recipe Finder."""

from .display import format_details, format_results, recipe_card, recipe_details

__all__ = [
    "format_details",
    "format_results",
    "recipe_card",
    "recipe_details",
]
