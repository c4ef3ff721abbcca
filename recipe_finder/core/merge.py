"""Combine local and remote search results."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Recipe


def merge_results(local: Iterable[Recipe], remote: Iterable[Recipe]) -> list[Recipe]:
    """Local matches first, then remote recipes whose name is not taken yet.

    Names compare case-insensitively against everything already combined, so
    a remote recipe sharing a local recipe's name is dropped.
    """
    combined = list(local)
    for recipe in remote:
        name = recipe.name.lower()
        if any(existing.name.lower() == name for existing in combined):
            continue
        combined.append(recipe)
    return combined
