"""Bundled recipe dataset and substring matching against it."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import Recipe

logger = logging.getLogger(__name__)

BUNDLED_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "recipes.json"


def load_local_recipes(path: Path | None = None) -> list[dict]:
    """Load the local dataset, degrading to an empty list on any problem."""
    data_path = path or BUNDLED_DATA_PATH
    try:
        raw = json.loads(data_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not load local recipes from %s: %s", data_path, exc)
        return []

    if not isinstance(raw, list):
        logger.warning("Local recipe file %s does not hold a list", data_path)
        return []

    records = [item for item in raw if isinstance(item, dict)]
    logger.info("Local recipes loaded: %d", len(records))
    return records


def _matches(record: dict, term: str) -> bool:
    name = record.get("name")
    if not isinstance(name, str):
        return False
    if term in name.lower():
        return True
    ingredients = record.get("ingredients") or []
    return any(term in str(ingredient).lower() for ingredient in ingredients)


def match_local(query: str | None, records: list[dict]) -> list[Recipe]:
    """Return local recipes whose name or any ingredient contains ``query``.

    Matching is case-insensitive; a blank query matches nothing.
    """
    term = (query or "").strip().lower()
    if not term:
        return []
    return [Recipe.from_local(record) for record in records if _matches(record, term)]


def local_suggestions(records: list[dict], limit: int) -> list[Recipe]:
    """First ``limit`` local recipes, used when the remote API has nothing."""
    return [
        Recipe.from_local(record)
        for record in records[:limit]
        if isinstance(record.get("name"), str)
    ]
