"""Single-slot persistence of the recipe picked for the details view."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from .models import Recipe

logger = logging.getLogger(__name__)

SELECTION_KEY = "selectedRecipe"
SELECTION_FILENAME = "selected_recipe.json"
HOME_ENV_VAR = "RECIPE_FINDER_HOME"


def _home_candidates() -> list[Path]:
    candidates = []
    configured = os.environ.get(HOME_ENV_VAR)
    if configured:
        candidates.append(Path(configured).expanduser())
    candidates.append(Path.home() / ".recipe-finder")
    return candidates


def finder_home() -> Path:
    """Directory holding persisted finder state.

    ``RECIPE_FINDER_HOME`` wins when it is usable, then ``~/.recipe-finder``.
    Sandboxed environments without a writable home get a temp directory.
    """
    for candidate in _home_candidates():
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.debug("Skipping state directory %s: %s", candidate, exc)
            continue
        if os.access(candidate, os.W_OK):
            return candidate

    fallback = Path(tempfile.gettempdir()) / "recipe-finder"
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


class SelectionStore:
    """Holds one JSON-serialized recipe under a fixed key."""

    def __init__(self, path: Path | None = None):
        self.path = path or finder_home() / SELECTION_FILENAME
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def save(self, recipe: Recipe) -> None:
        """Replace the stored selection."""
        payload = {SELECTION_KEY: recipe.to_dict()}
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    def load(self) -> Recipe | None:
        """Return the stored selection, or None when absent or unreadable."""
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable selection file %s: %s", self.path, exc)
            return None

        if not isinstance(raw, dict):
            return None
        data = raw.get(SELECTION_KEY)
        if not isinstance(data, dict) or not data.get("name"):
            return None
        try:
            return Recipe.from_dict(data)
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring malformed selection in %s: %s", self.path, exc)
            return None
