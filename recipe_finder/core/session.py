"""Search session: state, single-flight guard and the search entry points."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .config import FinderConfig
from .local_search import load_local_recipes, local_suggestions, match_local
from .mealdb import FetchOutcome, MealDBClient
from .merge import merge_results
from .messages import message
from .models import Recipe
from .selection import SelectionStore

logger = logging.getLogger(__name__)

VEGETARIAN_CATEGORY = "Vegetarian"
DESSERT_CATEGORY = "Dessert"


class RecipeSink(Protocol):
    """Where rendered results go."""

    def render(self, recipes: list[Recipe], title: str = "") -> None: ...

    def loading(self, active: bool) -> None: ...


@dataclass
class ResultsView:
    """In-memory sink holding what the page currently shows."""

    recipes: list[Recipe] = field(default_factory=list)
    title: str = ""
    message: str = ""
    is_loading: bool = False
    render_count: int = 0
    default_message: str = field(default_factory=lambda: message("no_recipes"))

    def render(self, recipes: list[Recipe], title: str = "") -> None:
        self.recipes = list(recipes)
        self.title = title
        self.message = "" if self.recipes else (title or self.default_message)
        self.render_count += 1

    def loading(self, active: bool) -> None:
        self.is_loading = active
        if active:
            # Previous results are cleared as soon as a new operation starts
            self.recipes = []
            self.title = ""
            self.message = ""


class SearchSession:
    """Owns the per-page state and runs one search operation at a time.

    A call made while another operation is in flight returns ``False``
    without touching any state. Every operation that does run toggles the
    sink's loading indicator on and off, even when it fails.
    """

    def __init__(
        self,
        client: MealDBClient,
        sink: RecipeSink | None = None,
        store: SelectionStore | None = None,
        config: FinderConfig | None = None,
        local_recipes: list[dict] | None = None,
    ):
        self.config = config or FinderConfig()
        self.client = client
        self.sink = sink if sink is not None else ResultsView(default_message=self._message("no_recipes"))
        self.store = store
        self.local_recipes: list[dict] = list(local_recipes) if local_recipes is not None else []
        self.all_recipes: list[Recipe] = []
        self.current_recipes: list[Recipe] = []
        self.is_loading = False

    def _message(self, key: str) -> str:
        return message(key, self.config.locale)

    def load_local(self, path: Path | None = None) -> int:
        self.local_recipes = load_local_recipes(path or self.config.local_data_path)
        return len(self.local_recipes)

    async def start(self) -> None:
        """Load the bundled dataset and show the initial suggestions."""
        if not self.local_recipes:
            self.load_local()
        await self.show_random()

    def display(self, recipes: list[Recipe], title: str = "") -> None:
        self.current_recipes = list(recipes)
        self.sink.render(self.current_recipes, title)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def perform_search(self, query: str | None) -> bool:
        """Local matches first, then TheMealDB results with new names."""

        async def operation() -> None:
            combined = match_local(query, self.local_recipes)
            if query and query.strip():
                outcome = await self.client.search_by_name_and_ingredient(query)
                self._note_failures("search", outcome)
                self.all_recipes.extend(outcome.recipes)
                combined = merge_results(combined, outcome.recipes)

            if combined:
                self.display(combined)
            else:
                self.display([], self._message("no_recipes"))

        return await self._run(operation, lambda: self.display([], self._message("search_error")))

    async def search_category(
        self,
        category: str,
        title: str = "",
        empty_message: str | None = None,
        error_message: str | None = None,
    ) -> bool:
        async def operation() -> None:
            outcome = await self.client.search_by_category(category)
            self._note_failures(f"category {category}", outcome)
            if outcome.recipes:
                self.display(outcome.recipes, title)
            else:
                self.display([], empty_message or self._message("no_recipes"))

        return await self._run(
            operation,
            lambda: self.display([], error_message or self._message("search_error")),
        )

    async def search_vegetarian(self) -> bool:
        return await self.search_category(
            VEGETARIAN_CATEGORY,
            self._message("vegetarian_title"),
            self._message("vegetarian_empty"),
            self._message("vegetarian_error"),
        )

    async def search_desserts(self) -> bool:
        return await self.search_category(
            DESSERT_CATEGORY,
            self._message("dessert_title"),
            self._message("dessert_empty"),
            self._message("dessert_error"),
        )

    async def show_random(self) -> bool:
        """Random suggestions, or the first local recipes when none arrive."""
        fallback_count = self.config.local_fallback_count

        async def operation() -> None:
            outcome = await self.client.get_random(self.config.random_count)
            self._note_failures("random", outcome)
            if outcome.recipes:
                self.display(outcome.recipes, self._message("random_title"))
            else:
                self.display(
                    local_suggestions(self.local_recipes, fallback_count),
                    self._message("local_title"),
                )

        return await self._run(
            operation,
            lambda: self.display(
                local_suggestions(self.local_recipes, fallback_count),
                self._message("random_error"),
            ),
        )

    def select(self, recipe_id: str) -> Recipe | None:
        """Persist a recipe from the last render for the details view."""
        recipe = next((r for r in self.current_recipes if r.id == recipe_id), None)
        if recipe is None:
            return None
        if self.store is not None:
            self.store.save(recipe)
        return recipe

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _run(self, operation: Callable[[], Awaitable[None]], on_error: Callable[[], None]) -> bool:
        if self.is_loading:
            logger.debug("Search already in progress; ignoring new request")
            return False

        self.is_loading = True
        self.sink.loading(True)
        try:
            await operation()
        except Exception:
            logger.exception("Search operation failed")
            on_error()
        finally:
            self.is_loading = False
            self.sink.loading(False)
        return True

    @staticmethod
    def _note_failures(label: str, outcome: FetchOutcome) -> None:
        if not outcome.ok:
            logger.info(
                "%s: %d remote call(s) failed, continuing with %d recipe(s)",
                label,
                len(outcome.errors),
                len(outcome.recipes),
            )
