"""Async client for the public TheMealDB recipe API.

Every public operation returns a :class:`FetchOutcome`. Transport, HTTP and
JSON failures are logged and recorded on the outcome instead of raised, so a
caller always gets whatever partial data could be collected.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

import httpx

from .config import DEFAULT_API_BASE_URL, FinderConfig
from .models import Recipe

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_COUNT = 12


def _to_recipes(meals: list[dict]) -> list[Recipe]:
    """Normalize meal records, dropping those without a usable name."""
    recipes: list[Recipe] = []
    for meal in meals:
        recipe = Recipe.from_meal(meal)
        if not recipe.name:
            logger.warning("Skipping TheMealDB record %s without a name", meal.get("idMeal"))
            continue
        recipes.append(recipe)
    return recipes


@dataclass
class FetchOutcome:
    """Recipes gathered by one client operation plus the failures met on the way."""

    recipes: list[Recipe] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class MealDBClient:
    """Name, ingredient, category and random queries against TheMealDB."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        ingredient_lookup_limit: int = 20,
        category_lookup_limit: int = 15,
    ):
        self.base_url = base_url.rstrip("/")
        self.ingredient_lookup_limit = ingredient_lookup_limit
        self.category_lookup_limit = category_lookup_limit
        self._owns_client = client is None
        if client is not None:
            self._client = client
        elif timeout is not None:
            self._client = httpx.AsyncClient(timeout=timeout)
        else:
            self._client = httpx.AsyncClient()

    @classmethod
    def from_config(cls, config: FinderConfig, client: httpx.AsyncClient | None = None) -> MealDBClient:
        return cls(
            base_url=config.api_base_url,
            client=client,
            timeout=config.http_timeout,
            ingredient_lookup_limit=config.ingredient_lookup_limit,
            category_lookup_limit=config.category_lookup_limit,
        )

    async def __aenter__(self) -> MealDBClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def search_by_name_and_ingredient(self, query: str) -> FetchOutcome:
        """Search meal names and main ingredients for ``query``.

        Name matches come first, then the detail records of the ingredient
        filter hits. Duplicates are dropped by meal id, first occurrence wins.
        """
        errors: list[str] = []
        (named, name_error), (filtered, filter_error) = await asyncio.gather(
            self._get_meals("search.php", {"s": query}),
            self._get_meals("filter.php", {"i": query}),
        )
        for error in (name_error, filter_error):
            if error:
                errors.append(error)

        resolved = await self._resolve(filtered[: self.ingredient_lookup_limit], errors)

        seen: set[str] = set()
        unique: list[dict] = []
        for meal in [*named, *resolved]:
            meal_id = str(meal.get("idMeal"))
            if meal_id in seen:
                continue
            seen.add(meal_id)
            unique.append(meal)

        return FetchOutcome(_to_recipes(unique), errors)

    async def search_by_category(self, category: str) -> FetchOutcome:
        """Return full recipes for the first hits of a category filter."""
        errors: list[str] = []
        filtered, error = await self._get_meals("filter.php", {"c": category})
        if error:
            errors.append(error)
        resolved = await self._resolve(filtered[: self.category_lookup_limit], errors)
        return FetchOutcome(_to_recipes(resolved), errors)

    async def get_random(self, count: int = DEFAULT_RANDOM_COUNT) -> FetchOutcome:
        """Fetch ``count`` independent random recipes.

        Failed or empty calls are skipped. Repeats across calls are kept.
        """
        errors: list[str] = []
        results = await asyncio.gather(
            *(self._get_meals("random.php") for _ in range(max(count, 0)))
        )
        picked: list[dict] = []
        for meals, error in results:
            if error:
                errors.append(error)
            if meals:
                picked.append(meals[0])
        return FetchOutcome(_to_recipes(picked), errors)

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    async def _resolve(self, entries: list[dict], errors: list[str]) -> list[dict]:
        """Turn partial filter entries into full records via detail lookups."""
        ids = [str(entry["idMeal"]) for entry in entries if entry.get("idMeal")]
        if not ids:
            return []
        results = await asyncio.gather(*(self._lookup_meal(meal_id) for meal_id in ids))
        resolved: list[dict] = []
        for meal, error in results:
            if error:
                errors.append(error)
            if meal:
                resolved.append(meal)
        return resolved

    async def _lookup_meal(self, meal_id: str) -> tuple[dict | None, str | None]:
        meals, error = await self._get_meals("lookup.php", {"i": meal_id})
        return (meals[0] if meals else None), error

    async def _get_meals(self, endpoint: str, params: dict | None = None) -> tuple[list[dict], str | None]:
        """GET an endpoint and return its ``meals`` list and an error, if any."""
        url = f"{self.base_url}/{endpoint}"
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning("TheMealDB request %s %s failed: %s", endpoint, params or {}, exc)
            return [], f"{endpoint}: {exc}"

        meals = payload.get("meals") if isinstance(payload, dict) else None
        if not isinstance(meals, list):
            return [], None
        return [meal for meal in meals if isinstance(meal, dict)], None
