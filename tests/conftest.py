"""Pytest configuration and shared fixtures."""

import httpx
import pytest

from recipe_finder.core.mealdb import MealDBClient
from recipe_finder.core.selection import SelectionStore

BASE_URL = "https://mealdb.test/api/json/v1/1"


def make_meal(meal_id, name, area="Italian", category="Pasta", ingredients=None, **extra):
    """Build a full TheMealDB record."""
    meal = {
        "idMeal": str(meal_id),
        "strMeal": name,
        "strArea": area,
        "strCategory": category,
        "strMealThumb": f"https://img.test/{meal_id}.jpg",
        "strInstructions": f"Cook the {name.lower()}.",
        "strYoutube": "",
    }
    for index, (ingredient, measure) in enumerate(ingredients or [("Salt", "1 tsp")], start=1):
        meal[f"strIngredient{index}"] = ingredient
        meal[f"strMeasure{index}"] = measure
    meal.update(extra)
    return meal


class FakeMealDB:
    """In-memory stand-in for TheMealDB served through httpx.MockTransport."""

    def __init__(self):
        self.by_name: dict[str, list[dict]] = {}
        self.by_ingredient: dict[str, list[str]] = {}
        self.by_category: dict[str, list[str]] = {}
        self.details: dict[str, dict] = {}
        self.random: list = []  # meal dicts, None (empty payload) or "error"
        self.failing_ids: set[str] = set()
        self.failing_endpoints: set[str] = set()
        self.calls: list[tuple[str, dict]] = []

    def add(self, meal: dict) -> dict:
        self.details[meal["idMeal"]] = meal
        return meal

    def handler(self, request: httpx.Request) -> httpx.Response:
        endpoint = request.url.path.rsplit("/", 1)[-1]
        params = dict(request.url.params)
        self.calls.append((endpoint, params))

        if endpoint in self.failing_endpoints:
            raise httpx.ConnectError("connection refused", request=request)

        meals = None
        if endpoint == "search.php":
            meals = self.by_name.get(params.get("s", "")) or None
        elif endpoint == "filter.php":
            if "i" in params:
                ids = self.by_ingredient.get(params["i"])
            else:
                ids = self.by_category.get(params.get("c", ""))
            meals = [{"idMeal": meal_id, "strMeal": "partial"} for meal_id in ids] if ids else None
        elif endpoint == "lookup.php":
            meal_id = params.get("i", "")
            if meal_id in self.failing_ids:
                return httpx.Response(500, text="server error")
            meal = self.details.get(meal_id)
            meals = [meal] if meal else None
        elif endpoint == "random.php":
            item = self.random.pop(0) if self.random else None
            if item == "error":
                return httpx.Response(503, text="unavailable")
            meals = [item] if item else None
        else:
            return httpx.Response(404)

        return httpx.Response(200, json={"meals": meals})

    def count(self, endpoint: str) -> int:
        return sum(1 for name, _ in self.calls if name == endpoint)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def client(self, **kwargs) -> MealDBClient:
        return MealDBClient(base_url=BASE_URL, client=self.http_client(), **kwargs)


@pytest.fixture
def fake_api():
    return FakeMealDB()


@pytest.fixture
def local_records():
    """A small local dataset."""
    return [
        {"name": "Tomato Soup", "ingredients": ["4 tomatoes", "1 onion"]},
        {"name": "Garden Salad", "ingredients": ["2 tomatoes", "lettuce"]},
        {"name": "Soup", "ingredients": ["water", "salt"]},
        {"name": "Pancakes", "ingredients": ["flour", "milk", "2 eggs"]},
    ]


@pytest.fixture
def selection_store(tmp_path):
    return SelectionStore(tmp_path / "selected_recipe.json")


@pytest.fixture(name="make_meal")
def make_meal_fixture():
    """Factory for full TheMealDB records."""
    return make_meal
