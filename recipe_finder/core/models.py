"""Canonical recipe record and the normalizers that build it."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

MAX_INGREDIENT_SLOTS = 20

REMOTE_DEFAULT_TAG = "Unknown"
REMOTE_COOKING_TIME = 45

LOCAL_COUNTRY = "Local"
LOCAL_TYPE = "Homemade"
LOCAL_COOKING_TIME = 30

_WHITESPACE = re.compile(r"\s+")


def _clean(value: Any) -> str:
    """Return a stripped string, or "" for missing and non-string values."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def _text(value: Any, default: str | None = "") -> str | None:
    """Return value when it is a non-empty string, else default."""
    if isinstance(value, str) and value:
        return value
    return default


def extract_ingredients(meal: dict) -> list[str]:
    """Collect the numbered ingredient/measure pairs of a TheMealDB record.

    Slots 1..20 are read in order. Blank ingredients are skipped; a blank
    measure leaves the bare ingredient name.
    """
    ingredients: list[str] = []
    for index in range(1, MAX_INGREDIENT_SLOTS + 1):
        ingredient = _clean(meal.get(f"strIngredient{index}"))
        if not ingredient:
            continue
        measure = _clean(meal.get(f"strMeasure{index}"))
        ingredients.append(f"{measure} {ingredient}" if measure else ingredient)
    return ingredients


def local_recipe_id(name: str) -> str:
    """Synthesize the id used for bundled recipes."""
    return "local_" + _WHITESPACE.sub("_", name)


@dataclass(frozen=True)
class Recipe:
    """A normalized recipe, regardless of where it came from."""

    id: str
    name: str
    country: str = REMOTE_DEFAULT_TAG
    type: str = REMOTE_DEFAULT_TAG
    image: str | None = None
    ingredients: tuple[str, ...] = field(default_factory=tuple)
    instructions: str | None = None
    youtube: str = ""
    cooking_time: int = REMOTE_COOKING_TIME

    def __post_init__(self) -> None:
        # Lists handed in by callers are frozen so the count cannot drift.
        if not isinstance(self.ingredients, tuple):
            object.__setattr__(self, "ingredients", tuple(self.ingredients))

    @property
    def ingredient_count(self) -> int:
        return len(self.ingredients)

    @classmethod
    def from_meal(cls, meal: dict) -> Recipe:
        """Build a recipe from a full TheMealDB record."""
        return cls(
            id=str(meal.get("idMeal", "")),
            name=_clean(meal.get("strMeal")),
            country=_text(meal.get("strArea"), REMOTE_DEFAULT_TAG),
            type=_text(meal.get("strCategory"), REMOTE_DEFAULT_TAG),
            image=_text(meal.get("strMealThumb"), None),
            ingredients=tuple(extract_ingredients(meal)),
            instructions=_text(meal.get("strInstructions"), None),
            youtube=_text(meal.get("strYoutube")),
            cooking_time=REMOTE_COOKING_TIME,
        )

    @classmethod
    def from_local(cls, record: dict) -> Recipe:
        """Build a recipe from a bundled dataset entry."""
        name = str(record.get("name", ""))
        raw_ingredients = record.get("ingredients") or []
        return cls(
            id=local_recipe_id(name),
            name=name,
            country=LOCAL_COUNTRY,
            type=LOCAL_TYPE,
            image=_text(record.get("image"), None),
            ingredients=tuple(str(item) for item in raw_ingredients),
            instructions=_text(record.get("instructions"), None),
            youtube="",
            cooking_time=LOCAL_COOKING_TIME,
        )

    @classmethod
    def from_dict(cls, data: dict) -> Recipe:
        """Rebuild a recipe from its serialized form.

        A stored ``ingredientCount`` is ignored; the count is always derived.
        """
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            country=_text(data.get("country"), REMOTE_DEFAULT_TAG),
            type=_text(data.get("type"), REMOTE_DEFAULT_TAG),
            image=_text(data.get("image"), None),
            ingredients=tuple(str(item) for item in data.get("ingredients") or []),
            instructions=_text(data.get("instructions"), None),
            youtube=_text(data.get("youtube")),
            cooking_time=int(data.get("cookingTime", REMOTE_COOKING_TIME) or REMOTE_COOKING_TIME),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "type": self.type,
            "image": self.image,
            "ingredients": list(self.ingredients),
            "instructions": self.instructions,
            "youtube": self.youtube,
            "cookingTime": self.cooking_time,
            "ingredientCount": self.ingredient_count,
        }
