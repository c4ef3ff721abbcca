"""Card view-models and terminal formatting for recipe results."""

import json

from ..core.messages import message
from ..core.models import Recipe

CARD_PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200?text=No+Image"
DETAILS_PLACEHOLDER_IMAGE = "https://via.placeholder.com/400x300?text=No+Image"


def recipe_card(recipe: Recipe, locale: str = "ar") -> dict:
    """Build the data one result card shows."""
    return {
        "id": recipe.id,
        "name": recipe.name,
        "image": recipe.image or CARD_PLACEHOLDER_IMAGE,
        "country": recipe.country,
        "type": recipe.type,
        "ingredientCount": recipe.ingredient_count,
        "cookingTime": recipe.cooking_time,
        "ingredientLabel": f"{recipe.ingredient_count} {message('ingredients_unit', locale)}",
        "timeLabel": f"{recipe.cooking_time} {message('minutes_unit', locale)}",
    }


def recipe_details(recipe: Recipe, locale: str = "ar") -> dict:
    """Build the data the details page shows."""
    details = recipe_card(recipe, locale)
    details["image"] = recipe.image or DETAILS_PLACEHOLDER_IMAGE
    details["ingredients"] = list(recipe.ingredients)
    details["instructions"] = recipe.instructions or message("no_instructions", locale)
    details["youtube"] = recipe.youtube or None
    return details


def format_results(recipes: list[Recipe], output_format: str = "table", empty_message: str = "") -> str:
    """Format recipe results for display.

    Args:
        recipes: Recipes to show.
        output_format: Either "table" or "json".
        empty_message: Shown instead of a table when there is nothing to list.

    Returns:
        Formatted string ready for printing.
    """
    if output_format == "json":
        return json.dumps([recipe.to_dict() for recipe in recipes], indent=2, ensure_ascii=False)

    return _format_table(recipes, empty_message or message("no_recipes", "en"))


def _format_table(recipes: list[Recipe], empty_message: str) -> str:
    if not recipes:
        return empty_message

    lines = []
    header = f"{'Name':<35} {'Country':<12} {'Type':<14} {'Items':>5} {'Time':>6}"
    lines.append(header)
    lines.append("-" * len(header))

    for recipe in recipes:
        lines.append(
            f"{recipe.name[:34]:<35} {recipe.country[:11]:<12} {recipe.type[:13]:<14} "
            f"{recipe.ingredient_count:>5} {str(recipe.cooking_time) + 'min':>6}"
        )

    return "\n".join(lines)


def format_details(recipe: Recipe) -> str:
    """Plain-text rendering of a single recipe."""
    lines = [
        recipe.name,
        "=" * len(recipe.name),
        f"{recipe.country} · {recipe.type} · {recipe.cooking_time} min",
        "",
        f"Ingredients ({recipe.ingredient_count}):",
    ]
    lines.extend(f"- {ingredient}" for ingredient in recipe.ingredients)
    lines.append("")
    lines.append(recipe.instructions or message("no_instructions", "en"))
    if recipe.youtube:
        lines.append("")
        lines.append(f"Video: {recipe.youtube}")
    return "\n".join(lines)
