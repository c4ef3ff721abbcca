"""
Details API routes - selecting a card and reading the persisted selection.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from ...core.session import SearchSession
from ...utils.display import recipe_details
from .search import get_session

router = APIRouter()
logger = logging.getLogger(__name__)

HOME_PATH = "/"


class RecipeDetailsResponse(BaseModel):
    """Everything the details page shows for one recipe."""

    id: str
    name: str
    image: str
    country: str
    type: str
    ingredientCount: int
    cookingTime: int
    ingredientLabel: str
    timeLabel: str
    ingredients: list[str]
    instructions: str
    youtube: str | None = None


@router.post("/recipes/{recipe_id}/select")
def select_recipe(recipe_id: str, session: SearchSession = Depends(get_session)) -> RecipeDetailsResponse:
    """Persist a recipe from the current results for the details view."""
    recipe = session.select(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe {recipe_id} is not in the current results")
    logger.info("Selected recipe %s (%s)", recipe.id, recipe.name)
    return RecipeDetailsResponse(**recipe_details(recipe, session.config.locale))


@router.get("/details", response_model=None)
def get_details(session: SearchSession = Depends(get_session)) -> RecipeDetailsResponse | RedirectResponse:
    """Show the persisted selection, or send the visitor back home."""
    recipe = session.store.load() if session.store is not None else None
    if recipe is None:
        return RedirectResponse(url=HOME_PATH, status_code=307)
    return RecipeDetailsResponse(**recipe_details(recipe, session.config.locale))
