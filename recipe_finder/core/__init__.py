"""Core search pipeline for Recipe Finder."""

from .config import FinderConfig
from .debounce import SearchInputController
from .local_search import load_local_recipes, local_suggestions, match_local
from .mealdb import FetchOutcome, MealDBClient
from .merge import merge_results
from .messages import message
from .models import Recipe, extract_ingredients, local_recipe_id
from .scheduling import AsyncioScheduler, ManualScheduler, TaskScheduler
from .selection import SelectionStore
from .session import RecipeSink, ResultsView, SearchSession

__all__ = [
    "AsyncioScheduler",
    "FetchOutcome",
    "FinderConfig",
    "ManualScheduler",
    "MealDBClient",
    "Recipe",
    "RecipeSink",
    "ResultsView",
    "SearchInputController",
    "SearchSession",
    "SelectionStore",
    "TaskScheduler",
    "extract_ingredients",
    "load_local_recipes",
    "local_recipe_id",
    "local_suggestions",
    "match_local",
    "merge_results",
    "message",
]
