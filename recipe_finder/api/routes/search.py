"""
Search API routes - plain, category and random searches plus search-box input.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from ...core.debounce import SearchInputController
from ...core.session import ResultsView, SearchSession
from ...utils.display import recipe_card

router = APIRouter()
logger = logging.getLogger(__name__)


class SearchRequest(BaseModel):
    query: str = ""


class InputEvent(BaseModel):
    """Current contents of the search box."""

    value: str = ""


class RecipeCardResponse(BaseModel):
    """One result card."""

    id: str
    name: str
    image: str
    country: str
    type: str
    ingredientCount: int
    cookingTime: int
    ingredientLabel: str
    timeLabel: str


class ResultsResponse(BaseModel):
    """What the results area currently shows."""

    title: str
    message: str
    loading: bool
    count: int
    cards: list[RecipeCardResponse]


def get_session(request: Request) -> SearchSession:
    return request.app.state.session


def get_search_input(request: Request) -> SearchInputController:
    return request.app.state.search_input


def _results(session: SearchSession) -> ResultsResponse:
    view = session.sink
    if not isinstance(view, ResultsView):
        raise HTTPException(status_code=500, detail="Session is not rendering to a results view")
    cards = [RecipeCardResponse(**recipe_card(recipe, session.config.locale)) for recipe in view.recipes]
    return ResultsResponse(
        title=view.title,
        message=view.message,
        loading=view.is_loading,
        count=len(cards),
        cards=cards,
    )


def _busy() -> HTTPException:
    return HTTPException(status_code=409, detail="A search is already in progress")


@router.get("/recipes")
async def current_results(session: SearchSession = Depends(get_session)) -> ResultsResponse:
    """Current results; the first call of a session loads random suggestions."""
    view = session.sink
    if isinstance(view, ResultsView) and view.render_count == 0:
        await session.show_random()
    return _results(session)


@router.post("/search")
async def search(body: SearchRequest, session: SearchSession = Depends(get_session)) -> ResultsResponse:
    if not await session.perform_search(body.query):
        raise _busy()
    return _results(session)


@router.post("/search/vegetarian")
async def search_vegetarian(session: SearchSession = Depends(get_session)) -> ResultsResponse:
    if not await session.search_vegetarian():
        raise _busy()
    return _results(session)


@router.post("/search/desserts")
async def search_desserts(session: SearchSession = Depends(get_session)) -> ResultsResponse:
    if not await session.search_desserts():
        raise _busy()
    return _results(session)


@router.post("/random")
async def show_random(session: SearchSession = Depends(get_session)) -> ResultsResponse:
    if not await session.show_random():
        raise _busy()
    return _results(session)


class InputResponse(BaseModel):
    """Results after a keystroke, and whether a debounced search is queued."""

    pending: bool
    results: ResultsResponse


@router.post("/input")
async def search_input(
    body: InputEvent,
    session: SearchSession = Depends(get_session),
    controller: SearchInputController = Depends(get_search_input),
) -> InputResponse:
    """Search-box input; searches run once typing pauses."""
    await controller.on_input(body.value)
    return InputResponse(pending=controller.has_pending, results=_results(session))


@router.post("/input/enter")
async def search_input_enter(
    body: InputEvent,
    session: SearchSession = Depends(get_session),
    controller: SearchInputController = Depends(get_search_input),
) -> ResultsResponse:
    """Enter key or search button: search now with the raw value."""
    if not await controller.on_enter(body.value):
        raise _busy()
    return _results(session)
