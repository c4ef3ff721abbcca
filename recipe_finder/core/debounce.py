"""Incremental search driven by search-box input events."""

from __future__ import annotations

import logging

from .scheduling import TaskScheduler
from .session import SearchSession

logger = logging.getLogger(__name__)


class SearchInputController:
    """Debounces typing into plain searches.

    - two or more characters: search once the input has been quiet for
      ``debounce_seconds``
    - empty input: show random suggestions right away
    - a single character: nothing
    - Enter or the search button: search immediately with the raw value
    """

    def __init__(
        self,
        session: SearchSession,
        scheduler: TaskScheduler,
        debounce_seconds: float | None = None,
        min_query_length: int | None = None,
    ):
        self.session = session
        self.scheduler = scheduler
        self.debounce_seconds = (
            debounce_seconds if debounce_seconds is not None else session.config.debounce_seconds
        )
        self.min_query_length = (
            min_query_length if min_query_length is not None else session.config.min_query_length
        )
        self._pending: int | None = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def cancel_pending(self) -> None:
        if self._pending is not None:
            self.scheduler.cancel(self._pending)
            self._pending = None

    async def on_input(self, value: str) -> None:
        self.cancel_pending()
        term = value.strip()

        if len(term) >= self.min_query_length:
            async def run() -> None:
                self._pending = None
                await self.session.perform_search(term)

            self._pending = self.scheduler.schedule(self.debounce_seconds, run)
            logger.debug("Search for %r scheduled in %.2fs", term, self.debounce_seconds)
        elif not term:
            await self.session.show_random()

    async def on_enter(self, value: str) -> bool:
        self.cancel_pending()
        return await self.session.perform_search(value)

    async def on_submit(self, value: str) -> bool:
        """Search button; same as pressing Enter."""
        return await self.on_enter(value)
