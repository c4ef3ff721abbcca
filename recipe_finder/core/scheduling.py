"""Cancellable delayed actions.

Actions are zero-argument coroutine functions. ``schedule`` hands back a token
and ``cancel`` uses it to drop the action if it has not started yet; once an
action runs it can no longer be cancelled through the scheduler.
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Awaitable, Callable
from typing import Protocol

Action = Callable[[], Awaitable[None]]


class TaskScheduler(Protocol):
    def schedule(self, delay: float, action: Action) -> int: ...

    def cancel(self, token: int) -> bool: ...


class AsyncioScheduler:
    """Runs actions on the running event loop after a delay."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop
        self._counter = itertools.count(1)
        self._handles: dict[int, asyncio.TimerHandle] = {}
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._handles)

    def schedule(self, delay: float, action: Action) -> int:
        loop = self._loop or asyncio.get_running_loop()
        token = next(self._counter)

        def fire() -> None:
            self._handles.pop(token, None)
            task = loop.create_task(action())
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        self._handles[token] = loop.call_later(delay, fire)
        return token

    def cancel(self, token: int) -> bool:
        handle = self._handles.pop(token, None)
        if handle is None:
            return False
        handle.cancel()
        return True


class ManualScheduler:
    """Virtual-clock scheduler; time only moves when ``advance`` is awaited."""

    def __init__(self) -> None:
        self.now = 0.0
        self._counter = itertools.count(1)
        self._entries: dict[int, tuple[float, Action]] = {}

    @property
    def pending(self) -> int:
        return len(self._entries)

    def schedule(self, delay: float, action: Action) -> int:
        token = next(self._counter)
        self._entries[token] = (self.now + delay, action)
        return token

    def cancel(self, token: int) -> bool:
        return self._entries.pop(token, None) is not None

    async def advance(self, seconds: float) -> int:
        """Move the clock forward, running due actions in due order.

        Returns the number of actions that ran.
        """
        target = self.now + seconds
        ran = 0
        while True:
            due = [(when, token) for token, (when, _) in self._entries.items() if when <= target]
            if not due:
                break
            when, token = min(due)
            _, action = self._entries.pop(token)
            self.now = when
            await action()
            ran += 1
        self.now = target
        return ran
