from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional, Protocol

from utils.logger import get_logger

_logger = get_logger(__name__)


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> Handle: ...


class AsyncioScheduler:
    """
    Schedules on the running asyncio loop (Textual's, inside the app).
    The loop is looked up per call, so this can be built before the loop starts.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback, *args)


class TimerSlot:
    """
    At most one pending callback. Starting again cancels what was pending.

    Each start gets a fresh token, and a callback whose token is no longer
    current is dropped, so a cancelled timer can't apply a stale result even
    if the scheduler fires it anyway.
    """

    def __init__(self, scheduler: Scheduler, name: str) -> None:
        self._scheduler = scheduler
        self.name = name
        self._handle: Optional[Handle] = None
        self._token: Optional[object] = None

    @property
    def pending(self) -> bool:
        return self._token is not None

    def start(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        self.cancel()
        token = object()
        self._token = token
        self._handle = self._scheduler.call_later(
            delay, self._fire, token, callback, args
        )
        _logger.debug(f"Timer '{self.name}' armed for {delay}s")

    def cancel(self) -> None:
        if self._token is None:
            return
        self._token = None
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        _logger.debug(f"Timer '{self.name}' cancelled")

    def _fire(self, token: object, callback: Callable[..., Any], args: tuple) -> None:
        if token is not self._token:
            _logger.debug(f"Timer '{self.name}' dropped a stale callback")
            return
        self._token = None
        self._handle = None
        callback(*args)
