"""Observable search state driven by user submissions."""

from __future__ import annotations

import asyncio
from typing import Callable

from recipe_search.domain.outcomes import Failed, Ok
from recipe_search.logging import logger, search_context
from recipe_search.presentation.state import Error, Idle, Loading, Success, ViewState
from recipe_search.services.search import SearchService

StateListener = Callable[[ViewState], None]


class SearchController:
    """Owns the single ``ViewState`` of one search session.

    Every ``submit`` moves the state to ``Loading`` immediately and starts a
    background task. A newer submission cancels the pending one, and any
    result that still arrives for an older submission is discarded, so the
    latest query always decides the final state.
    """

    def __init__(self, service: SearchService) -> None:
        self._service = service
        self._state: ViewState = Idle()
        self._listeners: list[StateListener] = []
        self._sequence = 0
        self._pending: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def submit(self, query: str) -> asyncio.Task[None]:
        """Start a search for ``query``; must run inside an event loop."""

        if self._closed:
            raise RuntimeError("SearchController is closed.")
        loop = asyncio.get_running_loop()

        if self.in_flight:
            assert self._pending is not None
            self._pending.cancel()

        self._sequence += 1
        sequence = self._sequence
        self._set_state(Loading())
        self._pending = loop.create_task(self._run(sequence, query))
        return self._pending

    async def search(self, query: str) -> ViewState:
        """Submit ``query`` and wait for it to settle.

        Raises ``asyncio.CancelledError`` when a newer submission supersedes it.
        """

        await self.submit(query)
        return self._state

    async def aclose(self) -> None:
        self._closed = True
        pending, self._pending = self._pending, None
        if pending is not None and not pending.done():
            pending.cancel()
            try:
                await pending
            except asyncio.CancelledError:
                pass
        self._listeners.clear()

    async def _run(self, sequence: int, query: str) -> None:
        with search_context(query, sequence):
            outcome = await self._service.search_recipes(query)
            if sequence != self._sequence:
                logger.info("stale_search_result_discarded", latest_sequence=self._sequence)
                return

        match outcome:
            case Ok(recipes=recipes):
                self._set_state(Success(recipes))
            case Failed(reason=reason):
                self._set_state(Error(reason))

    def _set_state(self, state: ViewState) -> None:
        self._state = state
        logger.debug("search_state_changed", state=type(state).__name__)
        for listener in list(self._listeners):
            listener(state)


__all__ = ["SearchController", "StateListener"]
