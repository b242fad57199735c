"""Tests for the search view-state machine."""

from __future__ import annotations

import asyncio

import pytest

from recipe_search.domain.models import Recipe
from recipe_search.domain.outcomes import Failed, Ok
from recipe_search.presentation.controller import SearchController
from recipe_search.presentation.state import Error, Idle, Loading, Success


def _recipe(recipe_id: str = "1") -> Recipe:
    return Recipe(id=recipe_id, name=f"Dish {recipe_id}", thumbnail_url=f"https://img/{recipe_id}.jpg")


class GatedService:
    """Search service whose calls resolve only when the test releases them."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._gates: dict[str, asyncio.Future] = {}

    async def search_recipes(self, query: str):
        self.calls.append(query)
        gate = asyncio.get_running_loop().create_future()
        self._gates[query] = gate
        return await gate

    def release(self, query: str, outcome) -> None:
        self._gates[query].set_result(outcome)


class ImmediateService:
    def __init__(self, outcome) -> None:
        self.outcome = outcome

    async def search_recipes(self, query: str):
        return self.outcome


def test_controller_starts_idle():
    controller = SearchController(ImmediateService(Failed("x")))
    assert controller.state == Idle()


@pytest.mark.asyncio
async def test_submit_moves_to_loading_synchronously():
    service = GatedService()
    controller = SearchController(service)

    task = controller.submit("chicken")
    assert controller.state == Loading()
    assert controller.in_flight

    await asyncio.sleep(0)
    service.release("chicken", Ok((_recipe(),)))
    await task

    assert controller.state == Success((_recipe(),))
    assert not controller.in_flight


@pytest.mark.asyncio
async def test_failed_outcome_becomes_error_state():
    controller = SearchController(ImmediateService(Failed("No recipes found.")))

    state = await controller.search("zzz")

    assert state == Error("No recipes found.")
    assert controller.state == state


@pytest.mark.asyncio
async def test_listeners_see_each_transition_once():
    controller = SearchController(ImmediateService(Ok((_recipe(),))))
    seen = []
    controller.subscribe(seen.append)

    await controller.search("chicken")
    await controller.search("beef")

    assert seen == [
        Loading(),
        Success((_recipe(),)),
        Loading(),
        Success((_recipe(),)),
    ]


@pytest.mark.asyncio
async def test_unsubscribe_stops_notifications():
    controller = SearchController(ImmediateService(Failed("nope")))
    seen = []
    unsubscribe = controller.subscribe(seen.append)
    unsubscribe()

    await controller.search("x")

    assert seen == []


@pytest.mark.asyncio
async def test_error_state_can_restart_search():
    service = GatedService()
    controller = SearchController(service)

    first = controller.submit("bad")
    await asyncio.sleep(0)
    service.release("bad", Failed("down"))
    await first
    assert controller.state == Error("down")

    second = controller.submit("good")
    assert controller.state == Loading()
    await asyncio.sleep(0)
    service.release("good", Ok((_recipe("2"),)))
    await second
    assert controller.state == Success((_recipe("2"),))


@pytest.mark.asyncio
async def test_newer_submission_supersedes_pending_one():
    service = GatedService()
    controller = SearchController(service)
    seen = []
    controller.subscribe(seen.append)

    first = controller.submit("slow")
    await asyncio.sleep(0)
    second = controller.submit("fast")
    await asyncio.sleep(0)

    assert first.cancelled() or first.done()
    service.release("fast", Ok((_recipe("fast"),)))
    await second

    assert controller.state == Success((_recipe("fast"),))
    assert seen == [Loading(), Loading(), Success((_recipe("fast"),))]


@pytest.mark.asyncio
async def test_stale_completion_is_discarded():
    outcomes = {"old": Ok((_recipe("old"),)), "new": Failed("nothing")}
    release_old = asyncio.Event()

    class UncancellableService:
        async def search_recipes(self, query: str):
            if query == "old":
                try:
                    await release_old.wait()
                except asyncio.CancelledError:
                    await release_old.wait()
            return outcomes[query]

    controller = SearchController(UncancellableService())
    old = controller.submit("old")
    await asyncio.sleep(0)
    await controller.search("new")
    assert controller.state == Error("nothing")

    release_old.set()
    await old

    assert controller.state == Error("nothing")


@pytest.mark.asyncio
async def test_replaced_search_is_cancelled():
    release = asyncio.Event()

    class SlowService:
        async def search_recipes(self, query: str):
            if query == "old":
                await release.wait()
            return Failed(query)

    controller = SearchController(SlowService())
    old = controller.submit("old")
    await asyncio.sleep(0)
    await controller.search("new")

    results = await asyncio.gather(old, return_exceptions=True)

    assert isinstance(results[0], asyncio.CancelledError)
    assert controller.state == Error("new")


@pytest.mark.asyncio
async def test_aclose_cancels_pending_search():
    service = GatedService()
    controller = SearchController(service)
    task = controller.submit("chicken")
    await asyncio.sleep(0)

    await controller.aclose()

    assert task.cancelled()
    assert controller.state == Loading()
    with pytest.raises(RuntimeError):
        controller.submit("again")
