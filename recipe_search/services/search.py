"""Search-related business logic."""

from __future__ import annotations

from recipe_search.domain.outcomes import Failed, FetchFailed, Fetched, Ok, SearchOutcome
from recipe_search.logging import logger
from recipe_search.services.exceptions import EmptyResultError
from recipe_search.services.mealdb import MealDBClient

GENERIC_FAILURE_MESSAGE = "An error occurred while fetching recipes."


def _failure_message(error: BaseException) -> str:
    return str(error).strip() or GENERIC_FAILURE_MESSAGE


class SearchService:
    """Turns one client call into an ``Ok``/``Failed`` outcome.

    A successful but empty result is reported as ``Failed("No recipes found.")``.
    Nothing raised by the client escapes this class; there is no retry and no cache.
    """

    def __init__(self, client: MealDBClient) -> None:
        self._client = client

    async def search_recipes(self, query: str) -> SearchOutcome:
        try:
            result = await self._client.search(query)
        except Exception as exc:
            logger.exception("recipe_search_failed", query=query, error=str(exc))
            return Failed(_failure_message(exc))

        match result:
            case Fetched(recipes=()):
                outcome: SearchOutcome = Failed(_failure_message(EmptyResultError()))
            case Fetched(recipes=recipes):
                outcome = Ok(recipes)
            case FetchFailed(error=error):
                outcome = Failed(_failure_message(error))

        if isinstance(outcome, Ok):
            logger.info("recipe_search_completed", query=query, results=len(outcome.recipes))
        else:
            logger.info("recipe_search_failed", query=query, reason=outcome.reason)
        return outcome


__all__ = ["GENERIC_FAILURE_MESSAGE", "SearchService"]
