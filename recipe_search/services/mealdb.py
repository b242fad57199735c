"""TheMealDB HTTP client."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from recipe_search.config import MealDBSettings
from recipe_search.domain.models import MealsResponse, Recipe
from recipe_search.domain.outcomes import FetchFailed, FetchResult, Fetched
from recipe_search.logging import logger
from recipe_search.services.exceptions import NetworkError, ParseError, RecipeSearchError


class MealDBClient:
    """Issues ``GET search.php?s=<query>`` and parses the ``meals`` array.

    The query is forwarded verbatim, empty strings included. Recipes keep the
    order the server returned them in.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: MealDBSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or MealDBSettings()

    async def fetch(self, query: str) -> list[Recipe]:
        """Return matching recipes or raise ``NetworkError``/``ParseError``."""

        url = self._settings.search_url()
        logger.debug("mealdb_request", url=url, query=query)
        try:
            response = await self._client.get(
                url,
                params={"s": query},
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            logger.warning("mealdb_request_failed", query=query, status_code=status_code)
            raise NetworkError(f"Recipe search failed ({status_code}).") from exc
        except httpx.RequestError as exc:
            logger.warning("mealdb_request_failed", query=query, error=str(exc))
            raise NetworkError(f"Recipe search failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("mealdb_parse_failed", query=query, error=str(exc))
            raise ParseError("Recipe service returned invalid JSON.") from exc
        if not isinstance(data, dict):
            logger.warning("mealdb_parse_failed", query=query, payload_type=type(data).__name__)
            raise ParseError("Recipe service returned an unexpected payload shape.")

        try:
            payload = MealsResponse.model_validate(data)
        except ValidationError as exc:
            logger.warning("mealdb_parse_failed", query=query, error=str(exc))
            raise ParseError(
                f"Unexpected recipe payload: {exc.error_count()} invalid field(s)."
            ) from exc
        return payload.recipes()

    async def search(self, query: str) -> FetchResult:
        """Like ``fetch`` but reports failures as ``FetchFailed`` instead of raising."""

        try:
            recipes = await self.fetch(query)
        except RecipeSearchError as exc:
            return FetchFailed(exc)
        return Fetched(tuple(recipes))


__all__ = ["MealDBClient"]
