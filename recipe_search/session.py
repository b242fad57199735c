"""Per-session wiring of HTTP client, services and controller."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from recipe_search.config import AppSettings, get_settings
from recipe_search.logging import logger
from recipe_search.presentation.controller import SearchController
from recipe_search.services.mealdb import MealDBClient
from recipe_search.services.search import SearchService


@dataclass(slots=True)
class RecipeSearchSession:
    settings: AppSettings
    client: MealDBClient
    service: SearchService
    controller: SearchController


@asynccontextmanager
async def open_session(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[RecipeSearchSession]:
    settings = settings or get_settings()
    async with httpx.AsyncClient(transport=transport, follow_redirects=True) as http_client:
        client = MealDBClient(http_client, settings=settings.mealdb)
        service = SearchService(client)
        controller = SearchController(service)
        logger.info("recipe_search_session_opened", base_url=str(settings.mealdb.base_url))
        try:
            yield RecipeSearchSession(
                settings=settings,
                client=client,
                service=service,
                controller=controller,
            )
        finally:
            await controller.aclose()
            logger.info("recipe_search_session_closed")


__all__ = ["RecipeSearchSession", "open_session"]
