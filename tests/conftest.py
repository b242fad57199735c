"""Shared pytest fixtures for MealDB-backed tests."""

from __future__ import annotations

import httpx
import pytest
import structlog

from recipe_search.config import AppSettings, MealDBSettings


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def arrabiata() -> dict:
    return {
        "idMeal": "52771",
        "strMeal": "Spicy Arrabiata Penne",
        "strCategory": "Vegetarian",
        "strArea": "Italian",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/ustsqw1468250014.jpg",
        "strInstructions": "Bring a large pot of water to a boil.",
    }


@pytest.fixture
def teriyaki() -> dict:
    return {
        "idMeal": "52772",
        "strMeal": "Teriyaki Chicken Casserole",
        "strCategory": "Chicken",
        "strArea": None,
        "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
    }


@pytest.fixture
def sample_meals(arrabiata, teriyaki) -> list[dict]:
    return [arrabiata, teriyaki]


@pytest.fixture
def meals_transport():
    """Build a MockTransport answering every request with ``{"meals": meals}``."""

    def _build(meals, seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
        async def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(200, json={"meals": meals})

        return httpx.MockTransport(handler)

    return _build


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        mealdb=MealDBSettings(base_url="https://mealdb.test/api/json/v1/1/"),
        _env_file=None,
    )
