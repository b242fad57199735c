"""Result types passed between the API client, search service and controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from recipe_search.domain.models import Recipe
from recipe_search.services.exceptions import RecipeSearchError


@dataclass(frozen=True, slots=True)
class Fetched:
    recipes: tuple[Recipe, ...]


@dataclass(frozen=True, slots=True)
class FetchFailed:
    error: RecipeSearchError


FetchResult = Union[Fetched, FetchFailed]


@dataclass(frozen=True, slots=True)
class Ok:
    recipes: tuple[Recipe, ...]

    def __post_init__(self) -> None:
        if not self.recipes:
            raise ValueError("Ok outcome requires at least one recipe.")


@dataclass(frozen=True, slots=True)
class Failed:
    reason: str


SearchOutcome = Union[Ok, Failed]

__all__ = ["FetchFailed", "FetchResult", "Fetched", "Failed", "Ok", "SearchOutcome"]
