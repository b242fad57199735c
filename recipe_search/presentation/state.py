"""Renderable view states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from recipe_search.domain.models import Recipe


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Success:
    recipes: tuple[Recipe, ...]


@dataclass(frozen=True, slots=True)
class Error:
    message: str


ViewState = Union[Idle, Loading, Success, Error]

__all__ = ["Error", "Idle", "Loading", "Success", "ViewState"]
