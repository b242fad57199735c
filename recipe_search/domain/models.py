"""Pydantic models mirroring TheMealDB search payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """One catalog entry, normalized from a ``meals`` array item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="idMeal")
    name: str = Field(alias="strMeal")
    category: str | None = Field(default=None, alias="strCategory")
    area: str | None = Field(default=None, alias="strArea")
    thumbnail_url: str = Field(alias="strMealThumb")

    @property
    def description(self) -> str:
        """Area and category joined with `` - ``; empty when both are absent."""

        parts = [part for part in (self.area, self.category) if part and part.strip()]
        return " - ".join(parts)


class MealsResponse(BaseModel):
    meals: list[Recipe] | None = None

    def recipes(self) -> list[Recipe]:
        return list(self.meals or [])


__all__ = ["MealsResponse", "Recipe"]
