"""Plain-text rendering of the search screen."""

from __future__ import annotations

from recipe_search.domain.models import Recipe
from recipe_search.i18n import I18nService
from recipe_search.presentation.state import Error, Loading, Success, ViewState


def render_recipe(recipe: Recipe) -> str:
    lines = [recipe.name]
    description = recipe.description
    if description:
        lines.append(f"  {description}")
    lines.append(f"  {recipe.thumbnail_url}")
    return "\n".join(lines)


def render_state(state: ViewState, i18n: I18nService, *, locale: str | None = None) -> str:
    match state:
        case Loading():
            return i18n.gettext("search.loading", locale=locale)
        case Error(message=message):
            return message
        case Success(recipes=recipes):
            header = i18n.gettext("search.results_header", locale=locale, count=len(recipes))
            blocks = [render_recipe(recipe) for recipe in recipes]
            return "\n\n".join([header, *blocks])
        case _:
            return i18n.gettext("search.idle", locale=locale)


__all__ = ["render_recipe", "render_state"]
