"""Domain-specific exceptions."""

NO_RECIPES_FOUND = "No recipes found."


class RecipeSearchError(Exception):
    pass


class NetworkError(RecipeSearchError):
    pass


class ParseError(RecipeSearchError):
    pass


class EmptyResultError(RecipeSearchError):
    def __init__(self, message: str = NO_RECIPES_FOUND) -> None:
        super().__init__(message)
