"""
Client-side state for the Forkify recipe application.

This package contains:
- config: environment-driven configuration
- connectors: HTTP access to the recipe API
- storage: local key-value persistence for bookmarks
- state: RecipeState, the recipe/search/bookmark state container
"""

from forkify.errors import (
    ConfigError,
    ForkifyError,
    NetworkError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from forkify.models import AppState, Ingredient, NewRecipe, OperationResult, Recipe, SearchResult, SearchState
from forkify.state import RecipeState

__all__ = [
    "AppState",
    "ConfigError",
    "ForkifyError",
    "Ingredient",
    "NetworkError",
    "NewRecipe",
    "NotFoundError",
    "OperationResult",
    "Recipe",
    "RecipeState",
    "SearchResult",
    "SearchState",
    "StorageError",
    "ValidationError",
]
