"""
Base connector abstract class for recipe API integrations.

RecipeState only talks to the network through this interface, which keeps the
state logic independent of the HTTP client and lets tests swap in a Mock.

All connectors must:
- Fetch a single recipe by id and return the parsed JSON envelope
- Search recipes by query and return the parsed JSON envelope
- Upload a normalized recipe and return the parsed JSON envelope of the created recipe
- Raise forkify.errors.NetworkError / NotFoundError on failure
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseRecipeConnector(ABC):
    """
    Abstract base class for recipe API connectors.

    Attributes:
        source: String identifier for the API (e.g., "forkify")
    """
    source: str

    @abstractmethod
    def get_recipe(self, recipe_id: str) -> Dict[str, Any]:
        """
        Fetch a recipe by id.

        Returns:
            Parsed JSON of the form {"data": {"recipe": {...}}}
        """
        pass

    @abstractmethod
    def search_recipes(self, query: str) -> Dict[str, Any]:
        """
        Search recipes by free-text query.

        Returns:
            Parsed JSON of the form {"data": {"recipes": [...]}}
        """
        pass

    @abstractmethod
    def upload_recipe(self, recipe: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a recipe owned by the configured API key.

        Args:
            recipe: API-shaped body (title, source_url, image_url, publisher,
                    cooking_time, servings, ingredients)

        Returns:
            Parsed JSON of the form {"data": {"recipe": {...}}}
        """
        pass
