"""Shared fixtures for the recipe state tests."""

from typing import Any, Dict, List
from unittest.mock import Mock

import pytest

from forkify.connectors.base import BaseRecipeConnector
from forkify.state import RecipeState
from forkify.storage import MemoryStore


def make_recipe_payload(
    recipe_id: str = "5ed6604591c37cdc054bc886",
    title: str = "Spicy Chicken and Pepper Jack Pizza",
    servings: int = 4,
    ingredients: List[Dict[str, Any]] = None,
    key: str = None,
) -> Dict[str, Any]:
    """Build a recipe payload in the API's envelope shape."""
    if ingredients is None:
        ingredients = [
            {"quantity": 1.0, "unit": "lb", "description": "pizza dough"},
            {"quantity": 0.5, "unit": "cup", "description": "salsa"},
            {"quantity": None, "unit": "", "description": "salt"},
        ]
    recipe = {
        "id": recipe_id,
        "title": title,
        "publisher": "My Baking Addiction",
        "source_url": "http://www.mybakingaddiction.com/spicy-chicken-pizza",
        "image_url": "http://forkify-api.herokuapp.com/images/FlatBread21of1a180.jpg",
        "servings": servings,
        "cooking_time": 45,
        "ingredients": ingredients,
    }
    if key:
        recipe["key"] = key
    return {"status": "success", "data": {"recipe": recipe}}


def make_search_payload(count: int) -> Dict[str, Any]:
    """Build a search payload with `count` recipes named recipe-0 .. recipe-N."""
    recipes = [
        {
            "id": f"recipe-{i}",
            "title": f"Pizza {i}",
            "publisher": "Closet Cooking",
            "image_url": f"http://forkify-api.herokuapp.com/images/pizza{i}.jpg",
        }
        for i in range(count)
    ]
    return {"status": "success", "results": count, "data": {"recipes": recipes}}


@pytest.fixture
def connector():
    return Mock(spec=BaseRecipeConnector)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def recipe_state(connector, store):
    state = RecipeState(connector=connector, store=store, results_per_page=10)
    state.initialize()
    return state
