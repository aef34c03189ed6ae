"""
Session management utilities for Streamlit pages.

The application shell owns the recipe state: one RecipeState per browser
session, stored in st.session_state so it survives page navigation and
reruns. The state is initialized (bookmarks loaded from storage) exactly once,
when it is first created.
"""

from typing import Callable, Optional

import streamlit as st

from forkify.connectors.forkify_connector import ForkifyConnector
from forkify.state import RecipeState
from forkify.storage import JsonFileStore

RECIPE_STATE_KEY = "recipe_state"


def _default_factory() -> RecipeState:
    return RecipeState(connector=ForkifyConnector(), store=JsonFileStore())


def get_or_create_recipe_state(
    factory: Optional[Callable[[], RecipeState]] = None,
) -> RecipeState:
    """
    Get or create the RecipeState stored in st.session_state.

    Args:
        factory: Builds a fresh RecipeState (optional, defaults to the Forkify
                 connector with a JSON file store)

    Returns:
        The session's RecipeState, already initialized

    Example:
        >>> recipe_state = get_or_create_recipe_state()
        >>> result = recipe_state.load_search_results("pizza")
    """
    if RECIPE_STATE_KEY not in st.session_state:
        recipe_state = (factory or _default_factory)()
        recipe_state.initialize()
        st.session_state[RECIPE_STATE_KEY] = recipe_state
    return st.session_state[RECIPE_STATE_KEY]


def reset_recipe_state() -> None:
    """Drop the session's RecipeState; the next access builds a new one."""
    st.session_state.pop(RECIPE_STATE_KEY, None)
