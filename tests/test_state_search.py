"""
Tests for searching and paginating results.

These tests verify:
- Search results are projected into SearchResult records
- Loading a search resets the page to 1
- Page slices hold at most results_per_page items, in order
- Failures are logged and returned
"""

import os
from unittest.mock import patch

import pytest

from conftest import make_search_payload
from forkify.errors import NetworkError, ValidationError
from forkify.models import SearchResult
from forkify.state import RecipeState


class TestLoadSearchResults:
    """Test cases for RecipeState.load_search_results."""

    def test_load_search_results_projects_recipes(self, recipe_state, connector):
        """Test that raw recipes are reduced to id, title, publisher and image."""
        connector.search_recipes.return_value = make_search_payload(3)

        result = recipe_state.load_search_results("pizza")

        connector.search_recipes.assert_called_once_with("pizza")
        assert result.ok
        assert recipe_state.search.query == "pizza"
        assert len(recipe_state.search.results) == 3
        first = recipe_state.search.results[0]
        assert isinstance(first, SearchResult)
        assert first.id == "recipe-0"
        assert first.title == "Pizza 0"
        assert first.publisher == "Closet Cooking"
        assert first.image.endswith("pizza0.jpg")

    def test_load_search_results_resets_page(self, recipe_state, connector):
        """Test that a new search starts on page 1."""
        connector.search_recipes.return_value = make_search_payload(25)
        recipe_state.load_search_results("pizza")
        recipe_state.get_search_results_page(3)

        recipe_state.load_search_results("pasta")

        assert recipe_state.search.page == 1

    def test_load_search_results_failure(self, recipe_state, connector):
        """Test that a failed search is returned and keeps the old results."""
        connector.search_recipes.return_value = make_search_payload(2)
        recipe_state.load_search_results("pizza")

        connector.search_recipes.side_effect = NetworkError("Could not connect")
        result = recipe_state.load_search_results("pasta")

        assert not result.ok
        assert isinstance(result.error, NetworkError)
        assert recipe_state.search.query == "pasta"
        assert len(recipe_state.search.results) == 2

    def test_load_search_results_malformed_payload(self, recipe_state, connector):
        """Test that a payload without data.recipes is a ValidationError."""
        connector.search_recipes.return_value = {"status": "success"}

        result = recipe_state.load_search_results("pizza")

        assert isinstance(result.error, ValidationError)

    def test_search_result_is_immutable(self):
        """Test that search results cannot be changed once fetched."""
        item = SearchResult(id="1", title="Pizza")
        with pytest.raises(Exception):
            item.title = "Pasta"


class TestSearchResultsPage:
    """Test cases for RecipeState.get_search_results_page."""

    @pytest.fixture
    def searched(self, recipe_state, connector):
        connector.search_recipes.return_value = make_search_payload(25)
        recipe_state.load_search_results("pizza")
        return recipe_state

    def test_second_page_returns_items_10_to_19(self, searched):
        """Test the 25 results / 10 per page example."""
        page = searched.get_search_results_page(2)

        assert [r.id for r in page] == [f"recipe-{i}" for i in range(10, 20)]
        assert searched.search.page == 2

    def test_last_page_is_partial(self, searched):
        page = searched.get_search_results_page(3)
        assert [r.id for r in page] == [f"recipe-{i}" for i in range(20, 25)]

    def test_page_past_end_is_empty(self, searched):
        assert searched.get_search_results_page(4) == []

    def test_default_page_is_current_page(self, searched):
        """Test that omitting the page reuses the current one."""
        searched.get_search_results_page(2)
        page = searched.get_search_results_page()
        assert page[0].id == "recipe-10"

    def test_pages_never_exceed_page_size(self, searched):
        """Test that every page holds at most results_per_page items, in order."""
        seen = []
        for number in range(1, searched.get_page_count() + 1):
            page = searched.get_search_results_page(number)
            assert len(page) <= searched.search.results_per_page
            seen.extend(r.id for r in page)
        assert seen == [r.id for r in searched.search.results]

    @pytest.mark.parametrize("page", [0, -1])
    def test_page_below_one_rejected(self, searched, page):
        with pytest.raises(ValidationError):
            searched.get_search_results_page(page)
        assert searched.search.page == 1

    def test_page_count(self, searched):
        assert searched.get_page_count() == 3

    def test_page_count_without_results(self, recipe_state):
        assert recipe_state.get_page_count() == 0


class TestResultsPerPage:
    """Test cases for the page size given to RecipeState."""

    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_page_size_rejected(self, connector, store, size):
        """Test that an explicit zero or negative page size is refused, not replaced."""
        with pytest.raises(ValidationError, match="results_per_page must be at least 1"):
            RecipeState(connector=connector, store=store, results_per_page=size)

    @patch.dict(os.environ, {"FORKIFY_RES_PER_PAGE": "7"})
    def test_page_size_defaults_to_config(self, connector, store):
        state = RecipeState(connector=connector, store=store)
        assert state.search.results_per_page == 7
