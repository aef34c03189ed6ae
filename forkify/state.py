"""
Recipe state management.

RecipeState wraps an AppState record (current recipe, search, bookmarks) and the
operations that change it. The application shell constructs one instance,
calls initialize() once at startup, and passes it to whatever needs it.

Operations fall into two groups:
- Network operations (load_recipe, load_search_results, upload_recipe) never
  raise ForkifyError; they log it and return an OperationResult.
- Local operations (pagination, servings, bookmarks) raise ValidationError /
  StorageError directly.

# NOTE: Calls are not coordinated with each other. Two overlapping network
    operations from different threads may overwrite each other's state.
    The stored bookmark list is the exception: several states may share one
    store, so every bookmark change re-reads the stored list and applies the
    change to it under a process-wide lock.
"""

import json
import logging
import math
import threading
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from forkify.config import ForkifyConfig
from forkify.connectors.base import BaseRecipeConnector
from forkify.errors import ForkifyError, StorageError, ValidationError
from forkify.models import AppState, NewRecipe, OperationResult, Recipe, SearchResult, SearchState
from forkify.storage import KeyValueStore
from forkify.utils.ingredients import parse_ingredients

logger = logging.getLogger(__name__)

BOOKMARKS_KEY = "bookmarks"

_BOOKMARKS_LOCK = threading.Lock()


class RecipeState:
    """
    Client-side state for browsing, scaling and bookmarking recipes.

    Attributes:
        connector: Recipe API connector used for all network calls
        store: Key-value store the bookmark list is persisted to
        state: The AppState record being managed
    """

    def __init__(
        self,
        connector: BaseRecipeConnector,
        store: KeyValueStore,
        results_per_page: Optional[int] = None,
    ) -> None:
        """
        Args:
            connector: Recipe API connector
            store: Persistent key-value store for bookmarks
            results_per_page: Page size (optional, reads FORKIFY_RES_PER_PAGE if not provided)

        Raises:
            ValidationError: If results_per_page is below 1
        """
        if results_per_page is None:
            results_per_page = ForkifyConfig.get_res_per_page()
        if results_per_page < 1:
            raise ValidationError(f"results_per_page must be at least 1, got {results_per_page}")

        self.connector = connector
        self.store = store
        self.state = AppState(search=SearchState(results_per_page=results_per_page))
        self._initialized = False

    @property
    def recipe(self) -> Optional[Recipe]:
        return self.state.recipe

    @property
    def search(self) -> SearchState:
        return self.state.search

    @property
    def bookmarks(self) -> List[Recipe]:
        return self.state.bookmarks

    def initialize(self) -> None:
        """
        Load the bookmark list from storage.

        Only the first call has an effect.

        Raises:
            StorageError: If the stored bookmarks cannot be read or parsed
        """
        if self._initialized:
            return

        self.state.bookmarks = self._load_stored_bookmarks()
        self._initialized = True
        logger.debug("Loaded %d bookmarks from storage", len(self.state.bookmarks))

    def is_bookmarked(self, recipe_id: str) -> bool:
        return any(bookmark.id == recipe_id for bookmark in self.state.bookmarks)

    # ------------------------------------------------------------------ network

    def load_recipe(self, recipe_id: str) -> OperationResult[Recipe]:
        """
        Fetch a recipe and make it the current recipe.

        Args:
            recipe_id: Recipe identifier

        Returns:
            OperationResult with the Recipe, or with NetworkError / NotFoundError /
            ValidationError on failure. State is untouched on failure.
        """
        try:
            data = self.connector.get_recipe(recipe_id)
            recipe = Recipe.from_api(data)
        except ForkifyError as e:
            logger.error("Failed to load recipe %s: %s", recipe_id, e)
            return OperationResult.failure(e)

        recipe.bookmarked = self.is_bookmarked(recipe_id)
        self.state.recipe = recipe
        logger.info("Loaded recipe %s (%s)", recipe.id, recipe.title)
        return OperationResult.success(recipe)

    def load_search_results(self, query: str) -> OperationResult[List[SearchResult]]:
        """
        Search recipes, store the results and reset to page 1.

        The query is recorded before the request is sent.

        Returns:
            OperationResult with the list of SearchResult, or the error on failure.
        """
        self.state.search.query = query

        try:
            data = self.connector.search_recipes(query)
            raw_results = data["data"]["recipes"]
            results = [SearchResult.from_api(raw) for raw in raw_results]
        except ForkifyError as e:
            logger.error("Failed to search recipes for %r: %s", query, e)
            return OperationResult.failure(e)
        except (KeyError, TypeError, PydanticValidationError) as e:
            error = ValidationError(f"Unexpected search payload: {e}")
            logger.error("Failed to search recipes for %r: %s", query, error)
            return OperationResult.failure(error)

        self.state.search.results = results
        self.state.search.page = 1
        logger.info("Search %r returned %d recipes", query, len(results))
        return OperationResult.success(results)

    def upload_recipe(self, new_recipe: Union[NewRecipe, Dict[str, Any]]) -> OperationResult[Recipe]:
        """
        Validate and upload a user recipe, then make it current and bookmark it.

        Args:
            new_recipe: NewRecipe or raw form dict with "ingredient-N" entries

        Returns:
            OperationResult with the created Recipe. ValidationError and ConfigError
            are returned before any request is sent and before any state change.
            Once the API has accepted the recipe the result is a success, even
            if the bookmark list then fails to persist (that failure is logged).
        """
        try:
            form = new_recipe if isinstance(new_recipe, NewRecipe) else self._parse_form(new_recipe)
            ingredients = parse_ingredients(form.ingredient_entries())

            body = {
                "title": form.title,
                "source_url": form.source_url,
                "image_url": form.image,
                "publisher": form.publisher,
                "cooking_time": form.cooking_time,
                "servings": form.servings,
                "ingredients": [ing.to_api() for ing in ingredients],
            }

            data = self.connector.upload_recipe(body)
            recipe = Recipe.from_api(data)
        except ForkifyError as e:
            logger.error("Failed to upload recipe: %s", e)
            return OperationResult.failure(e)

        self.state.recipe = recipe
        try:
            self.add_bookmark(recipe)
        except StorageError as e:
            # The recipe exists on the server; only the local bookmark is missing.
            logger.error("Uploaded recipe %s but could not bookmark it: %s", recipe.id, e)

        logger.info("Uploaded recipe %s (%s)", recipe.id, recipe.title)
        return OperationResult.success(recipe)

    @staticmethod
    def _parse_form(form: Dict[str, Any]) -> NewRecipe:
        try:
            return NewRecipe.model_validate(form)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid recipe form: {e}") from e

    # -------------------------------------------------------------------- local

    def get_search_results_page(self, page: Optional[int] = None) -> List[SearchResult]:
        """
        Return one page of the current search results and make it the current page.

        Args:
            page: 1-based page number (defaults to the current page)

        Returns:
            At most results_per_page results, in original order. Pages past the
            end are empty.

        Raises:
            ValidationError: If page is below 1
        """
        search = self.state.search
        if page is None:
            page = search.page
        if page < 1:
            raise ValidationError(f"Page must be at least 1, got {page}")

        search.page = page
        start = (page - 1) * search.results_per_page
        end = page * search.results_per_page
        return search.results[start:end]

    def get_page_count(self) -> int:
        """Number of pages the current results span."""
        search = self.state.search
        return math.ceil(len(search.results) / search.results_per_page)

    def update_servings(self, new_servings: float) -> None:
        """
        Rescale every ingredient quantity to a new number of servings.

        Quantities become quantity * new / old; ingredients without a quantity
        are left as they are.

        Raises:
            ValidationError: If there is no current recipe, or either the current
                or the new servings is not positive
        """
        recipe = self.state.recipe
        if recipe is None:
            raise ValidationError("No recipe loaded")
        if new_servings <= 0:
            raise ValidationError(f"Servings must be positive, got {new_servings}")
        if recipe.servings <= 0:
            raise ValidationError(f"Recipe {recipe.id} has non-positive servings {recipe.servings}")

        for ing in recipe.ingredients:
            if ing.quantity is not None:
                ing.quantity = ing.quantity * new_servings / recipe.servings

        recipe.servings = new_servings

    def _load_stored_bookmarks(self) -> List[Recipe]:
        """
        Read the stored bookmark list, keeping the first record for each id.

        Raises:
            StorageError: If the stored value cannot be read or parsed
        """
        raw = self.store.get_item(BOOKMARKS_KEY)
        if not raw:
            return []

        try:
            records = json.loads(raw)
            recipes = [Recipe.from_storage(record) for record in records]
        except (ValueError, TypeError, PydanticValidationError) as e:
            raise StorageError(f"Stored bookmarks are not valid: {e}") from e

        bookmarks: List[Recipe] = []
        seen = set()
        for recipe in recipes:
            if recipe.id in seen:
                continue
            seen.add(recipe.id)
            bookmarks.append(recipe)
        return bookmarks

    def _persist_bookmarks(self) -> None:
        payload = json.dumps([bookmark.to_storage() for bookmark in self.state.bookmarks])
        self.store.set_item(BOOKMARKS_KEY, payload)

    def add_bookmark(self, recipe: Recipe) -> None:
        """
        Bookmark a recipe and persist the list.

        The change is applied to the list currently in storage, so bookmarks
        written by other states sharing the store are kept. A recipe whose id
        is already bookmarked is not added twice.

        Raises:
            StorageError: If the list cannot be read or persisted
        """
        with _BOOKMARKS_LOCK:
            bookmarks = self._load_stored_bookmarks()
            if not any(bookmark.id == recipe.id for bookmark in bookmarks):
                recipe.bookmarked = True
                bookmarks.append(recipe)
            self.state.bookmarks = bookmarks

            current = self.state.recipe
            if current is not None and current.id == recipe.id:
                current.bookmarked = True

            self._persist_bookmarks()

    def delete_bookmark(self, recipe_id: str) -> None:
        """
        Remove a bookmark by id and persist the list.

        Like add_bookmark, this works on the list currently in storage.
        Unknown ids leave the list unchanged.

        Raises:
            StorageError: If the list cannot be read or persisted
        """
        with _BOOKMARKS_LOCK:
            bookmarks = self._load_stored_bookmarks()
            self.state.bookmarks = [b for b in bookmarks if b.id != recipe_id]

            current = self.state.recipe
            if current is not None and current.id == recipe_id:
                current.bookmarked = False

            self._persist_bookmarks()

    def clear_bookmarks(self) -> None:
        """Drop every bookmark and remove the list from storage."""
        with _BOOKMARKS_LOCK:
            self.store.remove_item(BOOKMARKS_KEY)
            self.state.bookmarks = []

        if self.state.recipe is not None:
            self.state.recipe.bookmarked = False
