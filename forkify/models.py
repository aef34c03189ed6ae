"""
Recipe, search and state models for the Forkify client.

The API speaks snake_case JSON wrapped in a {"status", "data"} envelope. These
models convert that raw shape into the client's own records:

- Recipe: the currently viewed recipe and each bookmark
- SearchResult: the reduced projection returned by a search
- SearchState / AppState: the in-memory state owned by RecipeState
- NewRecipe: the upload form, with free-form "ingredient-N" fields as extras

# NOTE: Bookmarks are persisted in the camelCase shape the browser app used
    (sourceUrl, cookingTime). Field aliases carry that shape, so
    Recipe.to_storage() / Recipe.from_storage() round-trip it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from forkify.errors import ForkifyError, ValidationError

T = TypeVar("T")


class Ingredient(BaseModel):
    """A single recipe ingredient. quantity is None for "to taste" entries."""
    quantity: Optional[float] = Field(None, description="Amount for the current servings")
    unit: str = Field("", description="Unit of measure, may be empty")
    description: str = Field(..., description="What the ingredient is")

    def to_api(self) -> Dict[str, Any]:
        return {"quantity": self.quantity, "unit": self.unit, "description": self.description}


class Recipe(BaseModel):
    """
    Full recipe record.

    Mutated in place when servings change or the bookmark status toggles.
    `key` is only present for recipes uploaded with the user's API key.
    """
    id: str = Field(..., description="Recipe identifier from the API")
    title: str = Field(..., description="Recipe title")
    publisher: str = Field("", description="Publisher name")
    source_url: str = Field("", alias="sourceUrl", description="Link to the original recipe")
    image: str = Field("", description="URL to recipe image")
    servings: float = Field(..., description="Number of servings the quantities are for")
    cooking_time: float = Field(..., alias="cookingTime", description="Cooking time in minutes")
    ingredients: List[Ingredient] = Field(default_factory=list)
    key: Optional[str] = Field(None, description="API key the recipe was uploaded with")
    bookmarked: bool = Field(False, description="Whether the recipe is in the bookmark list")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Recipe":
        """
        Convert the raw API envelope into a Recipe.

        Args:
            payload: Parsed JSON of the form {"data": {"recipe": {...}}}

        Returns:
            Recipe with bookmarked=False; the caller decides membership.

        Raises:
            ValidationError: If the payload is missing the recipe or its required fields
        """
        try:
            raw = payload["data"]["recipe"]
        except (KeyError, TypeError) as e:
            raise ValidationError(f"Unexpected recipe payload: missing {e}") from e

        data = {
            "id": raw.get("id"),
            "title": raw.get("title"),
            "publisher": raw.get("publisher") or "",
            "source_url": raw.get("source_url") or "",
            "image": raw.get("image_url") or "",
            "servings": raw.get("servings"),
            "cooking_time": raw.get("cooking_time"),
            "ingredients": raw.get("ingredients") or [],
        }
        if raw.get("key"):
            data["key"] = raw["key"]

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid recipe payload: {e}") from e

    def to_storage(self) -> Dict[str, Any]:
        """Dump in the camelCase shape kept under the "bookmarks" storage key."""
        record = self.model_dump(by_alias=True)
        if record.get("key") is None:
            record.pop("key", None)
        return record

    @classmethod
    def from_storage(cls, record: Dict[str, Any]) -> "Recipe":
        return cls.model_validate(record)


class SearchResult(BaseModel):
    """Reduced recipe projection returned by a search. Immutable once fetched."""
    id: str
    title: str
    publisher: str = ""
    image: str = ""
    key: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "SearchResult":
        return cls(
            id=raw["id"],
            title=raw["title"],
            publisher=raw.get("publisher") or "",
            image=raw.get("image_url") or "",
            key=raw.get("key") or None,
        )


class SearchState(BaseModel):
    """Current search query, its results and the pagination position."""
    query: str = ""
    results: List[SearchResult] = Field(default_factory=list)
    page: int = Field(1, ge=1, description="Current page, 1-based")
    results_per_page: int = Field(10, ge=1)


class AppState(BaseModel):
    """Aggregate of the current recipe, the search state and the bookmark list."""
    recipe: Optional[Recipe] = None
    search: SearchState = Field(default_factory=SearchState)
    bookmarks: List[Recipe] = Field(default_factory=list)


class NewRecipe(BaseModel):
    """
    Upload form data.

    Ingredient entries arrive as extra fields named "ingredient-1",
    "ingredient-2", ... each holding a "quantity,unit,description" string.
    """
    title: str
    source_url: str = Field(..., alias="sourceUrl")
    image: str
    publisher: str
    cooking_time: int = Field(..., alias="cookingTime")
    servings: int

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def ingredient_entries(self) -> List[str]:
        """Non-empty ingredient strings in form order."""
        extras = self.model_extra or {}
        return [
            str(value)
            for name, value in extras.items()
            if name.startswith("ingredient") and value not in (None, "")
        ]


@dataclass
class OperationResult(Generic[T]):
    """
    Outcome of a state operation that talks to the network.

    Exactly one of value / error is meaningful, depending on ok.
    """
    ok: bool
    value: Optional[T] = None
    error: Optional[ForkifyError] = None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ForkifyError) -> "OperationResult[T]":
        return cls(ok=False, error=error)
