"""
Ingredient parsing utilities for the recipe upload form.

Pure helpers with no side effects (no I/O, no network calls). Each form entry
is a "quantity,unit,description" string; quantity and unit may be left empty,
e.g. ",,salt" or "0.5,kg,rice".
"""

from typing import Iterable, List, Optional

from forkify.errors import ValidationError
from forkify.models import Ingredient

INGREDIENT_FORMAT_ERROR = "Wrong ingredient format! Please use the correct format :)"


def parse_quantity(raw: str) -> Optional[float]:
    """
    Convert a quantity string to a number.

    Args:
        raw: Trimmed quantity string ("" means no quantity)

    Returns:
        float, or None for an empty string

    Raises:
        ValidationError: If the string is not a number
    """
    if raw == "":
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid ingredient quantity: {raw!r}") from e


def parse_ingredient(entry: str) -> Ingredient:
    """
    Parse one "quantity,unit,description" entry.

    Raises:
        ValidationError: If the entry does not split into exactly three parts
    """
    parts = [part.strip() for part in entry.split(",")]
    if len(parts) != 3:
        raise ValidationError(INGREDIENT_FORMAT_ERROR)

    quantity, unit, description = parts
    return Ingredient(quantity=parse_quantity(quantity), unit=unit, description=description)


def parse_ingredients(entries: Iterable[str]) -> List[Ingredient]:
    """Parse every entry, failing on the first malformed one."""
    return [parse_ingredient(entry) for entry in entries]
