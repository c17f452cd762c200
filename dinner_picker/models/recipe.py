"""
Recipe data models for the dinner picker.

This module provides data structures for representing stored recipes,
validated recipes waiting to be stored, and the transient filter criteria
used when choosing what to cook.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from dinner_picker.services.constants import DEFAULT_SOURCE


@dataclass(frozen=True)
class RecipeDraft:
    """
    Validated recipe that has not been stored yet.

    Produced by recipe creation and handed to the recipe store, which assigns
    the identifier and creation timestamp.

    Attributes:
        name: Recipe name shown to the user
        cuisine: Lowercase cuisine category (e.g. "italian")
        meal_type: Lowercase meal category (e.g. "soup")
        cook_time: Cook time in minutes
        ingredients: Ingredient lines in display order
        main_ingredients: Normalized keyword per ingredient line
        source: Attribution text
    """
    name: str
    cuisine: str
    meal_type: str
    cook_time: int
    ingredients: Tuple[str, ...]
    main_ingredients: Tuple[str, ...]
    source: str


@dataclass(frozen=True)
class Recipe:
    """
    Stored recipe.

    Recipes are immutable once created; there is no edit or delete.

    Attributes:
        id: Stable identifier assigned at creation
        name: Recipe name shown to the user
        cuisine: Lowercase cuisine category
        meal_type: Lowercase meal category
        cook_time: Cook time in minutes
        ingredients: Ingredient lines in display order
        main_ingredients: Normalized keyword per ingredient line
        source: Attribution text
        created_at: ISO format timestamp of creation
    """
    id: str
    name: str
    cuisine: str
    meal_type: str
    cook_time: int
    ingredients: Tuple[str, ...]
    main_ingredients: Tuple[str, ...] = ()
    source: str = DEFAULT_SOURCE
    created_at: str = ""

    @classmethod
    def from_draft(cls, draft: RecipeDraft, recipe_id: str, created_at: str) -> "Recipe":
        """Build a stored recipe from a draft and its store-assigned identity."""
        return cls(
            id=recipe_id,
            name=draft.name,
            cuisine=draft.cuisine,
            meal_type=draft.meal_type,
            cook_time=draft.cook_time,
            ingredients=draft.ingredients,
            main_ingredients=draft.main_ingredients,
            source=draft.source,
            created_at=created_at
        )

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "Recipe":
        """
        Build a recipe from a DynamoDB item.

        DynamoDB returns numbers as Decimal, so cook_time is coerced to int.
        """
        return cls(
            id=str(item["recipe_id"]),
            name=item["name"],
            cuisine=item["cuisine"],
            meal_type=item["meal_type"],
            cook_time=int(item["cook_time"]),
            ingredients=tuple(item.get("ingredients", [])),
            main_ingredients=tuple(item.get("main_ingredients", [])),
            source=item.get("source") or DEFAULT_SOURCE,
            created_at=item.get("created_at", "")
        )

    def to_item(self) -> Dict[str, Any]:
        """Convert to the attribute map stored in DynamoDB (without keys)."""
        return {
            "recipe_id": self.id,
            "name": self.name,
            "cuisine": self.cuisine,
            "meal_type": self.meal_type,
            "cook_time": self.cook_time,
            "ingredients": list(self.ingredients),
            "main_ingredients": list(self.main_ingredients),
            "source": self.source,
            "created_at": self.created_at
        }


@dataclass(frozen=True)
class FilterCriteria:
    """
    Transient filter applied to the recipe collection.

    Empty or None fields impose no constraint.

    Attributes:
        cuisine: Exact cuisine to match
        meal_type: Exact meal type to match
        max_cook_time: Inclusive upper bound on cook time in minutes
        ingredient: Case-insensitive substring searched in every ingredient line
    """
    cuisine: Optional[str] = None
    meal_type: Optional[str] = None
    max_cook_time: Optional[int] = None
    ingredient: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Whether any constraint is set."""
        return bool(self.cuisine or self.meal_type or self.ingredient) or self.max_cook_time is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary, dropping unset fields."""
        data = {
            "cuisine": self.cuisine,
            "meal_type": self.meal_type,
            "max_cook_time": self.max_cook_time,
            "ingredient": self.ingredient
        }
        return {key: value for key, value in data.items() if value not in (None, "")}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FilterCriteria":
        """Build criteria from a stored dictionary; missing keys mean no constraint."""
        data = data or {}
        max_cook_time = data.get("max_cook_time")
        return cls(
            cuisine=data.get("cuisine") or None,
            meal_type=data.get("meal_type") or None,
            max_cook_time=int(max_cook_time) if max_cook_time is not None else None,
            ingredient=data.get("ingredient") or None
        )
