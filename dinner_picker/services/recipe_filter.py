"""
Recipe filtering.

Pure functions over an in-memory recipe collection: they never mutate their
inputs and never raise for an empty result.

Typical usage:
    criteria = FilterCriteria(cuisine="italian", max_cook_time=30)
    candidates = filter_recipes(recipes, criteria)
"""
from typing import Iterable, List, Sequence

from dinner_picker.models.recipe import FilterCriteria, Recipe


def matches_criteria(recipe: Recipe, criteria: FilterCriteria) -> bool:
    """
    Check whether a recipe satisfies every active constraint.

    Args:
        recipe: Recipe to test
        criteria: Filter criteria; unset fields impose no constraint

    Returns:
        True if the recipe passes all active constraints
    """
    if criteria.cuisine and recipe.cuisine != criteria.cuisine:
        return False
    if criteria.meal_type and recipe.meal_type != criteria.meal_type:
        return False
    if criteria.max_cook_time is not None and recipe.cook_time > criteria.max_cook_time:
        return False
    if criteria.ingredient:
        needle = criteria.ingredient.casefold()
        if not any(needle in line.casefold() for line in recipe.ingredients):
            return False
    return True


def filter_recipes(recipes: Sequence[Recipe], criteria: FilterCriteria) -> List[Recipe]:
    """
    Return the recipes matching the criteria, in their original order.

    Args:
        recipes: Full recipe collection
        criteria: Filter criteria

    Returns:
        New list holding the matching recipes

    Example:
        >>> filter_recipes(recipes, FilterCriteria())  # no filters
        [...]  # same recipes, same order
    """
    return [recipe for recipe in recipes if matches_criteria(recipe, criteria)]


def cuisine_options(recipes: Iterable[Recipe]) -> List[str]:
    """Distinct cuisines in the collection, sorted."""
    return sorted({recipe.cuisine for recipe in recipes})


def meal_type_options(recipes: Iterable[Recipe]) -> List[str]:
    """Distinct meal types in the collection, sorted."""
    return sorted({recipe.meal_type for recipe in recipes})
