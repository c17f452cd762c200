"""
Validation and normalization of user-entered recipes.

Turns a raw RecipeForm into a RecipeDraft ready to be stored. Storage itself
is handled by the recipe store.
"""
import re
from typing import List

from dinner_picker.models.recipe import RecipeDraft
from dinner_picker.models.recipe_form import RecipeForm
from dinner_picker.services.constants import DEFAULT_SOURCE, FIELD_LABELS, REQUIRED_RECIPE_FIELDS
from dinner_picker.services.exceptions import ValidationError

# First contiguous run of letters and spaces in an ingredient line
_MAIN_INGREDIENT_PATTERN = re.compile(r"[a-zA-Z\s]+")


def extract_main_ingredient(line: str) -> str:
    """
    Extract a coarse keyword from an ingredient line.

    Args:
        line: Ingredient line (e.g. "2 cups kale")

    Returns:
        Lowercased first run of letters and spaces, stripped; the whole
        lowercased line if the run is missing or blank

    Example:
        >>> extract_main_ingredient("1 cup lentils")
        'cup lentils'
        >>> extract_main_ingredient("400g chickpeas, drained")
        'g chickpeas'
    """
    for match in _MAIN_INGREDIENT_PATTERN.finditer(line):
        keyword = match.group(0).strip()
        if keyword:
            return keyword.lower()
    return line.lower()


def split_ingredients(block: str) -> List[str]:
    """Split an ingredients block into its non-blank lines, keeping order."""
    return [line.strip() for line in block.splitlines() if line.strip()]


def parse_cook_time(value: str) -> int:
    """
    Parse a cook time in whole minutes.

    Raises:
        ValidationError: If the value is not a non-negative integer
    """
    try:
        minutes = int(value.strip())
    except ValueError:
        raise ValidationError(f"Cook time must be a whole number of minutes, got '{value}'")
    if minutes < 0:
        raise ValidationError("Cook time cannot be negative")
    return minutes


def create_recipe_draft(form: RecipeForm) -> RecipeDraft:
    """
    Validate raw recipe fields and normalize them into a draft.

    Args:
        form: Raw user-entered fields

    Returns:
        RecipeDraft with lowercased categories, parsed cook time,
        ingredient lines and derived main ingredients

    Raises:
        ValidationError: If required fields are blank or cook time is invalid
    """
    ingredients = split_ingredients(form.ingredients)
    values = form.model_dump()
    values["ingredients"] = "\n".join(ingredients)

    missing = [name for name in REQUIRED_RECIPE_FIELDS if not str(values[name]).strip()]
    if missing:
        labels = ", ".join(FIELD_LABELS[name] for name in missing)
        raise ValidationError(f"Please fill in all required fields: {labels}", missing_fields=missing)

    return RecipeDraft(
        name=form.name.strip(),
        cuisine=form.cuisine.strip().lower(),
        meal_type=form.meal_type.strip().lower(),
        cook_time=parse_cook_time(form.cook_time),
        ingredients=tuple(ingredients),
        main_ingredients=tuple(extract_main_ingredient(line) for line in ingredients),
        source=form.source.strip() or DEFAULT_SOURCE
    )
