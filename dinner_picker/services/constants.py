"""
Constants and shared data for recipe services.
"""
from typing import Dict

# Attribution used when a recipe is added without a source
DEFAULT_SOURCE = "Personal collection"

# Session attribute holding the last shown recipe id (string-encoded)
LAST_SELECTED_KEY = "lastSelectedRecipeId"

# Session attribute holding the chat's active filters
FILTERS_KEY = "filters"

# Names of add-recipe fields that must not be blank, in form order
REQUIRED_RECIPE_FIELDS = ("name", "cuisine", "meal_type", "cook_time", "ingredients")

# Human-readable labels for form fields
FIELD_LABELS: Dict[str, str] = {
    "name": "Name",
    "cuisine": "Cuisine",
    "meal_type": "Meal type",
    "cook_time": "Cook time",
    "ingredients": "Ingredients",
    "source": "Source"
}

# /filter argument names mapped to FilterCriteria fields
FILTER_ALIASES: Dict[str, str] = {
    "cuisine": "cuisine",
    "meal": "meal_type",
    "mealtype": "meal_type",
    "meal_type": "meal_type",
    "time": "max_cook_time",
    "maxtime": "max_cook_time",
    "max_cook_time": "max_cook_time",
    "ingredient": "ingredient"
}

SHARE_ICONS = {
    "dinner": "🍽️",
    "shopping": "📋",
    "time": "⏱️",
    "cuisine": "🌍",
    "source": "📖"
}
