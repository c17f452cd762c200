"""
Shareable shopping-list summary of a recipe.
"""
from dinner_picker.models.recipe import Recipe
from dinner_picker.services.constants import DEFAULT_SOURCE, SHARE_ICONS


def format_share_text(recipe: Recipe) -> str:
    """
    Render the plain-text summary a user sends to whoever does the shopping.

    Args:
        recipe: Selected recipe

    Returns:
        Name, bulleted ingredient list, cook time, cuisine and source

    Example:
        >>> print(format_share_text(recipe))
        🍽️ Tonight's Dinner: Dal

        📋 Shopping List:
        • 1 cup lentils
        • 2 tsp cumin

        ⏱️ Cook Time: 25 minutes
        🌍 Cuisine: indian
        📖 Source: Personal collection
    """
    lines = [
        f"{SHARE_ICONS['dinner']} Tonight's Dinner: {recipe.name}",
        "",
        f"{SHARE_ICONS['shopping']} Shopping List:",
        *[f"• {ingredient}" for ingredient in recipe.ingredients],
        "",
        f"{SHARE_ICONS['time']} Cook Time: {recipe.cook_time} minutes",
        f"{SHARE_ICONS['cuisine']} Cuisine: {recipe.cuisine}",
        f"{SHARE_ICONS['source']} Source: {recipe.source or DEFAULT_SOURCE}"
    ]
    return "\n".join(lines)
