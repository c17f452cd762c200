"""
Message formatting functions for Telegram bot.
"""
from html import escape
from typing import List

from dinner_picker.models.recipe import FilterCriteria, Recipe
from dinner_picker.services.constants import FIELD_LABELS
from dinner_picker.services.exceptions import ValidationError
from dinner_picker.services.share import format_share_text

ADD_RECIPE_TEMPLATE = (
    "/addrecipe\n"
    "Name: Chicken Tikka Masala\n"
    "Cuisine: indian\n"
    "Meal type: main\n"
    "Cook time: 40\n"
    "Source: NY Times Cooking\n"
    "Ingredients:\n"
    "1 lb chicken breast\n"
    "2 cups kale\n"
    "3 cloves garlic"
)

def format_error_message(error: Exception) -> str:
    """Format error message for user display."""
    return (
        "❌ Sorry, something went wrong.\n"
        "Please try again later."
    )

def format_store_error() -> str:
    """Message shown when the recipe store cannot be reached."""
    return (
        "⚠️ Couldn't reach the recipe box right now.\n"
        "Send /refresh to try again."
    )

def format_empty_selection() -> str:
    """Message shown when no recipe matches the active filters."""
    return "🤷 No recipes match your filters! Try /clearfilters or /filters."

def format_validation_error(error: ValidationError) -> str:
    """
    Format add-recipe validation problems with the form to resend.

    Args:
        error: Validation error raised by recipe creation

    Returns:
        Field-level guidance followed by an example form
    """
    lines = [f"⚠️ {escape(str(error))}"]
    if error.missing_fields:
        lines.append("Missing: " + ", ".join(
            f"<b>{FIELD_LABELS.get(name, name)}</b>" for name in error.missing_fields
        ))
    lines.extend(["", "Send the recipe like this:", f"<pre>{escape(ADD_RECIPE_TEMPLATE)}</pre>"])
    return "\n".join(lines)

def format_recipe(recipe: Recipe) -> str:
    """
    Format a picked recipe with its shopping list.

    Args:
        recipe: Recipe to show

    Returns:
        HTML message with name, cook time, categories, ingredients and source
    """
    lines = [
        f"<b>{escape(recipe.name)}</b>",
        f"⏱️ {recipe.cook_time} min • {escape(recipe.cuisine)} • {escape(recipe.meal_type)}",
        "",
        "🛒 <b>Shopping List</b>",
        *[f"• {escape(ingredient)}" for ingredient in recipe.ingredients]
    ]
    if recipe.source:
        lines.extend(["", f"<i>Source: {escape(recipe.source)}</i>"])
    return "\n".join(lines)

def format_share_message(recipe: Recipe) -> str:
    """
    Wrap the shareable text in a monospaced block.

    Telegram copies a monospaced block to the clipboard when it is tapped.
    """
    return (
        "📋 Tap the text below to copy it, then share it with your partner:\n\n"
        f"<pre>{escape(format_share_text(recipe))}</pre>"
    )

def format_filters(criteria: FilterCriteria) -> str:
    """Describe the active filters on a single line."""
    if not criteria.is_active:
        return "No filters set"

    parts = []
    if criteria.cuisine:
        parts.append(f"cuisine: {escape(criteria.cuisine)}")
    if criteria.meal_type:
        parts.append(f"meal: {escape(criteria.meal_type)}")
    if criteria.max_cook_time is not None:
        parts.append(f"max {criteria.max_cook_time} min")
    if criteria.ingredient:
        parts.append(f"with {escape(criteria.ingredient)}")
    return "Filters ✓ " + ", ".join(parts)

def format_available_count(count: int, criteria: FilterCriteria) -> str:
    """Format how many recipes are available, e.g. "3 recipes available with current filters"."""
    noun = "recipe" if count == 1 else "recipes"
    suffix = " with current filters" if criteria.is_active else ""
    return f"{count} {noun} available{suffix}"

def format_filter_overview(
    criteria: FilterCriteria,
    count: int,
    cuisines: List[str],
    meal_types: List[str]
) -> str:
    """
    Format the /filters overview.

    Args:
        criteria: Active filters
        count: Number of recipes matching them
        cuisines: Cuisine options present in the collection
        meal_types: Meal type options present in the collection

    Returns:
        HTML message listing filters, options and usage
    """
    return "\n".join([
        f"🔎 {format_filters(criteria)}",
        format_available_count(count, criteria),
        "",
        f"Cuisines: {escape(', '.join(cuisines)) or '-'}",
        f"Meal types: {escape(', '.join(meal_types)) or '-'}",
        "",
        "Set filters with e.g. <code>/filter cuisine=italian meal=soup time=30 ingredient=kale</code>",
        "Use /clearfilters to remove them."
    ])
