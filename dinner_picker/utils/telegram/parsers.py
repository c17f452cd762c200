"""
Parsing functions for Telegram bot messages and data.
"""
from typing import Any, Dict, List, Optional, Tuple

from dinner_picker.models.recipe_form import RecipeForm
from dinner_picker.services.constants import FILTER_ALIASES
from .keyboards import SHARE_CALLBACK_PREFIX
from .validators import validate_category, validate_max_cook_time

# Form labels (lowercased, spaces removed) mapped to RecipeForm fields
FORM_FIELD_ALIASES = {
    "name": "name",
    "recipe": "name",
    "recipename": "name",
    "cuisine": "cuisine",
    "mealtype": "meal_type",
    "meal": "meal_type",
    "cooktime": "cook_time",
    "time": "cook_time",
    "source": "source",
    "ingredients": "ingredients"
}

def parse_command(text: str) -> Tuple[str, List[str]]:
    """
    Parse command and arguments from message text.

    Handles both direct commands (/dinner) and group commands with bot username
    (/dinner@BotUsername). The @BotUsername suffix is stripped from the command
    for consistent handling.

    Args:
        text: Raw message text from Telegram update

    Returns:
        Tuple of (command, arguments)

    Example:
        >>> parse_command("/filter@MyBot cuisine=thai")
        ("/filter", ["cuisine=thai"])
        >>> parse_command("/help")
        ("/help", [])
    """
    parts = text.split()
    if not parts:
        return "", []
    command = parts[0].lower().split('@')[0]
    args = parts[1:] if len(parts) > 1 else []

    return command, args

def parse_callback_data(callback_data: str) -> Dict[str, Any]:
    """
    Parse callback data from button presses.

    Args:
        callback_data: Raw callback data, e.g. "pick_again" or "share:<recipe_id>"

    Returns:
        Dict with "action" and, for share buttons, "recipe_id"
    """
    if callback_data.startswith(SHARE_CALLBACK_PREFIX):
        return {"action": "share", "recipe_id": callback_data[len(SHARE_CALLBACK_PREFIX):]}
    return {"action": callback_data}

def parse_filter_args(args: List[str]) -> Dict[str, Optional[Any]]:
    """
    Parse /filter arguments into FilterCriteria field updates.

    Words without "=" continue the previous value, so multi-word
    ingredients work ("ingredient=olive oil"). An empty value clears
    that filter.

    Args:
        args: Command arguments, e.g. ["cuisine=Italian", "time=30"]

    Returns:
        Mapping of FilterCriteria field name to new value (None clears)

    Raises:
        ValueError: If an argument is malformed or names an unknown filter

    Example:
        >>> parse_filter_args(["cuisine=Italian", "time=30"])
        {"cuisine": "italian", "max_cook_time": 30}
    """
    raw: Dict[str, str] = {}
    current: Optional[str] = None
    for arg in args:
        if "=" in arg:
            key, value = arg.split("=", 1)
            field_name = FILTER_ALIASES.get(key.strip().lower())
            if field_name is None:
                raise ValueError(f"Unknown filter '{key}'. Use cuisine, meal, time or ingredient.")
            raw[field_name] = value
            current = field_name
        elif current is not None:
            raw[current] = f"{raw[current]} {arg}".strip()
        else:
            raise ValueError(f"Expected name=value, got '{arg}'")

    updates: Dict[str, Optional[Any]] = {}
    for field_name, value in raw.items():
        if field_name == "max_cook_time":
            updates[field_name] = validate_max_cook_time(value)
        elif field_name == "ingredient":
            updates[field_name] = value.strip() or None
        else:
            updates[field_name] = validate_category(value)
    return updates

def parse_recipe_form(text: str) -> RecipeForm:
    """
    Parse an /addrecipe message into raw form fields.

    The message starts with the command. "Label: value" lines fill the matching
    fields; once an "Ingredients:" line is seen, every following line is an
    ingredient line.

    Args:
        text: Full message text

    Returns:
        RecipeForm with whatever fields were found (blanks are left empty)

    Example:
        >>> form = parse_recipe_form("/addrecipe\\nName: Dal\\nIngredients:\\n1 cup lentils")
        >>> form.name, form.ingredients
        ('Dal', '1 cup lentils')
    """
    first_line, *lines = text.splitlines() or [""]
    command_parts = first_line.split(None, 1)
    if len(command_parts) > 1:
        lines.insert(0, command_parts[1])

    fields: Dict[str, str] = {}
    ingredient_lines: List[str] = []
    in_ingredients = False

    for line in lines:
        if in_ingredients:
            ingredient_lines.append(line)
            continue
        label, sep, value = line.partition(":")
        field_name = FORM_FIELD_ALIASES.get(label.strip().lower().replace(" ", "").replace("_", ""))
        if not sep or field_name is None:
            continue
        if field_name == "ingredients":
            in_ingredients = True
            if value.strip():
                ingredient_lines.append(value)
        else:
            fields[field_name] = value.strip()

    return RecipeForm(ingredients="\n".join(ingredient_lines), **fields)
