"""
Telegram /addrecipe command handler.

Typical usage:
    User sends:
        /addrecipe
        Name: Dal
        Cuisine: Indian
        Meal type: Main
        Cook time: 25
        Ingredients:
        1 cup lentils
        2 tsp cumin
    Bot stores the recipe and reloads the recipe box
"""
from typing import Dict, Any

from aws_lambda_powertools import Logger

from dinner_picker.services.exceptions import StoreUnavailable, ValidationError
from dinner_picker.utils.clients import get_clients
from dinner_picker.utils.telegram import (
    format_recipe,
    format_validation_error,
    parse_recipe_form
)
from ..responses import error_response, ok_response

logger = Logger()

def handle_addrecipe_command(user_id: str, chat_id: str, text: str) -> Dict[str, Any]:
    """
    Handle /addrecipe command.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID
        text: Full message text including the form lines

    Returns:
        API Gateway Lambda proxy response
    """
    telegram, recipes, _ = get_clients()
    form = parse_recipe_form(text)

    try:
        recipe = recipes.add_recipe(form)
    except ValidationError as e:
        logger.info("Rejected recipe form", extra={
            "user_id": user_id,
            "missing_fields": e.missing_fields,
            "reason": str(e)
        })
        telegram.send_message(chat_id=chat_id, text=format_validation_error(e))
        return error_response(400, str(e))
    except StoreUnavailable as e:
        logger.warning("Recipe store unavailable", extra={
            "user_id": user_id,
            "error": str(e)
        })
        telegram.send_message(
            chat_id=chat_id,
            text="⚠️ Error adding recipe. Please try again."
        )
        return error_response(503, "Recipe store unavailable")

    logger.info("Recipe added by user", extra={
        "user_id": user_id,
        "recipe_id": recipe.id
    })
    telegram.send_message(
        chat_id=chat_id,
        text=f"✅ Recipe added successfully!\n\n{format_recipe(recipe)}"
    )
    return ok_response({"recipe_id": recipe.id, "name": recipe.name})
