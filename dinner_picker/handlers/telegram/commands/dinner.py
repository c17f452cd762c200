"""
Telegram /dinner command handler.

Picks a random recipe with the chat's filters, avoiding the recipe shown
last time, and remembers the new pick.

Typical usage:
    User sends: /dinner
    Bot responds with a recipe, its shopping list and share/pick-again buttons
"""
from typing import Dict, Any

from aws_lambda_powertools import Logger

from dinner_picker.services.exceptions import EmptySelection, StoreUnavailable
from dinner_picker.utils.clients import get_clients
from dinner_picker.utils.telegram import (
    create_recipe_keyboard,
    format_empty_selection,
    format_recipe,
    format_store_error
)
from ..responses import error_response, ok_response

logger = Logger()

def handle_dinner_command(user_id: str, chat_id: str) -> Dict[str, Any]:
    """
    Handle /dinner command (and the "Pick another" button).

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID

    Returns:
        API Gateway Lambda proxy response
    """
    telegram, recipes, sessions = get_clients()

    try:
        session = sessions.get_session(user_id)
        recipe = recipes.pick_recipe(session.filters, session.last_selected_id)
    except EmptySelection:
        logger.info("No recipes match filters", extra={
            "user_id": user_id,
            "filters": session.filters.to_dict()
        })
        telegram.send_message(chat_id=chat_id, text=format_empty_selection())
        return error_response(404, "No recipes match current constraints")
    except StoreUnavailable as e:
        logger.warning("Recipe store unavailable", extra={
            "user_id": user_id,
            "error": str(e)
        })
        telegram.send_message(chat_id=chat_id, text=format_store_error())
        return error_response(503, "Recipe store unavailable")

    try:
        sessions.remember_selection(user_id, recipe.id)
    except StoreUnavailable as e:
        # The pick is still shown; only the repeat guard is lost for next time
        logger.warning("Could not remember selection", extra={
            "user_id": user_id,
            "recipe_id": recipe.id,
            "error": str(e)
        })

    telegram.send_message(
        chat_id=chat_id,
        text=format_recipe(recipe),
        reply_markup=create_recipe_keyboard(recipe.id)
    )
    return ok_response({"recipe_id": recipe.id})
