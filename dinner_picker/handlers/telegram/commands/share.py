"""
Telegram /share command handler.
"""
from typing import Dict, Any, Optional

from aws_lambda_powertools import Logger

from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.utils.clients import get_clients
from dinner_picker.utils.telegram import format_share_message, format_store_error
from ..responses import error_response, ok_response

logger = Logger()

def handle_share_command(
    user_id: str,
    chat_id: str,
    recipe_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Send the shareable shopping-list text of a recipe.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID
        recipe_id: Recipe to share; defaults to the user's last pick

    Returns:
        API Gateway Lambda proxy response
    """
    telegram, recipes, sessions = get_clients()

    try:
        if recipe_id is None:
            recipe_id = sessions.get_session(user_id).last_selected_id
        if not recipe_id:
            telegram.send_message(
                chat_id=chat_id,
                text="Nothing picked yet. Send /dinner first."
            )
            return error_response(404, "No recipe to share")

        recipe = recipes.get_recipe_by_id(recipe_id)
        if recipe is None:
            # Added through another container since this snapshot was taken
            recipes.refresh()
            recipe = recipes.get_recipe_by_id(recipe_id)
    except StoreUnavailable as e:
        logger.warning("Recipe store unavailable", extra={
            "user_id": user_id,
            "error": str(e)
        })
        telegram.send_message(chat_id=chat_id, text=format_store_error())
        return error_response(503, "Recipe store unavailable")

    if recipe is None:
        telegram.send_message(
            chat_id=chat_id,
            text="That recipe is no longer in the recipe box. Send /dinner for a new pick."
        )
        return error_response(404, "Recipe not found")

    logger.info("Sharing recipe", extra={
        "user_id": user_id,
        "recipe_id": recipe.id
    })
    telegram.send_message(chat_id=chat_id, text=format_share_message(recipe))
    return ok_response({"recipe_id": recipe.id})
