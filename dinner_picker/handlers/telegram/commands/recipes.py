"""
Telegram recipe box command handlers: /recipes and /refresh.
"""
from typing import Dict, Any

from aws_lambda_powertools import Logger

from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.utils.clients import get_clients
from dinner_picker.utils.telegram import format_available_count, format_store_error
from ..responses import error_response, ok_response

logger = Logger()

def handle_recipes_command(user_id: str, chat_id: str) -> Dict[str, Any]:
    """
    Handle /recipes command: how many recipes the current filters allow.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID

    Returns:
        API Gateway Lambda proxy response
    """
    telegram, recipes, sessions = get_clients()

    try:
        filters = sessions.get_session(user_id).filters
        count = len(recipes.get_candidates(filters))
    except StoreUnavailable as e:
        logger.warning("Recipe store unavailable", extra={
            "user_id": user_id,
            "error": str(e)
        })
        telegram.send_message(chat_id=chat_id, text=format_store_error())
        return error_response(503, "Recipe store unavailable")

    telegram.send_message(
        chat_id=chat_id,
        text=f"🍴 {format_available_count(count, filters)}\nSend /dinner to pick one."
    )
    return ok_response({"count": count})

def handle_refresh_command(user_id: str, chat_id: str) -> Dict[str, Any]:
    """
    Handle /refresh command: reload the recipe snapshot from the store.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID

    Returns:
        API Gateway Lambda proxy response
    """
    telegram, recipes, _ = get_clients()

    try:
        collection = recipes.refresh()
    except StoreUnavailable as e:
        logger.warning("Recipe store unavailable", extra={
            "user_id": user_id,
            "error": str(e)
        })
        telegram.send_message(chat_id=chat_id, text=format_store_error())
        return error_response(503, "Recipe store unavailable")

    telegram.send_message(
        chat_id=chat_id,
        text=f"🔄 Recipe box reloaded: {len(collection)} recipes."
    )
    return ok_response({"count": len(collection)})
