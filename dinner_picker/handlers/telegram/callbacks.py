"""
Telegram callback query handlers.
"""
from typing import Dict, Any

import requests
from aws_lambda_powertools import Logger

from dinner_picker.utils.clients import get_telegram
from dinner_picker.utils.logging import log_exception
from dinner_picker.utils.telegram import parse_callback_data
from dinner_picker.utils.telegram.keyboards import PICK_AGAIN_CALLBACK
from .commands import handle_dinner_command, handle_share_command
from .responses import error_response

logger = Logger()

def handle_callback_query(callback_query: Dict[str, Any]) -> Dict[str, Any]:
    """
    Handle callback queries from the recipe keyboard.

    Args:
        callback_query: Telegram callback_query object

    Returns:
        API Gateway Lambda proxy response
    """
    telegram = get_telegram()
    chat_id = str(callback_query["message"]["chat"]["id"])
    user_id = str(callback_query["from"]["id"])
    data = parse_callback_data(callback_query.get("data", ""))

    try:
        telegram.answer_callback_query(callback_query["id"])
    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 429:
            raise
        # Stale queries ("query is too old") only lose the button spinner
        log_exception(logger, "Could not answer callback query", extra={
            "user_id": user_id,
            "callback_query_id": callback_query["id"],
            "error_details": str(e)
        })

    if data["action"] == PICK_AGAIN_CALLBACK:
        return handle_dinner_command(user_id, chat_id)
    if data["action"] == "share":
        return handle_share_command(user_id, chat_id, data["recipe_id"])

    logger.warning("Unknown callback action", extra={
        "user_id": user_id,
        "callback_data": callback_query.get("data")
    })
    return error_response(400, "Unknown callback action")
