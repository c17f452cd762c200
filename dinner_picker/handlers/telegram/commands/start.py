"""
Telegram /start command handler.
"""
from typing import Dict, Any

from aws_lambda_powertools import Logger
from dinner_picker.utils.clients import get_telegram
from dinner_picker.utils.telegram.command_definitions import get_start_message
from ..responses import ok_response

logger = Logger()

def handle_start_command(user_id: str, chat_id: str) -> Dict[str, Any]:
    """
    Handle /start command.

    For users in private chats, displays welcome message with available commands.
    For group chats, displays a short welcome message.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID

    Returns:
        API Gateway Lambda proxy response
    """
    # Group chat ids are negative
    is_group = str(chat_id).startswith('-')

    logger.info(
        "New interaction started",
        extra={
            "user_id": user_id,
            "chat_id": chat_id,
            "command": "/start",
            "chat_type": "group" if is_group else "private"
        }
    )

    get_telegram().send_message(
        chat_id=chat_id,
        text=get_start_message(is_private_chat=not is_group)
    )
    return ok_response()
