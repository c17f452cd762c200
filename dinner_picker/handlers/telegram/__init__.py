"""
Telegram bot handler package.
"""
from .handler import handler, handle_message
from .callbacks import handle_callback_query

__all__ = [
    "handler",
    "handle_message",
    "handle_callback_query"
]
