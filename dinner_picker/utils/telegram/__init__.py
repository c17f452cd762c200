"""
Telegram utilities package.
"""
from .formatters import (
    format_error_message,
    format_store_error,
    format_empty_selection,
    format_validation_error,
    format_recipe,
    format_share_message,
    format_filters,
    format_available_count,
    format_filter_overview
)
from .keyboards import (
    create_inline_keyboard,
    create_recipe_keyboard
)
from .parsers import (
    parse_command,
    parse_callback_data,
    parse_filter_args,
    parse_recipe_form
)
from .validators import (
    validate_max_cook_time,
    validate_category
)
from .client import TelegramClient

__all__ = [
    "TelegramClient",
    "format_error_message",
    "format_store_error",
    "format_empty_selection",
    "format_validation_error",
    "format_recipe",
    "format_share_message",
    "format_filters",
    "format_available_count",
    "format_filter_overview",
    "create_inline_keyboard",
    "create_recipe_keyboard",
    "parse_command",
    "parse_callback_data",
    "parse_filter_args",
    "parse_recipe_form",
    "validate_max_cook_time",
    "validate_category"
]
