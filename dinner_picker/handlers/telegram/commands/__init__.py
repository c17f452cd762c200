"""
Telegram command handlers package.
"""
from .start import handle_start_command
from .help import handle_help_command
from .dinner import handle_dinner_command
from .filters import (
    handle_filter_command,
    handle_filters_command,
    handle_clearfilters_command
)
from .add_recipe import handle_addrecipe_command
from .share import handle_share_command
from .recipes import handle_recipes_command, handle_refresh_command

__all__ = [
    "handle_start_command",
    "handle_help_command",
    "handle_dinner_command",
    "handle_filter_command",
    "handle_filters_command",
    "handle_clearfilters_command",
    "handle_addrecipe_command",
    "handle_share_command",
    "handle_recipes_command",
    "handle_refresh_command"
]
