"""
Centralized command definitions for Telegram bot.

This module provides a single source of truth for all bot commands,
their descriptions, and formatting for different contexts.

Typical usage:
    from dinner_picker.utils.telegram.command_definitions import get_help_message, get_start_message
    help_text = get_help_message()
    start_text = get_start_message(is_private_chat=True)
"""
from typing import List, NamedTuple
from dataclasses import dataclass

@dataclass
class Command:
    """
    Represents a Telegram bot command with its description.

    Attributes:
        name: Command name without leading slash
        description: User-friendly description of what the command does
        format: Optional format specification (e.g., "cuisine=italian")
    """
    name: str
    description: str
    format: str = ""

class CommandCategory(NamedTuple):
    """
    Group of related commands with a category title.

    Attributes:
        emoji: Category emoji for visual distinction
        title: Category name (e.g., "Basic Commands")
        commands: List of Command objects in this category
    """
    emoji: str
    title: str
    commands: List[Command]

COMMAND_CATEGORIES = [
    CommandCategory(
        emoji="🚀",
        title="Basic Commands",
        commands=[
            Command("start", "Start interacting with the bot"),
            Command("help", "Show this help message")
        ]
    ),
    CommandCategory(
        emoji="🍽️",
        title="Dinner Commands",
        commands=[
            Command("dinner", "Pick a random recipe for tonight"),
            Command("share", "Get the shopping list of the last pick to share"),
            Command("recipes", "Count the recipes matching your filters")
        ]
    ),
    CommandCategory(
        emoji="🔎",
        title="Filter Commands",
        commands=[
            Command(
                "filter",
                "Set filters",
                format="cuisine=... meal=... time=... ingredient=..."
            ),
            Command("filters", "Show your filters and the available options"),
            Command("clearfilters", "Clear all filters")
        ]
    ),
    CommandCategory(
        emoji="📝",
        title="Recipe Box Commands",
        commands=[
            Command("addrecipe", "Add a recipe (send without details to see the form)"),
            Command("refresh", "Reload the recipe box")
        ]
    )
]

def _format_command(cmd: Command) -> str:
    command_text = f"/{cmd.name}"
    if cmd.format:
        command_text += f" {cmd.format}"
    return f"{command_text} - {cmd.description}"

def get_help_message() -> str:
    """
    Generate the help message showing all available commands.

    Returns:
        Formatted help message string with categories and commands.
    """
    sections = ["Available commands:\n"]

    for category in COMMAND_CATEGORIES:
        sections.append(f"\n{category.emoji} {category.title}:")
        sections.extend(_format_command(cmd) for cmd in category.commands)

    return "\n".join(sections)

def get_start_message(is_private_chat: bool = True) -> str:
    """
    Generate the start message appropriate for chat type.

    Args:
        is_private_chat: Whether this is a private chat (vs group)

    Returns:
        Appropriate welcome message with or without command list
    """
    if not is_private_chat:
        return "Hi! I'm here to decide what's for dinner. 🍽️ Send /dinner to get a pick."

    sections = [
        "Hi! Let me decide what's for dinner so you don't have to. 🍽️\n",
        "You can use these commands:\n"
    ]

    for category in COMMAND_CATEGORIES:
        sections.append(f"\n{category.emoji} {category.title}:")
        sections.extend(_format_command(cmd) for cmd in category.commands)

    return "\n".join(sections)
