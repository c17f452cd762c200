"""
Input validation utilities for Telegram bot.
"""
from typing import Optional

def validate_max_cook_time(value: str) -> Optional[int]:
    """
    Validate a maximum cook time filter value.

    Args:
        value: Minutes as typed by the user; blank clears the filter

    Returns:
        Minutes as int, or None when blank

    Raises:
        ValueError: If the value is not a non-negative whole number
    """
    value = value.strip()
    if not value:
        return None
    try:
        minutes = int(value)
    except ValueError:
        raise ValueError(f"Max cook time must be a number of minutes, got '{value}'")
    if minutes < 0:
        raise ValueError("Max cook time cannot be negative")
    return minutes

def validate_category(value: str) -> Optional[str]:
    """
    Normalize a cuisine or meal type filter value.

    Stored categories are lowercase, so the value is lowercased too.
    Blank clears the filter.
    """
    value = value.strip().lower()
    return value or None
