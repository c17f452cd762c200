"""
Keyboard layout definitions for Telegram bot interactions.
"""
from typing import List, Dict, Any
from telegram import InlineKeyboardButton, InlineKeyboardMarkup

PICK_AGAIN_CALLBACK = "pick_again"
SHARE_CALLBACK_PREFIX = "share:"

def to_dict(markup: InlineKeyboardMarkup) -> Dict[str, Any]:
    """
    Convert InlineKeyboardMarkup to a dictionary format that Telegram API expects.

    Args:
        markup: InlineKeyboardMarkup object

    Returns:
        Dictionary representation of the keyboard markup
    """
    return {
        "inline_keyboard": [
            [
                {"text": btn.text, "callback_data": btn.callback_data}
                for btn in row
            ]
            for row in markup.inline_keyboard
        ]
    }

def create_inline_keyboard(buttons: List[List[Dict[str, str]]]) -> Dict[str, Any]:
    """
    Create an inline keyboard from a list of button definitions.

    Args:
        buttons: List of button rows, where each button is a dict with 'text' and 'callback_data'

    Returns:
        Keyboard markup dictionary
    """
    keyboard = [
        [
            InlineKeyboardButton(text=button['text'], callback_data=button['callback_data'])
            for button in row
        ]
        for row in buttons
    ]
    return to_dict(InlineKeyboardMarkup(keyboard))

def create_recipe_keyboard(recipe_id: str) -> Dict[str, Any]:
    """
    Create the buttons shown under a picked recipe.

    Args:
        recipe_id: ID of the recipe being shown

    Returns:
        Keyboard markup with "Copy & Share" and "Pick another" buttons
    """
    return create_inline_keyboard([[
        {'text': '📤 Copy & Share', 'callback_data': f"{SHARE_CALLBACK_PREFIX}{recipe_id}"},
        {'text': '🔄 Pick another', 'callback_data': PICK_AGAIN_CALLBACK}
    ]])
