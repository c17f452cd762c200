"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the application. They
live for as long as the Lambda container stays warm, so the recipe snapshot
held by the recipe service is reused across invocations.
"""
from dinner_picker.utils.telegram import TelegramClient
from dinner_picker.utils.dynamo import get_dynamo
from dinner_picker.services.recipe import RecipeService
from dinner_picker.services.recipe_store import RecipeStore
from dinner_picker.services.session import SessionStore

# Initialize shared clients (lazy loading)
_telegram = None
_recipes = None
_sessions = None

def get_telegram() -> TelegramClient:
    """Get or create Telegram client."""
    global _telegram
    if _telegram is None:
        _telegram = TelegramClient()
    return _telegram

def get_recipe_service() -> RecipeService:
    """Get or create the recipe service holding the recipe snapshot."""
    global _recipes
    if _recipes is None:
        _recipes = RecipeService(RecipeStore(get_dynamo()))
    return _recipes

def get_session_store() -> SessionStore:
    """Get or create the chat session store."""
    global _sessions
    if _sessions is None:
        _sessions = SessionStore(get_dynamo())
    return _sessions

def get_clients():
    """Get Telegram client, recipe service and session store."""
    return get_telegram(), get_recipe_service(), get_session_store()
