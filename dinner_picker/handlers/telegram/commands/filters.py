"""
Telegram filter command handlers: /filter, /filters and /clearfilters.
"""
from dataclasses import replace
from html import escape
from typing import Dict, Any, List

from aws_lambda_powertools import Logger

from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.services.recipe_filter import cuisine_options, meal_type_options
from dinner_picker.utils.clients import get_clients
from dinner_picker.utils.telegram import (
    format_available_count,
    format_filter_overview,
    format_filters,
    format_store_error,
    parse_filter_args
)
from ..responses import error_response, ok_response

logger = Logger()

def handle_filter_command(user_id: str, chat_id: str, args: List[str]) -> Dict[str, Any]:
    """
    Handle /filter command, e.g. "/filter cuisine=italian time=30".

    Given filters replace the matching ones; others are kept.
    Without arguments this shows the filter overview.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID
        args: name=value arguments

    Returns:
        API Gateway Lambda proxy response
    """
    if not args:
        return handle_filters_command(user_id, chat_id)

    telegram, recipes, sessions = get_clients()

    try:
        updates = parse_filter_args(args)
    except ValueError as e:
        telegram.send_message(chat_id=chat_id, text=f"⚠️ {escape(str(e))}")
        return error_response(400, str(e))

    try:
        session = sessions.get_session(user_id)
        filters = replace(session.filters, **updates)
        sessions.save_filters(user_id, filters)
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
        text=f"🔎 {format_filters(filters)}\n{format_available_count(count, filters)}"
    )
    return ok_response({"filters": filters.to_dict(), "count": count})

def handle_filters_command(user_id: str, chat_id: str) -> Dict[str, Any]:
    """
    Handle /filters command: active filters, available options and count.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID

    Returns:
        API Gateway Lambda proxy response
    """
    telegram, recipes, sessions = get_clients()

    try:
        filters = sessions.get_session(user_id).filters
        collection = recipes.recipes
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
        text=format_filter_overview(
            filters,
            count,
            cuisine_options(collection),
            meal_type_options(collection)
        )
    )
    return ok_response({"filters": filters.to_dict(), "count": count})

def handle_clearfilters_command(user_id: str, chat_id: str) -> Dict[str, Any]:
    """
    Handle /clearfilters command.

    Args:
        user_id: Telegram user ID
        chat_id: Telegram chat ID

    Returns:
        API Gateway Lambda proxy response
    """
    telegram, _, sessions = get_clients()

    try:
        sessions.clear_filters(user_id)
    except StoreUnavailable as e:
        logger.warning("Recipe store unavailable", extra={
            "user_id": user_id,
            "error": str(e)
        })
        telegram.send_message(chat_id=chat_id, text=format_store_error())
        return error_response(503, "Recipe store unavailable")

    telegram.send_message(chat_id=chat_id, text="🧹 All filters cleared.")
    return ok_response()
