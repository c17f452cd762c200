"""
Main telegram webhook handler.
"""
import json
import requests
from typing import Dict, Any

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from dinner_picker.utils.clients import get_telegram
from dinner_picker.utils.telegram import parse_command, format_error_message
from dinner_picker.utils.logging import logger, log_exception
from .commands import (
    handle_start_command,
    handle_help_command,
    handle_dinner_command,
    handle_filter_command,
    handle_filters_command,
    handle_clearfilters_command,
    handle_addrecipe_command,
    handle_share_command,
    handle_recipes_command,
    handle_refresh_command
)
from .callbacks import handle_callback_query
from .responses import error_response, ok_response, rate_limited_response

tracer = Tracer(service="dinner_picker")

@tracer.capture_lambda_handler
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Handle incoming Telegram webhook requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    logger.set_correlation_id(context.aws_request_id)
    logger.append_keys(lambda_context={
        "function_version": context.function_version,
        "invoked_function_arn": context.invoked_function_arn,
        "aws_request_id": context.aws_request_id
    })

    logger.info("Lambda function invoked")

    try:
        body = json.loads(event["body"])

        logger.debug("Parsed webhook body", extra={
            "webhook_body": body,
            "message_type": "callback_query" if "callback_query" in body else "message" if "message" in body else "unknown"
        })

        if "callback_query" in body:
            callback = body["callback_query"]
            logger.info("Received callback query", extra={
                "user_id": str(callback["from"]["id"]),
                "chat_id": str(callback["message"]["chat"]["id"]),
                "callback_data": callback.get("data"),
                "callback_query_id": callback.get("id")
            })
            return handle_callback_query(callback)

        if "message" in body:
            return handle_message(body["message"])

        return ok_response()

    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 429:
            # Propagate 429 status to trigger Telegram's retry mechanism
            return rate_limited_response()
        raise
    except Exception as e:
        log_exception(logger, "Error processing webhook", extra={
            "error_type": type(e).__name__,
            "error_details": str(e)
        })
        # Keep 200 for other errors to avoid infinite retries
        return error_response(500, str(e))

def handle_message(message: Dict[str, Any]) -> Dict[str, Any]:
    """Handle incoming text messages."""
    chat_id = str(message["chat"]["id"])
    user_id = str(message["from"]["id"])
    text = message.get("text", "")

    if not text.strip():
        return error_response(400, "No text in message")

    command, args = parse_command(text)
    logger.info("Received message", extra={
        "user_id": user_id,
        "chat_id": chat_id,
        "chat_type": message["chat"].get("type", "private"),
        "command": command if command.startswith("/") else None
    })

    telegram = get_telegram()

    try:
        if command == "/start":
            return handle_start_command(user_id, chat_id)

        elif command == "/help":
            return handle_help_command(user_id, chat_id)

        elif command == "/dinner":
            return handle_dinner_command(user_id, chat_id)

        elif command == "/filter":
            return handle_filter_command(user_id, chat_id, args)

        elif command == "/filters":
            return handle_filters_command(user_id, chat_id)

        elif command == "/clearfilters":
            return handle_clearfilters_command(user_id, chat_id)

        elif command == "/addrecipe":
            return handle_addrecipe_command(user_id, chat_id, text)

        elif command == "/share":
            return handle_share_command(user_id, chat_id)

        elif command == "/recipes":
            return handle_recipes_command(user_id, chat_id)

        elif command == "/refresh":
            return handle_refresh_command(user_id, chat_id)

        else:
            return telegram.send_message(
                chat_id=chat_id,
                text="Unrecognized command. Use /help to see available commands."
            )

    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 429:
            return rate_limited_response()
        raise
    except Exception as e:
        log_exception(logger, f"Error handling command {command}", extra={
            "command": command,
            "chat_id": chat_id,
            "error_type": type(e).__name__,
            "error_details": str(e)
        })
        telegram.send_message(
            chat_id=chat_id,
            text=format_error_message(e)
        )
        return error_response(500, str(e))
