"""
Telegram API client implementation.
"""
import os
from typing import Dict, Any, Optional
import json
import requests

class TelegramClient:
    """Client for interacting with Telegram Bot API."""

    def __init__(self):
        self.token = os.environ["TELEGRAM_BOT_TOKEN"]
        self.base_url = f"https://api.telegram.org/bot{self.token}"

    def send_message(
        self,
        chat_id: str,
        text: str,
        reply_markup: Optional[Dict[str, Any]] = None,
        parse_mode: str = "HTML"
    ) -> Dict[str, Any]:
        """
        Send a message to a specific chat.

        Args:
            chat_id: Telegram chat ID
            text: Message text
            reply_markup: Optional keyboard markup
            parse_mode: Telegram parse mode

        Returns:
            API Gateway Lambda proxy response wrapping the Telegram result
        """
        data = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": parse_mode
        }
        if reply_markup:
            data["reply_markup"] = reply_markup

        response = requests.post(
            f"{self.base_url}/sendMessage",
            json=data
        )
        if response.status_code == 429:
            # Let the error propagate so Lambda returns non-200 status
            # This allows Telegram's retry mechanism to work
            response.raise_for_status()
        return {
            "statusCode": 200,
            "headers": {
                "Content-Type": "application/json"
            },
            "body": json.dumps({"ok": True, "result": response.json()})
        }

    def answer_callback_query(
        self,
        callback_query_id: str,
        text: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Acknowledge an inline button press so the client stops its spinner.

        Args:
            callback_query_id: ID of the callback query to answer
            text: Optional notification shown to the user

        Returns:
            Response wrapper consistent with send_message
        """
        data: Dict[str, Any] = {"callback_query_id": callback_query_id}
        if text:
            data["text"] = text

        response = requests.post(
            f"{self.base_url}/answerCallbackQuery",
            json=data
        )
        response.raise_for_status()
        return {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"ok": True, "result": response.json()})
        }
