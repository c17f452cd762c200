"""
API Gateway Lambda proxy responses for the Telegram webhook.
"""
import json
from typing import Any, Dict

def ok_response(result: Any = True) -> Dict[str, Any]:
    """Successful webhook response."""
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "application/json"
        },
        "body": json.dumps({"ok": True, "result": result}),
        "isBase64Encoded": False
    }

def error_response(
    error_code: int,
    description: str,
    status_code: int = 200
) -> Dict[str, Any]:
    """
    Failed webhook response.

    The HTTP status stays 200 by default so Telegram does not redeliver the
    update forever; the failure is described in the body instead.
    """
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json"
        },
        "body": json.dumps({
            "ok": False,
            "error_code": error_code,
            "description": description
        }),
        "isBase64Encoded": False
    }

def rate_limited_response() -> Dict[str, Any]:
    """Propagate a Telegram 429 so its retry mechanism kicks in."""
    return error_response(429, "Rate limit exceeded", status_code=429)
