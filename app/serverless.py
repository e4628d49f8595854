import asyncio
import base64
import binascii
from app.core.logging import setup_logging_from_settings
from app.handler import handle

def decode_event_body(event: dict):
    """Return the raw request body from a function event."""
    body = event.get("body")
    if body is not None and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body)
        except (binascii.Error, ValueError):
            # handed to the JSON parser, which rejects it with a 400
            return body
    return body

def handler(event, context=None):
    """Entry point for function platforms (Netlify, AWS Lambda proxy events)."""
    setup_logging_from_settings()

    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method") or "POST"
    response = asyncio.run(handle(method, decode_event_body(event)))
    return response.to_event_response()
