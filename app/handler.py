"""
Submission pipeline shared by the HTTP app and the serverless entry point.

One call handles one request from start to finish: method gate, JSON parse,
field checks, credential check, relay verification, message composition and
send. Every outcome, including unexpected errors, comes back as a
``FunctionResponse``; nothing is raised to the caller.
"""

import json
import logging
from typing import Optional, Union
from pydantic import ValidationError

from app import messages
from app.attachments import parse_image_attachment
from app.config import get_settings
from app.email_service import (
    SubmissionMailer,
    classify_transport_error,
    compose_message,
    redact_secret,
)
from app.models.submission import SubmissionRequest
from app.schemas import FunctionResponse, SubmissionResponse

logger = logging.getLogger(__name__)

def _failure(status_code: int, error: str) -> FunctionResponse:
    return FunctionResponse.from_result(status_code, SubmissionResponse(success=False, error=error))

def parse_body(body: Optional[Union[str, bytes]]):
    """Decode a JSON request body; raises ValueError when it is not JSON."""
    if body is None:
        raise ValueError("Request body is empty")
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return json.loads(body)

async def handle(method: str, body: Optional[Union[str, bytes]] = None) -> FunctionResponse:
    """Process one submission request."""
    method = (method or "").upper()

    # Preflight is answered before anything else is looked at
    if method == "OPTIONS":
        return FunctionResponse(status_code=200)

    if method != "POST":
        return _failure(405, messages.METHOD_NOT_ALLOWED)

    logger.info("Processing material submission")

    try:
        payload = parse_body(body)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.info(f"Rejected request body: {e}")
        return _failure(400, messages.INVALID_BODY)

    submission = SubmissionRequest.from_payload(payload)
    if not submission.has_required_fields():
        logger.info("Rejected submission with missing fields")
        return _failure(400, messages.MISSING_FIELDS)
    if not submission.has_valid_contact():
        logger.info("Rejected submission with invalid contact address")
        return _failure(400, messages.INVALID_EMAIL)

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid settings: {e.error_count()} error(s)")
        return _failure(500, messages.INVALID_CONFIG)

    if not settings.has_credentials:
        logger.error("EMAIL_USER or EMAIL_PASS is not set")
        return _failure(500, messages.MISSING_CREDENTIALS)

    try:
        mailer = SubmissionMailer(settings)

        try:
            logger.info(f"Verifying SMTP connection to {settings.SMTP_HOST}:{settings.SMTP_PORT}")
            await mailer.verify()
        except Exception as e:
            reason = redact_secret(str(e), settings.EMAIL_PASS)
            logger.error(f"SMTP verification failed: {reason}")
            return _failure(500, messages.VERIFY_FAILED.format(reason=reason))
        logger.info("SMTP connection verified")

        attachment = None
        if submission.image:
            attachment = parse_image_attachment(submission.image, submission.imageName, submission.imageType)

        message = compose_message(settings, submission, attachment)
        email_id = await mailer.send(message)
    except Exception as e:
        logger.error(f"Submission relay failed: {redact_secret(str(e), settings.EMAIL_PASS)}", exc_info=True)
        return _failure(500, classify_transport_error(e, settings.fallback_contact))

    return FunctionResponse.from_result(
        200,
        SubmissionResponse(success=True, message=messages.SUBMIT_SUCCESS, emailId=email_id),
    )
