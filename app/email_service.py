import asyncio
import logging
from datetime import datetime
from email.errors import HeaderParseError
from email.headerregistry import Address
from email.message import EmailMessage
from email.utils import make_msgid
from typing import Optional
from zoneinfo import ZoneInfo

import aiosmtplib

from app import messages
from app.attachments import ImageAttachment
from app.config import Settings
from app.models.submission import SubmissionRequest
from app.templates import render_submission_email

logger = logging.getLogger(__name__)

def build_transport(settings: Settings) -> aiosmtplib.SMTP:
    """Create an SMTP client for the relay.

    The connection starts in plain text on the submission port and is
    upgraded with STARTTLS; the timeout bounds connect, greeting and every
    socket read.
    """
    return aiosmtplib.SMTP(
        hostname=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.EMAIL_USER,
        password=settings.EMAIL_PASS,
        use_tls=False,
        start_tls=True,
        timeout=settings.SMTP_TIMEOUT,
    )

def reply_address(contact: str) -> Optional[Address]:
    """Parse the submitter's contact as exactly one address.

    Returns None for values the header parser would rewrite, such as ones
    holding commas, angle brackets or comments.
    """
    try:
        return Address(addr_spec=contact)
    except (ValueError, HeaderParseError) as e:
        logger.warning(f"Contact address cannot be used as Reply-To: {e}")
        return None

def compose_message(
    settings: Settings,
    submission: SubmissionRequest,
    attachment: Optional[ImageAttachment] = None,
    submitted_at: Optional[datetime] = None,
) -> EmailMessage:
    """Build the notification the site mailbox sends to itself."""
    if submitted_at is None:
        submitted_at = datetime.now(ZoneInfo(settings.TIMEZONE))

    msg = EmailMessage()
    msg["From"] = Address(display_name=f"{settings.BRAND_NAME}素材提交", addr_spec=settings.EMAIL_USER)
    msg["To"] = settings.EMAIL_USER
    reply_to = reply_address(submission.contactInfo)
    if reply_to is not None:
        msg["Reply-To"] = reply_to
    # header values may not contain line breaks
    title = " ".join(str(submission.materialTitle).splitlines())
    msg["Subject"] = f"{settings.BRAND_NAME} - 新素材提交: {title}"
    msg.set_content(
        render_submission_email(submission, submitted_at, brand_name=settings.BRAND_NAME),
        subtype="html",
    )

    if attachment is not None:
        msg.add_attachment(
            attachment.content,
            maintype=attachment.maintype,
            subtype=attachment.subtype,
            filename=attachment.filename,
        )
    return msg

class SubmissionMailer:
    """Verifies the relay and sends notifications through it."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.transport = build_transport(settings)

    async def verify(self) -> None:
        """Connect, upgrade and authenticate, then disconnect."""
        await self.transport.connect()
        await self.transport.quit()

    async def send(self, message: EmailMessage) -> str:
        """Send a message and return its Message-ID."""
        if message["Message-ID"] is None:
            domain = self.settings.EMAIL_USER.rpartition("@")[2] or None
            message["Message-ID"] = make_msgid(domain=domain)

        await self.transport.connect()
        try:
            await self.transport.send_message(message)
            await self.transport.quit()
        except Exception:
            self.transport.close()
            raise
        logger.info(f"Email sent with id {message['Message-ID']}")
        return str(message["Message-ID"])

def redact_secret(text: str, secret: Optional[str]) -> str:
    if secret:
        return text.replace(secret, "***")
    return text

def classify_transport_error(exc: BaseException, fallback_contact: Optional[str] = None) -> str:
    """Pick the user-facing message for a failed send."""
    text = str(exc)
    if isinstance(exc, aiosmtplib.SMTPAuthenticationError):
        return messages.AUTH_FAILED
    if isinstance(exc, (aiosmtplib.SMTPTimeoutError, asyncio.TimeoutError, TimeoutError)):
        return messages.TIMED_OUT
    if isinstance(exc, (aiosmtplib.SMTPConnectError, aiosmtplib.SMTPServerDisconnected, ConnectionError)):
        return messages.CONNECTION_FAILED
    if "Invalid login" in text:
        return messages.LOGIN_FAILED
    if "Timeout" in text:
        return messages.TIMED_OUT
    return messages.server_error(fallback_contact)
