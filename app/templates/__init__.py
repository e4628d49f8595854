"""
Email templates for submission notifications.

This package contains:
1. submission_email.html, the notification sent to the site mailbox
2. Helpers that render it with every user field HTML-escaped
"""

from datetime import datetime
from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape
from app.core.config import DEFAULT_IMAGE_NAME
from app.models.submission import SubmissionRequest

TEMPLATES_DIR = Path(__file__).parent
SUBMISSION_TEMPLATE = "submission_email.html"

def nl2br(value) -> Markup:
    """Escape a value and turn its line breaks into <br> tags."""
    text = str(escape("" if value is None else value))
    text = text.replace("\r\n", "\n")
    return Markup(text.replace("\n", "<br>"))

def format_timestamp(value: datetime) -> str:
    """Format like zh-CN locale strings, e.g. 2026/10/19 14:03:05."""
    return f"{value.year}/{value.month}/{value.day} {value:%H:%M:%S}"

environment = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)
environment.filters["nl2br"] = nl2br
environment.filters["timestamp"] = format_timestamp

def render_submission_email(submission: SubmissionRequest, submitted_at: datetime, brand_name: str = "FocalRailways") -> str:
    """Render the HTML notification for a submission."""
    template = environment.get_template(SUBMISSION_TEMPLATE)
    return template.render(
        brand_name=brand_name,
        submission=submission,
        image_name=submission.imageName or DEFAULT_IMAGE_NAME,
        submitted_at=submitted_at,
    )
