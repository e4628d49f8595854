import re
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# SMTP relay defaults
SMTP_HOST = "smtp.qq.com"
SMTP_PORT = 587  # submission port, upgraded with STARTTLS
SMTP_TIMEOUT = 10  # seconds, applies to connect, greeting and socket reads

# Attachment defaults
DEFAULT_IMAGE_NAME = "submitted-image.jpg"
DEFAULT_IMAGE_TYPE = "image/jpeg"
DATA_URL_PATTERN = re.compile(r"^data:([A-Za-z\-+/]+);base64,(.+)\Z")

# Basic local@domain.tld shape, no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")

# CORS headers sent on every response
RESPONSE_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}
