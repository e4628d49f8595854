import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Optional
from app.core.config import DATA_URL_PATTERN, DEFAULT_IMAGE_NAME, DEFAULT_IMAGE_TYPE

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ImageAttachment:
    filename: str
    content_type: str
    content: bytes

    @property
    def maintype(self) -> str:
        return self.content_type.split("/", 1)[0]

    @property
    def subtype(self) -> str:
        return self.content_type.split("/", 1)[1]

def _is_mime_type(value) -> bool:
    """True for a single ``type/subtype`` pair with both halves present."""
    if not isinstance(value, str) or value.count("/") != 1 or any(c.isspace() for c in value):
        return False
    maintype, _, subtype = value.partition("/")
    return bool(maintype) and bool(subtype)

def _clean_filename(value) -> str:
    if not isinstance(value, str):
        return DEFAULT_IMAGE_NAME
    # header values may not contain line breaks
    name = " ".join(value.splitlines()).strip()
    return name or DEFAULT_IMAGE_NAME

def parse_image_attachment(image, image_name=None, image_type=None) -> Optional[ImageAttachment]:
    """Decode a ``data:<mime>;base64,<payload>`` URL into an attachment.

    Returns None when the value does not have that shape or the payload is
    not valid base64; a broken image never fails the submission. The MIME
    type comes from the URL, then the ``image_type`` hint, then the default.
    """
    if not isinstance(image, str):
        return None

    match = DATA_URL_PATTERN.match(image)
    if not match:
        logger.warning("Image is not a base64 data URL, skipping attachment")
        return None

    try:
        content = base64.b64decode(match.group(2), validate=True)
    except (binascii.Error, ValueError):
        logger.warning("Image payload is not valid base64, skipping attachment")
        return None

    content_type = next(
        (value for value in (match.group(1), image_type) if _is_mime_type(value)),
        DEFAULT_IMAGE_TYPE,
    )
    return ImageAttachment(
        filename=_clean_filename(image_name),
        content_type=content_type,
        content=content,
    )
