from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from app.core.config import EMAIL_PATTERN

REQUIRED_FIELDS = (
    "materialTitle",
    "materialDescription",
    "materialType",
    "contactInfo",
    "agreeTerms",
)

class SubmissionRequest(BaseModel):
    """A material submission as posted by the website form.

    Field names follow the form's JSON keys. Required fields are typed loosely
    and checked for truthiness, so a bad value is reported as a missing field
    instead of a schema error.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    materialTitle: Any = None
    materialDescription: Any = None
    materialType: Any = None
    contactInfo: Any = None
    agreeTerms: Any = None
    image: Optional[Any] = Field(None, description="Data URL: data:<mime>;base64,<payload>")
    imageName: Optional[Any] = None
    imageType: Optional[Any] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "SubmissionRequest":
        """Build a request from decoded JSON; anything but an object counts as empty."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)

    def has_required_fields(self) -> bool:
        return all(getattr(self, name) for name in REQUIRED_FIELDS)

    def has_valid_contact(self) -> bool:
        return isinstance(self.contactInfo, str) and EMAIL_PATTERN.match(self.contactInfo) is not None
