import json
from pydantic import BaseModel, Field
from typing import Dict, Optional
from app.core.config import RESPONSE_HEADERS

class SubmissionResponse(BaseModel):
    success: bool = Field(..., description="Whether the submission was relayed")
    message: Optional[str] = Field(None, description="Confirmation shown to the submitter")
    emailId: Optional[str] = Field(None, description="Message-ID of the relayed email")
    error: Optional[str] = Field(None, description="Localized failure reason")

class FunctionResponse(BaseModel):
    """Status, headers and serialized body produced by one invocation."""
    status_code: int
    headers: Dict[str, str] = Field(default_factory=lambda: dict(RESPONSE_HEADERS))
    body: str = ""

    @classmethod
    def from_result(cls, status_code: int, result: SubmissionResponse) -> "FunctionResponse":
        body = json.dumps(result.model_dump(exclude_none=True), ensure_ascii=False)
        return cls(status_code=status_code, body=body)

    def to_event_response(self) -> dict:
        return {"statusCode": self.status_code, "headers": self.headers, "body": self.body}
