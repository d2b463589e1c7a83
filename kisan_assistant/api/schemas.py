import base64
import binascii
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from kisan_assistant.core.config import settings
from kisan_assistant.models.advice import Citation, ParsedResponse
from kisan_assistant.models.ai_result import FailureReason
from kisan_assistant.models.language import Language
from kisan_assistant.services.response_parser import parse_structured
from kisan_assistant.services.transport import InlineImage


class LocalizedRequest(BaseModel):
    language: Language = Field(default=Language(settings.DEFAULT_LANGUAGE))


class ImageRequest(LocalizedRequest):
    image: str = Field(..., min_length=1, description="Data URL or bare base64 image")

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        payload = InlineImage.from_data_url(v).data
        try:
            base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("Image must be base64 encoded")
        return v

    def inline_image(self) -> InlineImage:
        return InlineImage.from_data_url(self.image)


class AdviceResponse(BaseModel):
    """Reply text plus its parsed layout when it has one."""

    text: str
    structured: Optional[ParsedResponse] = None
    sources: List[Citation] = Field(default_factory=list)
    failure: Optional[FailureReason] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        sources: Optional[List[Citation]] = None,
        failure: Optional[FailureReason] = None,
    ) -> "AdviceResponse":
        return cls(
            text=text,
            structured=parse_structured(text) if failure is None else None,
            sources=sources or [],
            failure=failure,
        )
