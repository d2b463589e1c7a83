"""Port to the generative-AI backend and its Gemini implementation.

Services talk to ``AITransport`` only. ``GeminiTransport`` converts every vendor
exception into ``TransportError`` so callers have a single failure type to handle.
"""

import base64
import binascii
import logging
from typing import Any, Optional, Protocol

from google.genai import types
from google.genai.client import Client
from pydantic import BaseModel, Field

from kisan_assistant.core.errors import TransportError
from kisan_assistant.core.genai_client import get_raw_google_client
from kisan_assistant.models.advice import GroundingMetadata
from kisan_assistant.services.citations import coerce_grounding_metadata

logger = logging.getLogger(__name__)


class InlineImage(BaseModel):
    data: str = Field(..., description="Base64 payload without the data URL prefix")
    mime_type: str = Field(default="image/jpeg")

    @classmethod
    def from_data_url(cls, value: str, default_mime_type: str = "image/jpeg") -> "InlineImage":
        """Accept ``data:image/png;base64,....`` or a bare base64 string."""
        header, sep, payload = value.partition(",")
        if not sep:
            return cls(data=value, mime_type=default_mime_type)
        mime_type = default_mime_type
        if header.startswith("data:"):
            mime_type = header[len("data:"):].split(";", 1)[0] or default_mime_type
        return cls(data=payload, mime_type=mime_type)


class GenerationRequest(BaseModel):
    model: str
    contents: str
    system_instruction: Optional[str] = None
    temperature: Optional[float] = None
    image: Optional[InlineImage] = None
    response_schema: Optional[Any] = Field(
        default=None, description="Python type the JSON response must follow, e.g. list[str]"
    )
    use_search: bool = False


class GenerationResponse(BaseModel):
    text: Optional[str] = None
    grounding_metadata: Optional[GroundingMetadata] = None


class ChatHandle(Protocol):
    async def send_message(self, message: str) -> GenerationResponse:
        ...


class AITransport(Protocol):
    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        ...

    def create_chat(self, *, model: str, system_instruction: str) -> ChatHandle:
        ...


def _to_generation_response(response: types.GenerateContentResponse) -> GenerationResponse:
    grounding = None
    if response.candidates:
        grounding = coerce_grounding_metadata(response.candidates[0].grounding_metadata)
    return GenerationResponse(text=response.text, grounding_metadata=grounding)


def _build_config(request: GenerationRequest) -> types.GenerateContentConfig:
    config: dict[str, Any] = {}
    if request.system_instruction:
        config["system_instruction"] = request.system_instruction
    if request.temperature is not None:
        config["temperature"] = request.temperature
    if request.response_schema is not None:
        config["response_mime_type"] = "application/json"
        config["response_schema"] = request.response_schema
    if request.use_search:
        config["tools"] = [types.Tool(google_search=types.GoogleSearch())]
    return types.GenerateContentConfig(**config)


def _build_contents(request: GenerationRequest) -> Any:
    if request.image is None:
        return request.contents
    try:
        image_bytes = base64.b64decode(request.image.data)
    except (binascii.Error, ValueError) as e:
        raise TransportError(f"Invalid image payload: {e}")
    return [
        types.Part.from_bytes(data=image_bytes, mime_type=request.image.mime_type),
        types.Part.from_text(text=request.contents),
    ]


class GeminiChatHandle:
    def __init__(self, chat: Any) -> None:
        self._chat = chat

    async def send_message(self, message: str) -> GenerationResponse:
        try:
            response = await self._chat.send_message(message)
            return _to_generation_response(response)
        except Exception as e:
            raise TransportError(f"GenAI chat error: {e}") from e


class GeminiTransport:
    def __init__(self, client: Optional[Client] = None) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_raw_google_client()
        return self._client

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        contents = _build_contents(request)
        try:
            response = await self.client.aio.models.generate_content(
                model=request.model,
                contents=contents,
                config=_build_config(request),
            )
            return _to_generation_response(response)
        except Exception as e:
            raise TransportError(f"GenAI service error: {e}") from e

    def create_chat(self, *, model: str, system_instruction: str) -> ChatHandle:
        try:
            chat = self.client.aio.chats.create(
                model=model,
                config=types.GenerateContentConfig(system_instruction=system_instruction),
            )
        except Exception as e:
            raise TransportError(f"Could not open GenAI chat: {e}") from e
        logger.info("Opened GenAI chat on %s", model)
        return GeminiChatHandle(chat)
