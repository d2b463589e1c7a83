from enum import Enum
from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class FailureReason(str, Enum):
    TRANSPORT_ERROR = "transport_error"  # call failed or network error
    EMPTY_RESPONSE = "empty_response"  # call succeeded with no content
    DECODE_ERROR = "decode_error"  # JSON response did not match the schema
    SESSION_RESET = "session_reset"  # chat transport failed, session discarded


class AIResult(BaseModel, Generic[T]):
    """Outcome of an AI-facing operation: a payload or a classified failure."""

    result_type: Literal["success", "error"]
    value: Optional[T] = None
    failure: Optional[FailureReason] = None
    detail: Optional[str] = Field(default=None, description="Diagnostic text, never shown to users")

    @property
    def ok(self) -> bool:
        return self.result_type == "success"

    @classmethod
    def success(cls, value: T) -> "AIResult[T]":
        return cls(result_type="success", value=value)

    @classmethod
    def error(cls, failure: FailureReason, detail: Optional[str] = None) -> "AIResult[T]":
        return cls(result_type="error", failure=failure, detail=detail)
