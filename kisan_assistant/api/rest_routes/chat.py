from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from kisan_assistant.api.dependencies import get_chat_session
from kisan_assistant.api.fallbacks import Operation, fallback_message
from kisan_assistant.api.schemas import AdviceResponse, LocalizedRequest
from kisan_assistant.services.conversation_session import ConversationSession

router = APIRouter(prefix="/chat", tags=["Chat"])


class ChatMessageRequest(LocalizedRequest):
    message: str = Field(..., min_length=1, max_length=4000, pattern=r"\S")


class ChatSessionStatus(BaseModel):
    state: str
    turn_count: int


@router.post("/messages", response_model=AdviceResponse)
async def send_message(
    request: ChatMessageRequest,
    session: ConversationSession = Depends(get_chat_session),
):
    """
    Sends one turn to the advisor chat. A failed turn resets the conversation.
    """
    result = await session.send_message(request.message, request.language.value)
    if result.ok:
        return AdviceResponse.from_text(result.value)
    return AdviceResponse.from_text(fallback_message(Operation.CHAT, result.failure), failure=result.failure)


@router.get("/session", response_model=ChatSessionStatus)
async def session_status(session: ConversationSession = Depends(get_chat_session)):
    return ChatSessionStatus(state=session.state.value, turn_count=session.turn_count)


@router.delete("/session", status_code=status.HTTP_204_NO_CONTENT)
async def reset_session(session: ConversationSession = Depends(get_chat_session)):
    session.destroy()
    return
