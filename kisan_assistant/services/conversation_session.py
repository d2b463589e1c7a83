"""Lifecycle of one multi-turn chat with the AI backend.

ABSENT --send_message--> ACTIVE --failed turn--> ABSENT

A failed turn discards the remote chat immediately; the next ``send_message``
opens a fresh one with a new system-instruction handshake. No retry happens
inside a call.
"""

import logging
from enum import Enum
from typing import Optional

from kisan_assistant.core.config import settings
from kisan_assistant.core.errors import TransportError
from kisan_assistant.models.ai_result import AIResult, FailureReason
from kisan_assistant.prompts.farming_system_prompt import FARMING_SYSTEM_PROMPT
from kisan_assistant.prompts.language_directive import localize_prompt
from kisan_assistant.services.transport import AITransport, ChatHandle

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    ABSENT = "absent"
    ACTIVE = "active"


class ConversationSession:
    def __init__(
        self,
        transport: AITransport,
        *,
        model: Optional[str] = None,
        system_instruction: str = FARMING_SYSTEM_PROMPT,
    ) -> None:
        self._transport = transport
        self._model = model or settings.CHAT_MODEL
        self._system_instruction = system_instruction
        self._handle: Optional[ChatHandle] = None
        self.turn_count = 0
        self.sessions_created = 0

    @property
    def state(self) -> SessionState:
        return SessionState.ACTIVE if self._handle is not None else SessionState.ABSENT

    def create(self) -> None:
        self._handle = self._transport.create_chat(
            model=self._model,
            system_instruction=self._system_instruction,
        )
        self.turn_count = 0
        self.sessions_created += 1

    def destroy(self) -> None:
        self._handle = None
        self.turn_count = 0

    async def send_message(self, text: str, language: str = "en") -> AIResult[str]:
        try:
            if self._handle is None:
                self.create()
            response = await self._handle.send_message(localize_prompt(text, language))
        except TransportError as e:
            logger.warning("Chat turn failed, discarding session: %s", e.message)
            self.destroy()
            return AIResult.error(FailureReason.SESSION_RESET, detail=e.message)
        except Exception as e:
            logger.exception("Chat turn raised unexpectedly, discarding session")
            self.destroy()
            return AIResult.error(FailureReason.SESSION_RESET, detail=str(e))

        self.turn_count += 1
        if not response.text:
            return AIResult.error(FailureReason.EMPTY_RESPONSE)
        return AIResult.success(response.text)
