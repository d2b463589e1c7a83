import pytest

from conftest import FakeTransport, transport_failure
from kisan_assistant.models.ai_result import FailureReason
from kisan_assistant.prompts.farming_system_prompt import FARMING_SYSTEM_PROMPT
from kisan_assistant.services.conversation_session import ConversationSession, SessionState


def test_starts_absent():
    session = ConversationSession(FakeTransport())
    assert session.state == SessionState.ABSENT
    assert session.sessions_created == 0


@pytest.mark.asyncio
async def test_first_message_creates_session_with_system_instruction():
    transport = FakeTransport("TITLE: Hello")
    session = ConversationSession(transport, model="chat-model")

    result = await session.send_message("How do I treat rust?", "hi")

    assert result.ok
    assert result.value == "TITLE: Hello"
    assert session.state == SessionState.ACTIVE
    assert len(transport.chats) == 1
    chat = transport.chats[0]
    assert chat.model == "chat-model"
    assert chat.system_instruction == FARMING_SYSTEM_PROMPT
    assert chat.messages == ["How do I treat rust?\n\n(IMPORTANT: Reply strictly in Hindi language/script)"]


@pytest.mark.asyncio
async def test_session_is_reused_across_turns():
    transport = FakeTransport("one", "two")
    session = ConversationSession(transport)

    await session.send_message("first")
    await session.send_message("second")

    assert len(transport.chats) == 1
    assert len(transport.chats[0].messages) == 2
    assert session.turn_count == 2


@pytest.mark.asyncio
async def test_failure_discards_session_and_next_turn_starts_fresh():
    transport = FakeTransport(transport_failure(), "fresh reply")
    session = ConversationSession(transport)

    failed = await session.send_message("turn one")
    assert not failed.ok
    assert failed.failure == FailureReason.SESSION_RESET
    assert session.state == SessionState.ABSENT

    recovered = await session.send_message("turn two")
    assert recovered.value == "fresh reply"
    assert len(transport.chats) == 2
    assert transport.chats[1] is not transport.chats[0]
    assert transport.chats[1].messages == [
        "turn two\n\n(IMPORTANT: Reply strictly in English language/script)"
    ]
    assert session.sessions_created == 2
    assert session.turn_count == 1


@pytest.mark.asyncio
async def test_failure_after_successful_turns_resets():
    transport = FakeTransport("ok", transport_failure())
    session = ConversationSession(transport)
    await session.send_message("a")
    await session.send_message("b")
    assert session.state == SessionState.ABSENT
    assert session.turn_count == 0


@pytest.mark.asyncio
async def test_unexpected_error_also_resets():
    transport = FakeTransport("ok", RuntimeError("boom"), "after")
    session = ConversationSession(transport)
    await session.send_message("a")

    result = await session.send_message("b")

    assert result.failure == FailureReason.SESSION_RESET
    assert session.state == SessionState.ABSENT
    assert (await session.send_message("c")).value == "after"
    assert len(transport.chats) == 2


@pytest.mark.asyncio
async def test_chat_creation_failure_is_a_reset():
    class BrokenTransport(FakeTransport):
        def create_chat(self, *, model, system_instruction):
            raise transport_failure()

    session = ConversationSession(BrokenTransport())
    result = await session.send_message("hello")
    assert result.failure == FailureReason.SESSION_RESET
    assert session.state == SessionState.ABSENT


@pytest.mark.asyncio
async def test_empty_reply_keeps_session():
    transport = FakeTransport("")
    session = ConversationSession(transport)
    result = await session.send_message("hello")
    assert result.failure == FailureReason.EMPTY_RESPONSE
    assert session.state == SessionState.ACTIVE


@pytest.mark.asyncio
async def test_independent_sessions_do_not_share_state():
    transport = FakeTransport(transport_failure(), "b-reply")
    a = ConversationSession(transport)
    b = ConversationSession(transport)
    await a.send_message("a")
    await b.send_message("b")
    assert a.state == SessionState.ABSENT
    assert b.state == SessionState.ACTIVE


def test_destroy_is_idempotent():
    session = ConversationSession(FakeTransport())
    session.destroy()
    session.create()
    session.destroy()
    session.destroy()
    assert session.state == SessionState.ABSENT
