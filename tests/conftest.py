import pytest
from fastapi.testclient import TestClient

from kisan_assistant.collections.database import Database
from kisan_assistant.core.errors import TransportError
from kisan_assistant.core.kv_store import MemoryKeyValueStore
from kisan_assistant.main import create_app
from kisan_assistant.services.transport import GenerationRequest, GenerationResponse


class FakeChat:
    def __init__(self, transport: "FakeTransport", model: str, system_instruction: str):
        self.transport = transport
        self.model = model
        self.system_instruction = system_instruction
        self.messages: list[str] = []

    async def send_message(self, message: str) -> GenerationResponse:
        self.messages.append(message)
        return self.transport._next_reply()


class FakeTransport:
    """Scripted replies: a str or GenerationResponse is returned, an exception is raised."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests: list[GenerationRequest] = []
        self.chats: list[FakeChat] = []

    def _next_reply(self) -> GenerationResponse:
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, GenerationResponse):
            return reply
        return GenerationResponse(text=reply)

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        self.requests.append(request)
        return self._next_reply()

    def create_chat(self, *, model: str, system_instruction: str) -> FakeChat:
        chat = FakeChat(self, model, system_instruction)
        self.chats.append(chat)
        return chat


def transport_failure() -> TransportError:
    return TransportError("connection reset by peer")


@pytest.fixture
def kv_store():
    return MemoryKeyValueStore()


@pytest.fixture
def database(kv_store):
    return Database(kv_store)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(kv_store, transport):
    app = create_app(kv_store=kv_store, transport=transport, auth_network_delay=0)
    with TestClient(app) as test_client:
        yield test_client
