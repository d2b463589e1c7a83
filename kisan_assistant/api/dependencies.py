from fastapi import Depends, Request

from kisan_assistant.collections.database import Database
from kisan_assistant.core.errors import NotAuthenticatedError
from kisan_assistant.models.user import User
from kisan_assistant.services.advisor import FarmingAdvisor
from kisan_assistant.services.auth_service import AuthService
from kisan_assistant.services.conversation_session import ConversationSession


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_advisor(request: Request) -> FarmingAdvisor:
    return request.app.state.advisor


def get_chat_session(request: Request) -> ConversationSession:
    return request.app.state.chat_session


async def get_current_user(auth: AuthService = Depends(get_auth_service)) -> User:
    user = auth.get_current_user()
    if user is None:
        raise NotAuthenticatedError()
    return user
