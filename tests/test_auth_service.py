import json

import pytest

from kisan_assistant.collections.database import CURRENT_USER_SESSION_KEY
from kisan_assistant.core.errors import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from kisan_assistant.services.auth_service import DEFAULT_USER, AuthService


@pytest.fixture
def auth(database):
    return AuthService(database, network_delay=0)


@pytest.mark.asyncio
async def test_signup_starts_session_without_password(auth, kv_store):
    user = await auth.signup("Asha", "asha@x.com", "secret1", "Pune")
    assert user.id
    stored = json.loads(kv_store.get(CURRENT_USER_SESSION_KEY))
    assert stored["email"] == "asha@x.com"
    assert "password" not in stored
    assert auth.get_current_user() == user


@pytest.mark.asyncio
async def test_signup_rejects_existing_email(auth):
    await auth.signup("Asha", "asha@x.com", "secret1")
    with pytest.raises(UserAlreadyExistsError):
        await auth.signup("Other", "asha@x.com", "secret2")


@pytest.mark.asyncio
async def test_login(auth):
    await auth.signup("Asha", "asha@x.com", "secret1")
    auth.logout()
    assert auth.get_current_user() is None

    user = await auth.login("asha@x.com", "secret1")
    assert user.name == "Asha"
    assert auth.get_current_user().email == "asha@x.com"


@pytest.mark.asyncio
async def test_login_rejects_bad_password_and_unknown_user(auth):
    await auth.signup("Asha", "asha@x.com", "secret1")
    with pytest.raises(InvalidCredentialsError):
        await auth.login("asha@x.com", "wrong")
    with pytest.raises(InvalidCredentialsError):
        await auth.login("nobody@x.com", "secret1")


@pytest.mark.asyncio
async def test_reset_password(auth):
    await auth.signup("Asha", "asha@x.com", "secret1")
    assert await auth.reset_password("asha@x.com") is True
    with pytest.raises(UserNotFoundError):
        await auth.reset_password("nobody@x.com")


@pytest.mark.asyncio
async def test_ensure_default_user_creates_once(auth, database):
    first = await auth.ensure_default_user()
    assert first.email == DEFAULT_USER.email
    auth.logout()
    second = await auth.ensure_default_user()
    assert second.id == first.id
    assert len(database.users.find({"email": DEFAULT_USER.email})) == 1


@pytest.mark.asyncio
async def test_ensure_default_user_keeps_current_session(auth):
    user = await auth.signup("Asha", "asha@x.com", "secret1")
    assert await auth.ensure_default_user() == user


def test_unreadable_session_is_discarded(auth, kv_store):
    kv_store.set(CURRENT_USER_SESSION_KEY, "{oops")
    assert auth.get_current_user() is None
    assert kv_store.get(CURRENT_USER_SESSION_KEY) is None
