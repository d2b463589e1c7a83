import asyncio
import json
import logging
from typing import Optional

from pydantic import ValidationError

from kisan_assistant.collections.database import CURRENT_USER_SESSION_KEY, Database
from kisan_assistant.collections.user import get_user_from_email, save_user
from kisan_assistant.core.config import settings
from kisan_assistant.core.errors import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from kisan_assistant.models.user import User, UserRecord

logger = logging.getLogger(__name__)

DEFAULT_USER = UserRecord(
    email="farmer@kisan.app",
    name="Ramesh Kumar",
    password="kisan123",
    location="Nashik, Maharashtra",
)


class AuthService:
    """Local account store with one current-user session per device.

    Passwords are compared as stored; this flow only gates the demo app.
    """

    def __init__(self, db: Database, network_delay: Optional[float] = None) -> None:
        self._db = db
        self._network_delay = (
            settings.AUTH_NETWORK_DELAY_SECONDS if network_delay is None else network_delay
        )

    async def _simulate_network(self, factor: float = 1.0) -> None:
        if self._network_delay > 0:
            await asyncio.sleep(self._network_delay * factor)

    def _start_session(self, user: User) -> None:
        self._db.store.set(CURRENT_USER_SESSION_KEY, user.model_dump_json(exclude_none=True))

    async def login(self, email: str, password: str) -> User:
        await self._simulate_network()
        record = get_user_from_email(self._db, email)
        if record is None or record.password != password:
            raise InvalidCredentialsError()
        user = record.to_user()
        self._start_session(user)
        return user

    async def signup(self, name: str, email: str, password: str, location: Optional[str] = None) -> User:
        await self._simulate_network()
        if get_user_from_email(self._db, email) is not None:
            raise UserAlreadyExistsError()
        record = save_user(
            self._db,
            UserRecord(name=name, email=email, password=password, location=location),
        )
        user = record.to_user()
        self._start_session(user)
        logger.info("Registered user %s", user.id)
        return user

    def logout(self) -> None:
        self._db.store.remove(CURRENT_USER_SESSION_KEY)

    def get_current_user(self) -> Optional[User]:
        stored = self._db.store.get(CURRENT_USER_SESSION_KEY)
        if not stored:
            return None
        try:
            return User.model_validate(json.loads(stored))
        except (json.JSONDecodeError, ValidationError):
            logger.warning("Discarding unreadable user session")
            self.logout()
            return None

    async def reset_password(self, email: str) -> bool:
        await self._simulate_network(factor=1.25)
        if get_user_from_email(self._db, email) is None:
            raise UserNotFoundError()
        return True

    async def ensure_default_user(self) -> User:
        """Return the current user, logging in (and creating if needed) the demo farmer otherwise."""
        current = self.get_current_user()
        if current is not None:
            return current
        record = get_user_from_email(self._db, DEFAULT_USER.email)
        if record is None:
            record = save_user(self._db, DEFAULT_USER)
        user = record.to_user()
        self._start_session(user)
        return user
