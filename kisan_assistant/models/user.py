from typing import Optional

from pydantic import Field

from kisan_assistant.core.document_store import Document


class User(Document):
    email: str = Field(...)
    name: str = Field(...)
    location: Optional[str] = Field(default=None)


class UserRecord(User):
    """Stored form of a user; never leaves the auth service."""

    password: str = Field(...)

    def to_user(self) -> User:
        return User.model_validate(self.model_dump(exclude={"password"}))
