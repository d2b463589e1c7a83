from typing import Optional

from kisan_assistant.collections.database import Database
from kisan_assistant.models.user import UserRecord


def get_user_from_email(db: Database, email: str) -> Optional[UserRecord]:
    return db.users.find_one({"email": email})


def save_user(db: Database, user: UserRecord) -> UserRecord:
    return db.users.insert_one(user)
