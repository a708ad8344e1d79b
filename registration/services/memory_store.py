# /registration/services/memory_store.py

import uuid
from typing import Dict

from registration.core.errors import DuplicateEmailError, PersistenceError
from registration.schema.user import RegisterRequest


class InMemoryUserStore:
    """Dict-backed stand-in for MongoUserStore.

    The membership check and the write happen without an await in between,
    so concurrent inserts on one event loop cannot both claim an email.
    """

    def __init__(self):
        self.users: Dict[str, dict] = {}

    async def insert(self, candidate: RegisterRequest) -> str:
        if not candidate.email:
            raise PersistenceError("Could not save user: email is required")
        if candidate.email in self.users:
            raise DuplicateEmailError(candidate.email)
        user_id = uuid.uuid4().hex
        self.users[candidate.email] = {"id": user_id, **candidate.model_dump()}
        return user_id

    def close(self) -> None:
        self.users.clear()
