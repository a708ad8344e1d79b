# registration/core/db.py

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from registration.core.config import Settings
from registration.core.errors import (
    ConfigurationError,
    DuplicateEmailError,
    PersistenceError,
    StartupError,
    StoreConnectionError,
)
from registration.models.user import User
from registration.schema.user import RegisterRequest

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    async def insert(self, candidate: RegisterRequest) -> str:
        """Persist a user and return its id.

        Raises DuplicateEmailError when the email is taken and
        PersistenceError for any other storage fault.
        """
        ...

    def close(self) -> None:
        ...


class MongoUserStore:
    """User store backed by the ``users`` collection.

    Holds the client for the process lifetime. A dropped connection is not
    recovered; it surfaces as PersistenceError on the next insert.
    """

    def __init__(self, client: AsyncIOMotorClient):
        self.client = client

    async def insert(self, candidate: RegisterRequest) -> str:
        try:
            user = User(**candidate.model_dump())
            await user.insert()
        except DuplicateKeyError as exc:
            raise DuplicateEmailError(candidate.email) from exc
        except (PyMongoError, ValidationError) as exc:
            raise PersistenceError(f"Could not save user: {exc}") from exc
        return str(user.id)

    def close(self) -> None:
        self.client.close()


@dataclass
class StartupResult:
    store: Optional[UserStore] = None
    error: Optional[StartupError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def startup(settings: Settings) -> StartupResult:
    """Connect to MongoDB and register the document models.

    Never exits the process; the caller decides what a failure means.
    """
    if not settings.MONGO_URI:
        return StartupResult(error=ConfigurationError("Missing MONGO_URI in environment"))

    client = None
    try:
        client = AsyncIOMotorClient(settings.MONGO_URI)
        await client.admin.command("ping")
        # creates the unique index on email
        await init_beanie(database=client[settings.MONGO_DB_NAME], document_models=[User])
    except PyMongoError as exc:
        if client is not None:
            client.close()
        return StartupResult(error=StoreConnectionError(f"MongoDB connection error: {exc}"))

    logger.info("Connected to %s://%s", settings.DB_TYPE, settings.MONGO_DB_NAME)
    return StartupResult(store=MongoUserStore(client))
