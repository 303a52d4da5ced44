import logging

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from channel_api.errors import ConflictError, StoreError

logger = logging.getLogger(__name__)


class UserStore:
    """Credential store backed by the ``users`` collection.

    Email uniqueness is enforced by a unique index, so two concurrent
    registrations for the same address cannot both be inserted.
    """

    def __init__(self, collection):
        self.collection = collection

    async def ensure_indexes(self):
        await self.collection.create_index([("email", ASCENDING)], unique=True)

    async def find_user_by_email(self, email: str) -> dict | None:
        try:
            return await self.collection.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"User lookup failed: {e}")
            raise StoreError() from e

    async def save_user(self, user: dict) -> None:
        try:
            await self.collection.insert_one(dict(user))
        except DuplicateKeyError:
            logger.info(f"Duplicate registration rejected for {user['email']}")
            raise ConflictError()
        except PyMongoError as e:
            logger.error(f"User insert failed: {e}")
            raise StoreError() from e


class ChatHistoryStore:
    """Append-only log of question/answer pairs."""

    def __init__(self, collection):
        self.collection = collection

    async def save_chat_record(self, record: dict) -> None:
        try:
            await self.collection.insert_one(dict(record))
        except PyMongoError as e:
            logger.error(f"Chat history insert failed: {e}")
            raise StoreError() from e
