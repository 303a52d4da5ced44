# mongo.py
from motor.motor_asyncio import AsyncIOMotorClient

from channel_api.config import MONGO_URI, MONGO_DB, require

USERS_COLLECTION = "users"
HISTORY_COLLECTION = "chathistories"


def create_client(uri: str | None = None) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(require("MONGO_URI", uri or MONGO_URI))


def get_collections(client: AsyncIOMotorClient, db_name: str = MONGO_DB):
    db = client[db_name]
    return db.get_collection(USERS_COLLECTION), db.get_collection(HISTORY_COLLECTION)
