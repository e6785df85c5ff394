# database.py
from bson import ObjectId
from bson.errors import BSONError
from pymongo.errors import PyMongoError
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
import logging

from config import Settings

logger = logging.getLogger(__name__)

# Collection names match what the original deployment created.
USER_INFOS = "userinfos"
MEMBER_INFOS = "memberinfos"
QUESTIONS = "questions"
ANSWERS = "answers"
FEEDBACKS = "feedbacks"
CONTENTS = "contents"
ASSESSMENTS = "assessments"

# Driver failures plus BSON encoding failures (oversized documents, ints beyond 8 bytes).
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


def connect(settings: Settings) -> AsyncIOMotorDatabase:
    client = AsyncIOMotorClient(settings.mongodb_uri, tz_aware=True)
    return client[settings.database_name]


async def ping(db) -> bool:
    try:
        await db.command("ping")
        logger.info("Connected to MongoDB")
        return True
    except PyMongoError as e:
        logger.error(f"Error connecting to MongoDB: {str(e)}")
        return False


def get_db(request: Request):
    return request.app.state.db


def parse_object_id(value: str):
    """Return an ObjectId, or None when the value is not a valid one."""
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize(doc):
    """Render a document (or list of documents) as JSON-ready data."""
    return jsonable_encoder(doc, custom_encoder={ObjectId: str})
