"""
Shared fixtures. The app is built against an in-memory stand-in for the motor
database, so no MongoDB server is needed. Documents go through BSON on the way
in and out, as they do with the real driver (tz-aware client).
"""

import copy
import os
from collections import defaultdict
from types import SimpleNamespace

import pytest
import bson
from bson import ObjectId
from bson.codec_options import CodecOptions
from fastapi.testclient import TestClient
from pymongo.errors import DocumentTooLarge, InvalidOperation

# main builds its module-level app on import
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("ASSESSMENT_STORAGE", "embedded")

from config import Settings  # noqa: E402
from main import create_app  # noqa: E402

CODEC_OPTIONS = CodecOptions(tz_aware=True)
MAX_BSON_SIZE = 16 * 1024 * 1024


def _matches(doc, query):
    return all(doc.get(key) == value for key, value in (query or {}).items())


def _project(doc, projection):
    doc = copy.deepcopy(doc)
    for field, flag in (projection or {}).items():
        if not flag:
            doc.pop(field, None)
    return doc


class FakeCursor:
    def __init__(self, collection, docs):
        self.collection = collection
        self.docs = docs

    def sort(self, key, direction=1):
        self.docs.sort(key=lambda d: d[key], reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        self.collection.check()
        return self.docs if length is None else self.docs[:length]


class FakeCollection:
    def __init__(self):
        self.docs = []
        self.error = None
        self.max_bson_size = MAX_BSON_SIZE

    def round_trip(self, doc):
        encoded = bson.encode(doc)
        if len(encoded) > self.max_bson_size:
            raise DocumentTooLarge(
                f"BSON document too large ({len(encoded)} bytes) - the connected server supports "
                f"BSON document sizes up to {self.max_bson_size} bytes."
            )
        return bson.decode(encoded, codec_options=CODEC_OPTIONS)

    def check(self):
        if self.error is not None:
            raise self.error

    async def insert_one(self, doc):
        self.check()
        doc.setdefault("_id", ObjectId())
        self.docs.append(self.round_trip(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def insert_many(self, docs):
        self.check()
        if not docs:
            raise InvalidOperation("documents must be a non-empty list")
        for doc in docs:
            doc.setdefault("_id", ObjectId())
        self.docs.extend([self.round_trip(doc) for doc in docs])
        return SimpleNamespace(inserted_ids=[doc["_id"] for doc in docs])

    def find(self, query=None, projection=None):
        return FakeCursor(self, [_project(d, projection) for d in self.docs if _matches(d, query)])

    async def find_one(self, query=None, projection=None):
        self.check()
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None


class FakeDatabase:
    def __init__(self):
        self.collections = defaultdict(FakeCollection)

    def __getitem__(self, name):
        return self.collections[name]

    async def command(self, name):
        return {"ok": 1.0}


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    return Settings(mongodb_uri="mongodb://localhost:27017", upload_dir=upload_dir)


@pytest.fixture
def client(settings, db):
    return TestClient(create_app(settings, db=db))


@pytest.fixture
def embedded_client(settings, db):
    embedded = settings.model_copy(update={"assessment_storage": "embedded"})
    return TestClient(create_app(embedded, db=db))
