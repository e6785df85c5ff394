# storage.py
"""Assessment file storage.

Two interchangeable backends share one interface: ``DiskStorage`` writes the
upload to a local directory and keeps its path in the assessment document,
``EmbeddedStorage`` keeps the bytes inside the document itself. A deployment
uses exactly one of them (see ``build_storage``).
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List
from urllib.parse import quote
import logging
import os
import time

from bson import Binary
from fastapi import Request, Response, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse

from config import Settings
from database import ASSESSMENTS, STORE_ERRORS, parse_object_id
from errors import NotFoundError, StoreError
from models.common import utcnow
from models.assessment import AssessmentMeta, AssessmentOwner

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class AssessmentStorage(ABC):
    # fields never returned by the listing
    payload_fields = ()

    def __init__(self, collection):
        self.collection = collection

    @abstractmethod
    async def store_file(self, upload: UploadFile, content: bytes) -> dict:
        """Persist the payload and return the fields to merge into the document."""

    @abstractmethod
    async def file_response(self, doc: dict) -> Response:
        """Build the download response for a stored assessment."""

    async def discard(self, stored: dict) -> None:
        """Undo store_file after the document insert failed."""

    async def save(self, owner: AssessmentOwner, upload: UploadFile) -> str:
        content = await upload.read()
        doc = owner.model_dump()
        doc["filename"] = os.path.basename(upload.filename or "") or "upload"
        doc["contentType"] = upload.content_type or DEFAULT_CONTENT_TYPE
        doc["timestamp"] = utcnow()
        stored = await self.store_file(upload, content)
        doc.update(stored)
        try:
            result = await self.collection.insert_one(doc)
        except STORE_ERRORS:
            await self.discard(stored)
            raise
        logger.info(f"Assessment saved: {result.inserted_id} ({doc['filename']}, {len(content)} bytes)")
        return str(result.inserted_id)

    async def list(self) -> List[dict]:
        projection = {field: 0 for field in self.payload_fields} or None
        docs = await self.collection.find({}, projection).to_list(None)
        return [
            AssessmentMeta(id=str(doc.pop("_id")), **doc).model_dump()
            for doc in docs
        ]

    async def find(self, assessment_id: str) -> dict:
        oid = parse_object_id(assessment_id)
        doc = await self.collection.find_one({"_id": oid}) if oid else None
        if not doc:
            raise NotFoundError("Assessment not found")
        return doc

    async def open(self, assessment_id: str) -> Response:
        doc = await self.find(assessment_id)
        return await self.file_response(doc)


class DiskStorage(AssessmentStorage):
    payload_fields = ("filePath",)

    def __init__(self, collection, upload_dir: Path):
        super().__init__(collection)
        self.upload_dir = Path(upload_dir)

    def ensure_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    async def store_file(self, upload: UploadFile, content: bytes) -> dict:
        # Same-millisecond uploads of the same name overwrite each other.
        name = f"{int(time.time() * 1000)}-{os.path.basename(upload.filename or '') or 'upload'}"
        await run_in_threadpool((self.upload_dir / name).write_bytes, content)
        return {"filePath": f"uploads/{name}"}

    async def discard(self, stored: dict) -> None:
        path = self.upload_dir / Path(stored["filePath"]).name
        await run_in_threadpool(path.unlink, missing_ok=True)
        logger.info(f"Removed {stored['filePath']} after failed insert")

    async def file_response(self, doc: dict) -> Response:
        path = self.upload_dir / Path(doc["filePath"]).name
        if not path.is_file():
            raise StoreError(f"Error retrieving file: {doc['filePath']} does not exist")
        return FileResponse(
            path,
            media_type=doc.get("contentType"),
            filename=doc.get("filename") or path.name,
        )


class EmbeddedStorage(AssessmentStorage):
    payload_fields = ("data",)

    async def store_file(self, upload: UploadFile, content: bytes) -> dict:
        return {"data": Binary(content)}

    async def file_response(self, doc: dict) -> Response:
        filename = doc.get("filename") or "download"
        quoted = quote(filename)
        if quoted != filename:
            disposition = f"attachment; filename*=utf-8''{quoted}"
        else:
            disposition = f'attachment; filename="{filename}"'
        return Response(
            content=bytes(doc["data"]),
            media_type=doc.get("contentType") or DEFAULT_CONTENT_TYPE,
            headers={"Content-Disposition": disposition},
        )


def build_storage(settings: Settings, db) -> AssessmentStorage:
    collection = db[ASSESSMENTS]
    if settings.assessment_storage == "embedded":
        return EmbeddedStorage(collection)
    storage = DiskStorage(collection, settings.upload_dir)
    storage.ensure_dir()
    return storage


def get_storage(request: Request) -> AssessmentStorage:
    return request.app.state.storage
