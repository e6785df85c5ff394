# routes/notifications.py
from datetime import timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from database import CONTENTS, STORE_ERRORS, get_db, serialize
from errors import JSONErrorRoute
from models.common import utcnow
from models.content import ContentCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["notifications"], route_class=JSONErrorRoute)


@router.get("/notifications")
async def get_notifications(db=Depends(get_db)):
    try:
        notifications = await db[CONTENTS].find().sort("timestamp", -1).to_list(None)
    except STORE_ERRORS as e:
        logger.error(f"Error fetching notifications: {str(e)}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})
    return serialize(notifications)


@router.post("/uploadContent", status_code=201)
async def upload_content(content: ContentCreate, db=Depends(get_db)):
    if content.message is not None and not isinstance(content.message, str):
        return JSONResponse(status_code=400, content={"error": "Message must be a string"})
    if not content.message or not content.message.strip():
        return JSONResponse(status_code=400, content={"error": "Message is required"})

    timestamp = content.timestamp or utcnow()
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    doc = {"message": content.message, "timestamp": timestamp}
    try:
        await db[CONTENTS].insert_one(doc)
    except STORE_ERRORS as e:
        logger.error(f"Error uploading content: {str(e)}")
        return JSONResponse(status_code=500, content={"error": f"Error uploading content: {str(e)}"})
    logger.info(f"Content uploaded: {doc['_id']}")
    return {"message": "Content uploaded successfully", "result": serialize(doc)}
