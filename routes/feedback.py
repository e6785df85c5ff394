# routes/feedback.py
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import logging

from database import FEEDBACKS, STORE_ERRORS, get_db
from errors import StoreError
from models.feedback import Feedback

logger = logging.getLogger(__name__)

router = APIRouter(tags=["feedback"])


@router.post("/submit-feedback", status_code=201, response_class=PlainTextResponse)
async def submit_feedback(feedback: Feedback, db=Depends(get_db)):
    try:
        result = await db[FEEDBACKS].insert_one(feedback.model_dump(exclude_none=True))
    except STORE_ERRORS as e:
        raise StoreError(f"Error submitting feedback: {str(e)}", status_code=400)
    logger.info(f"Feedback saved: {result.inserted_id} (rating {feedback.rating})")
    return "Feedback submitted successfully!"
