# routes/answers.py
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import logging

from database import ANSWERS, STORE_ERRORS, get_db
from errors import StoreError
from models.answer import SubmittedTest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["answers"])


@router.post("/submit-test", status_code=201, response_class=PlainTextResponse)
async def submit_test(submission: SubmittedTest, db=Depends(get_db)):
    logger.info(f"Test submission from {submission.UID} with {len(submission.answers)} answers")
    docs = [answer.model_dump(exclude_none=True) for answer in submission.to_answers()]
    if docs:
        try:
            await db[ANSWERS].insert_many(docs)
        except STORE_ERRORS as e:
            raise StoreError(f"Error submitting test: {str(e)}", status_code=400)
    return "Test submitted successfully!"
