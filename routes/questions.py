# routes/questions.py
from fastapi import APIRouter, Depends
import logging

from database import QUESTIONS, STORE_ERRORS, get_db, serialize
from errors import StoreError
from models.question import QuestionBatch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["questions"])


@router.get("/questions")
@router.get("/reqquestions")
async def get_questions(db=Depends(get_db)):
    try:
        questions = await db[QUESTIONS].find().to_list(None)
    except STORE_ERRORS as e:
        raise StoreError(f"Error fetching questions: {str(e)}")
    return serialize(questions)


@router.post("/questions", status_code=201)
async def add_questions(batch: QuestionBatch, db=Depends(get_db)):
    # The batch model rejects the whole request before anything is written.
    docs = [question.model_dump() for question in batch.questions]
    try:
        result = await db[QUESTIONS].insert_many(docs)
    except STORE_ERRORS as e:
        raise StoreError(f"Error adding questions: {str(e)}", status_code=400)
    logger.info(f"Inserted {len(result.inserted_ids)} questions")
    return serialize(docs)
