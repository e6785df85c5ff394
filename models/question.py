# models/question.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class Question(BaseModel):
    title: str
    description: str
    option1: str
    option2: str
    option3: str
    option4: str
    correctAnswer: Optional[str] = None  # older question sets were stored without it


class QuestionCreate(Question):
    correctAnswer: str


class QuestionBatch(BaseModel):
    questions: List[QuestionCreate] = Field(..., min_length=1)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "questions": [
                {
                    "title": "Q1",
                    "description": "Which keyword defines a function in Python?",
                    "option1": "func",
                    "option2": "def",
                    "option3": "lambda",
                    "option4": "fn",
                    "correctAnswer": "def",
                }
            ]
        }
    })
