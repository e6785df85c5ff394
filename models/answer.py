# models/answer.py
from pydantic import AliasChoices, BaseModel, Field
from datetime import datetime
from typing import List, Optional, Union

from models.common import utcnow


class AnswerItem(BaseModel):
    questionTitle: str
    answer: str
    timeTaken: Optional[Union[int, float]] = None  # In seconds


class Answer(AnswerItem):
    username: str
    UID: str
    course: Optional[str] = None
    department: Optional[str] = None
    year: Optional[int] = None
    phone: Optional[str] = None
    timestamp: datetime = Field(default_factory=utcnow)


class SubmittedTest(BaseModel):
    username: str
    UID: str
    course: Optional[str] = None
    department: Optional[str] = Field(None, validation_alias=AliasChoices("department", "Department"))
    year: Optional[int] = Field(None, validation_alias=AliasChoices("year", "Year"))
    phone: Optional[str] = Field(None, validation_alias=AliasChoices("phone", "PhNumber"))
    answers: List[AnswerItem] = []

    def to_answers(self) -> List[Answer]:
        identity = self.model_dump(exclude={"answers"})
        return [Answer(**item.model_dump(), **identity) for item in self.answers]
