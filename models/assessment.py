# models/assessment.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class AssessmentOwner(BaseModel):
    username: str
    UID: str
    day: int


class AssessmentMeta(BaseModel):
    id: str
    username: str
    UID: str
    day: int
    filename: Optional[str] = None
    contentType: Optional[str] = None
    timestamp: Optional[datetime] = None
