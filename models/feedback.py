# models/feedback.py
from pydantic import AliasChoices, BaseModel, Field
from typing import Optional, Union


class Feedback(BaseModel):
    username: str
    UID: str
    course: Optional[str] = None
    feedback: str
    rating: Union[int, float]  # no bounds
    department: Optional[str] = Field(None, validation_alias=AliasChoices("department", "Department"))
    year: Optional[int] = Field(None, validation_alias=AliasChoices("year", "Year"))
