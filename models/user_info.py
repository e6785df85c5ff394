# models/user_info.py
from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


class UserInfo(BaseModel):
    username: str
    UID: str
    course: str
    department: str = Field(..., validation_alias=AliasChoices("department", "Department"))
    year: int = Field(..., validation_alias=AliasChoices("year", "Year"))
    phone: str = Field(..., validation_alias=AliasChoices("phone", "PhNumber"))
    email: str = Field(..., validation_alias=AliasChoices("email", "Email"))
    day: Optional[int] = None


class MemberInfo(BaseModel):
    username: str
    designation: str
    phone: str = Field(..., validation_alias=AliasChoices("phone", "PhNumber"))
    email: str = Field(..., validation_alias=AliasChoices("email", "Email"))
