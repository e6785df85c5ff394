# models/content.py
from pydantic import BaseModel
from datetime import datetime
from typing import Any, Optional


class ContentCreate(BaseModel):
    message: Any = None  # type checked by the handler so it can answer JSON
    timestamp: Optional[datetime] = None
