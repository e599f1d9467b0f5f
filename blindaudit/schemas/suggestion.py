from datetime import datetime
from pydantic import BaseModel


class SuggestionCreate(BaseModel):
    name: str = ""
    content: str = ""


class SuggestionOut(BaseModel):
    id: str
    name: str
    content: str
    created_at: datetime
