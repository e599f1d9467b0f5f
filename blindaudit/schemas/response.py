from datetime import datetime
from pydantic import BaseModel, Field

from blindaudit.core.upsert import UpsertOutcome
from blindaudit.schemas.prompt_view import PromptView


class ResponsePayload(BaseModel):
    # emptiness and size are checked by the core so the error shape is uniform
    content: str = Field(default="")


class AcknowledgmentOut(BaseModel):
    id: str
    response_id: str
    user_id: str
    acknowledged_at: datetime


class AcknowledgeResultOut(BaseModel):
    acknowledgment: AcknowledgmentOut
    outcome: UpsertOutcome
    prompt: PromptView
