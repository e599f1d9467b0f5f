from datetime import datetime
from pydantic import BaseModel

from blindaudit.core.status import PromptStatus


class MyResponseOut(BaseModel):
    id: str
    content: str
    is_submitted: bool
    submitted_at: datetime | None


class PartnerResponseOut(BaseModel):
    id: str
    is_submitted: bool
    submitted_at: datetime | None
    content: str | None  # None while the requester has not submitted
    has_my_acknowledgment: bool
    has_partner_acknowledgment: bool


class PromptView(BaseModel):
    id: str
    title: str | None = None
    text: str
    order: int
    status: PromptStatus
    my_response: MyResponseOut | None
    partner_response: PartnerResponseOut | None


class TopicOut(BaseModel):
    id: str
    title: str | None = None
    text: str
    order: int
