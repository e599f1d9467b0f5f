from pydantic import BaseModel


class PartnerOut(BaseModel):
    id: str
    email: str
    full_name: str


class MeOut(BaseModel):
    id: str
    email: str
    full_name: str
    partner: PartnerOut | None
