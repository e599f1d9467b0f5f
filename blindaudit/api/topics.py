from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blindaudit.core.errors import storage_errors
from blindaudit.core.suggestions import create_suggestion
from blindaudit.db.session import get_db
from blindaudit.models.prompt import Prompt
from blindaudit.schemas.prompt_view import TopicOut
from blindaudit.schemas.suggestion import SuggestionCreate, SuggestionOut

# Public: no identity required, never exposes responses.
router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("", response_model=list[TopicOut])
def list_topics(db: Session = Depends(get_db)):
    with storage_errors():
        prompts = db.query(Prompt).order_by(Prompt.order.asc(), Prompt.id.asc()).all()
    return [
        TopicOut(id=str(p.id), title=p.title, text=p.text, order=p.order)
        for p in prompts
    ]


@router.post("/suggestions", response_model=SuggestionOut, status_code=201)
def suggest_topic(payload: SuggestionCreate, db: Session = Depends(get_db)):
    s = create_suggestion(db, name=payload.name, content=payload.content)
    return SuggestionOut(
        id=str(s.id),
        name=s.name,
        content=s.content,
        created_at=s.created_at,
    )
