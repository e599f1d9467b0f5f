import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from blindaudit.core.prompt_views import get_prompt_view, list_prompt_views
from blindaudit.core.responses import save_draft, submit_response
from blindaudit.core.security import get_current_user
from blindaudit.core.status import PromptStatus
from blindaudit.db.session import get_db
from blindaudit.models.user import User
from blindaudit.schemas.pagination import paginate
from blindaudit.schemas.prompt_view import PromptView
from blindaudit.schemas.response import ResponsePayload

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("")
def list_prompts(
    status: PromptStatus | None = Query(default=None, description="Filter by computed status"),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    include_pagination: bool = Query(default=False, description="Include pagination metadata"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Dashboard listing, ordered by prompt order.

    Status is derived per requester, so filtering happens after the views
    are built.
    """
    views = list_prompt_views(db, current_user.id)
    if status:
        views = [v for v in views if v.status == status]

    page = paginate(views, limit=limit, offset=offset)
    if include_pagination:
        return page
    return page.items


@router.get("/{prompt_id}", response_model=PromptView)
def get_prompt(
    prompt_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return get_prompt_view(db, prompt_id, current_user.id)


@router.post("/{prompt_id}/draft", response_model=PromptView)
def save_prompt_draft(
    prompt_id: uuid.UUID,
    payload: ResponsePayload,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    save_draft(db, prompt_id, current_user.id, payload.content)
    return get_prompt_view(db, prompt_id, current_user.id)


@router.post("/{prompt_id}/submit", response_model=PromptView)
def submit_prompt_response(
    prompt_id: uuid.UUID,
    payload: ResponsePayload,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    submit_response(db, prompt_id, current_user.id, payload.content)
    return get_prompt_view(db, prompt_id, current_user.id)
