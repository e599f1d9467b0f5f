import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blindaudit.core.acknowledgments import acknowledge
from blindaudit.core.errors import storage_errors
from blindaudit.core.prompt_views import get_prompt_view
from blindaudit.core.security import get_current_user
from blindaudit.db.session import get_db
from blindaudit.models.acknowledgment import Acknowledgment
from blindaudit.models.response import Response
from blindaudit.models.user import User
from blindaudit.schemas.response import AcknowledgeResultOut, AcknowledgmentOut

router = APIRouter(prefix="/responses", tags=["acknowledgments"])


def ack_to_out(a: Acknowledgment) -> AcknowledgmentOut:
    return AcknowledgmentOut(
        id=str(a.id),
        response_id=str(a.response_id),
        user_id=str(a.user_id),
        acknowledged_at=a.acknowledged_at,
    )


@router.post("/{response_id}/acknowledge", response_model=AcknowledgeResultOut)
def acknowledge_response(
    response_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Mark the partner's response as read. Repeat calls succeed with
    outcome "unchanged" and the original timestamp.
    """
    ack, outcome = acknowledge(db, response_id, current_user.id)
    with storage_errors():
        target = db.get(Response, ack.response_id)
    return AcknowledgeResultOut(
        acknowledgment=ack_to_out(ack),
        outcome=outcome,
        prompt=get_prompt_view(db, target.prompt_id, current_user.id),
    )
