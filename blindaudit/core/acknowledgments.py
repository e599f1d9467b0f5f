from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from blindaudit.core.audit import log_event
from blindaudit.core.errors import (
    ActorNotSubmitted,
    NotFound,
    ResponseNotSubmitted,
    SelfAcknowledgment,
    Unauthorized,
    storage_errors,
)
from blindaudit.core.responses import get_own_response
from blindaudit.core.upsert import UpsertOutcome, coerce_id, insert_or_fetch, utcnow
from blindaudit.models.acknowledgment import Acknowledgment
from blindaudit.models.response import Response

logger = logging.getLogger(__name__)


def _get_acknowledgment(db: Session, response_id: uuid.UUID, user_id: uuid.UUID) -> Acknowledgment | None:
    return (
        db.query(Acknowledgment)
        .filter(Acknowledgment.response_id == response_id, Acknowledgment.user_id == user_id)
        .one_or_none()
    )


def acknowledge(
    db: Session,
    response_id: uuid.UUID | str,
    acting_user_id: uuid.UUID | None,
) -> tuple[Acknowledgment, UpsertOutcome]:
    """
    Record that acting_user_id has read the response. Gates, in order:
      - the response exists
      - it belongs to the other participant
      - it is submitted
      - the actor's own response for the same prompt is submitted
    A repeat call returns the existing row with its original timestamp.
    """
    if acting_user_id is None:
        raise Unauthorized()
    rid = coerce_id(response_id, "Response")

    with storage_errors():
        response = db.get(Response, rid, populate_existing=True)
        if not response:
            raise NotFound("Response not found")

        if response.user_id == acting_user_id:
            raise SelfAcknowledgment()

        if not response.is_submitted:
            raise ResponseNotSubmitted()

        mine = get_own_response(db, response.prompt_id, acting_user_id)
        if not mine or not mine.is_submitted:
            raise ActorNotSubmitted()

        existing = _get_acknowledgment(db, rid, acting_user_id)
        if existing:
            return existing, UpsertOutcome.UNCHANGED

        ack, inserted = insert_or_fetch(
            db,
            Acknowledgment(response_id=rid, user_id=acting_user_id, acknowledged_at=utcnow()),
            lambda: _get_acknowledgment(db, rid, acting_user_id),
        )
        if not inserted:
            return ack, UpsertOutcome.UNCHANGED

        log_event(
            db=db,
            actor_id=acting_user_id,
            action="RESPONSE_ACKNOWLEDGED",
            entity_type="response",
            entity_id=rid,
            metadata={
                "prompt_id": str(response.prompt_id),
                "acknowledgment_id": str(ack.id),
            },
        )
        db.commit()

    logger.info(
        "response acknowledged response_id=%s user_id=%s prompt_id=%s",
        rid, acting_user_id, response.prompt_id,
    )
    return ack, UpsertOutcome.INSERTED
