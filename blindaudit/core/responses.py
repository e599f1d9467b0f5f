from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from blindaudit.core.audit import log_event
from blindaudit.core.content_validation import validate_response_content
from blindaudit.core.errors import AlreadySubmitted, NotFound, Unauthorized, storage_errors
from blindaudit.core.upsert import UpsertOutcome, coerce_id, insert_or_fetch, utcnow
from blindaudit.models.prompt import Prompt
from blindaudit.models.response import Response

logger = logging.getLogger(__name__)


def get_own_response(db: Session, prompt_id: uuid.UUID, user_id: uuid.UUID) -> Response | None:
    return (
        db.query(Response)
        .filter(Response.prompt_id == prompt_id, Response.user_id == user_id)
        .with_for_update()
        .execution_options(populate_existing=True)
        .one_or_none()
    )


def _get_prompt_or_404(db: Session, prompt_id: uuid.UUID) -> Prompt:
    prompt = db.get(Prompt, prompt_id)
    if not prompt:
        raise NotFound("Prompt not found")
    return prompt


def _upsert_response(
    db: Session,
    *,
    prompt_id: uuid.UUID,
    user_id: uuid.UUID,
    content: str,
    submit: bool,
) -> tuple[Response, UpsertOutcome]:
    now = utcnow()

    row = get_own_response(db, prompt_id, user_id)
    if row is None:
        row, inserted = insert_or_fetch(
            db,
            Response(
                prompt_id=prompt_id,
                user_id=user_id,
                content=content,
                is_submitted=submit,
                submitted_at=now if submit else None,
                updated_at=now,
            ),
            lambda: get_own_response(db, prompt_id, user_id),
        )
        if inserted:
            return row, UpsertOutcome.INSERTED

    if row.is_submitted:
        raise AlreadySubmitted()

    row.content = content
    row.updated_at = now
    if submit:
        # one-way: content, flag and timestamp land in the same UPDATE
        row.is_submitted = True
        row.submitted_at = now
    db.flush()
    return row, UpsertOutcome.UPDATED


def _write_response(
    db: Session,
    *,
    prompt_id: uuid.UUID | str,
    user_id: uuid.UUID | None,
    content: str,
    submit: bool,
) -> tuple[Response, UpsertOutcome]:
    if user_id is None:
        raise Unauthorized()
    content = validate_response_content(content)
    pid = coerce_id(prompt_id, "Prompt")

    with storage_errors():
        _get_prompt_or_404(db, pid)
        row, outcome = _upsert_response(
            db, prompt_id=pid, user_id=user_id, content=content, submit=submit
        )

        log_event(
            db=db,
            actor_id=user_id,
            action="RESPONSE_SUBMITTED" if submit else "RESPONSE_DRAFT_SAVED",
            entity_type="response",
            entity_id=row.id,
            metadata={
                "prompt_id": str(pid),
                "outcome": outcome.value,
                "content_length": len(content),
            },
        )
        # visible to the next read before we return
        db.commit()

    logger.info(
        "%s prompt_id=%s user_id=%s response_id=%s outcome=%s",
        "response submitted" if submit else "draft saved",
        pid, user_id, row.id, outcome.value,
    )
    return row, outcome


def save_draft(
    db: Session,
    prompt_id: uuid.UUID | str,
    user_id: uuid.UUID | None,
    content: str,
) -> tuple[Response, UpsertOutcome]:
    return _write_response(db, prompt_id=prompt_id, user_id=user_id, content=content, submit=False)


def submit_response(
    db: Session,
    prompt_id: uuid.UUID | str,
    user_id: uuid.UUID | None,
    content: str,
) -> tuple[Response, UpsertOutcome]:
    """
    Final, irreversible submission. Fails with AlreadySubmitted on every
    attempt after the first success and leaves submitted_at untouched.
    """
    return _write_response(db, prompt_id=prompt_id, user_id=user_id, content=content, submit=True)
