"""
Per-requester prompt views.

Every path that hands partner data to a caller goes through
`_partner_out`, which drops the partner's content unless the requester has
submitted their own response for the same prompt.
"""
from __future__ import annotations

import uuid
from typing import Iterable

from sqlalchemy.orm import Session

from blindaudit.core.errors import NotFound, Unauthorized, storage_errors
from blindaudit.core.status import PartnerResponseState, ResponseState, compute_status
from blindaudit.core.upsert import coerce_id
from blindaudit.models.acknowledgment import Acknowledgment
from blindaudit.models.prompt import Prompt
from blindaudit.models.response import Response
from blindaudit.schemas.prompt_view import MyResponseOut, PartnerResponseOut, PromptView

AckKey = tuple[uuid.UUID, uuid.UUID]  # (response_id, user_id)


def _require_user(user_id: uuid.UUID | None) -> uuid.UUID:
    if user_id is None:
        raise Unauthorized()
    return user_id


def _load_responses(db: Session, prompt_ids: list[uuid.UUID]) -> list[Response]:
    if not prompt_ids:
        return []
    return (
        db.query(Response)
        .filter(Response.prompt_id.in_(prompt_ids))
        .order_by(Response.created_at, Response.id)
        .execution_options(populate_existing=True)
        .all()
    )


def _load_ack_keys(db: Session, responses: Iterable[Response]) -> set[AckKey]:
    response_ids = [r.id for r in responses]
    if not response_ids:
        return set()
    rows = (
        db.query(Acknowledgment.response_id, Acknowledgment.user_id)
        .filter(Acknowledgment.response_id.in_(response_ids))
        .all()
    )
    return {(r[0], r[1]) for r in rows}


def _my_response_out(r: Response) -> MyResponseOut:
    return MyResponseOut(
        id=str(r.id),
        content=r.content,
        is_submitted=r.is_submitted,
        submitted_at=r.submitted_at,
    )


def _partner_out(
    partner: Response,
    mine: Response | None,
    user_id: uuid.UUID,
    ack_keys: set[AckKey],
) -> PartnerResponseOut:
    requester_submitted = bool(mine and mine.is_submitted)
    return PartnerResponseOut(
        id=str(partner.id),
        is_submitted=partner.is_submitted,
        submitted_at=partner.submitted_at,
        content=partner.content if requester_submitted else None,
        has_my_acknowledgment=(partner.id, user_id) in ack_keys,
        has_partner_acknowledgment=(
            mine is not None and (mine.id, partner.user_id) in ack_keys
        ),
    )


def build_prompt_view(
    prompt: Prompt,
    responses: list[Response],
    ack_keys: set[AckKey],
    user_id: uuid.UUID,
) -> PromptView:
    mine = next((r for r in responses if r.user_id == user_id), None)
    partner = next((r for r in responses if r.user_id != user_id), None)

    partner_out = _partner_out(partner, mine, user_id, ack_keys) if partner else None

    status = compute_status(
        ResponseState(is_submitted=mine.is_submitted) if mine else None,
        PartnerResponseState(
            is_submitted=partner_out.is_submitted,
            has_my_acknowledgment=partner_out.has_my_acknowledgment,
            has_partner_acknowledgment=partner_out.has_partner_acknowledgment,
        ) if partner_out else None,
    )

    return PromptView(
        id=str(prompt.id),
        title=prompt.title,
        text=prompt.text,
        order=prompt.order,
        status=status,
        my_response=_my_response_out(mine) if mine else None,
        partner_response=partner_out,
    )


def get_prompt_view(
    db: Session,
    prompt_id: uuid.UUID | str,
    requesting_user_id: uuid.UUID | None,
) -> PromptView:
    user_id = _require_user(requesting_user_id)
    pid = coerce_id(prompt_id, "Prompt")

    with storage_errors():
        prompt = db.get(Prompt, pid)
        if not prompt:
            raise NotFound("Prompt not found")

        responses = _load_responses(db, [prompt.id])
        ack_keys = _load_ack_keys(db, responses)

    return build_prompt_view(prompt, responses, ack_keys, user_id)


def list_prompt_views(
    db: Session,
    requesting_user_id: uuid.UUID | None,
) -> list[PromptView]:
    user_id = _require_user(requesting_user_id)

    with storage_errors():
        prompts = db.query(Prompt).order_by(Prompt.order.asc(), Prompt.id.asc()).all()
        responses = _load_responses(db, [p.id for p in prompts])
        ack_keys = _load_ack_keys(db, responses)

    by_prompt: dict[uuid.UUID, list[Response]] = {}
    for r in responses:
        by_prompt.setdefault(r.prompt_id, []).append(r)

    return [
        build_prompt_view(p, by_prompt.get(p.id, []), ack_keys, user_id)
        for p in prompts
    ]
