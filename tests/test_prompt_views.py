import uuid

import pytest
from sqlalchemy.exc import OperationalError

from blindaudit.core.errors import NotFound, StorageUnavailable, Unauthorized
from blindaudit.core.prompt_views import get_prompt_view, list_prompt_views
from blindaudit.core.status import PromptStatus
from tests.helpers import (
    create_acknowledgment,
    create_prompt,
    create_response,
    setup_pair,
)


def test_partner_content_redacted_until_requester_submits(db_session):
    alex, sam, prompt = setup_pair(db_session)
    create_response(db_session, prompt, sam, content="hello", is_submitted=True)

    view = get_prompt_view(db_session, prompt.id, alex.id)

    assert view.status == PromptStatus.LOCKED
    assert view.my_response is None
    assert view.partner_response.is_submitted is True
    assert view.partner_response.submitted_at is not None
    assert view.partner_response.content is None


def test_partner_draft_stays_redacted_while_requester_drafts(db_session):
    alex, sam, prompt = setup_pair(db_session)
    create_response(db_session, prompt, alex, content="mine, unfinished")
    create_response(db_session, prompt, sam, content="theirs, unfinished")

    view = get_prompt_view(db_session, prompt.id, alex.id)

    assert view.status == PromptStatus.INCOMPLETE
    assert view.partner_response.content is None
    assert view.partner_response.is_submitted is False
    # own content is never redacted
    assert view.my_response.content == "mine, unfinished"


def test_partner_content_released_after_requester_submits(db_session):
    alex, sam, prompt = setup_pair(db_session)
    create_response(db_session, prompt, alex, content="mine", is_submitted=True)
    create_response(db_session, prompt, sam, content="hello", is_submitted=True)

    view = get_prompt_view(db_session, prompt.id, alex.id)

    assert view.status == PromptStatus.READY_FOR_REVIEW
    assert view.partner_response.content == "hello"


def test_submitted_requester_sees_partner_draft_content(db_session):
    alex, sam, prompt = setup_pair(db_session)
    create_response(db_session, prompt, alex, content="mine", is_submitted=True)
    create_response(db_session, prompt, sam, content="still typing")

    view = get_prompt_view(db_session, prompt.id, alex.id)

    assert view.status == PromptStatus.PENDING_PARTNER
    assert view.partner_response.is_submitted is False
    assert view.partner_response.content == "still typing"


def test_acknowledgment_flags_are_per_direction(db_session):
    alex, sam, prompt = setup_pair(db_session)
    mine = create_response(db_session, prompt, alex, content="a", is_submitted=True)
    theirs = create_response(db_session, prompt, sam, content="b", is_submitted=True)
    create_acknowledgment(db_session, theirs, alex)

    alex_view = get_prompt_view(db_session, prompt.id, alex.id)
    assert alex_view.partner_response.has_my_acknowledgment is True
    assert alex_view.partner_response.has_partner_acknowledgment is False
    assert alex_view.status == PromptStatus.READY_FOR_REVIEW

    sam_view = get_prompt_view(db_session, prompt.id, sam.id)
    assert sam_view.partner_response.has_my_acknowledgment is False
    assert sam_view.partner_response.has_partner_acknowledgment is True

    create_acknowledgment(db_session, mine, sam)
    assert get_prompt_view(db_session, prompt.id, alex.id).status == PromptStatus.DONE
    assert get_prompt_view(db_session, prompt.id, sam.id).status == PromptStatus.DONE


def test_list_views_ordered_and_redacted(db_session):
    alex, sam, first = setup_pair(db_session)
    third = create_prompt(db_session, order=3)
    second = create_prompt(db_session, order=2)
    create_response(db_session, second, sam, content="secret", is_submitted=True)
    create_response(db_session, third, alex, content="x", is_submitted=True)
    create_response(db_session, third, sam, content="visible", is_submitted=True)

    views = list_prompt_views(db_session, alex.id)

    assert [v.order for v in views] == [1, 2, 3]
    assert [v.status for v in views] == [
        PromptStatus.INCOMPLETE,
        PromptStatus.LOCKED,
        PromptStatus.READY_FOR_REVIEW,
    ]
    assert views[1].partner_response.content is None
    assert views[2].partner_response.content == "visible"


def test_view_requires_identity(db_session):
    _, _, prompt = setup_pair(db_session)
    with pytest.raises(Unauthorized):
        get_prompt_view(db_session, prompt.id, None)
    with pytest.raises(Unauthorized):
        list_prompt_views(db_session, None)


def test_unknown_or_malformed_prompt_is_not_found(db_session):
    alex, _, _ = setup_pair(db_session)
    with pytest.raises(NotFound):
        get_prompt_view(db_session, uuid.uuid4(), alex.id)
    with pytest.raises(NotFound):
        get_prompt_view(db_session, "not-a-uuid", alex.id)


def test_storage_failure_is_not_swallowed(db_session, monkeypatch):
    alex, _, prompt = setup_pair(db_session)

    def _down(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(db_session, "get", _down)
    with pytest.raises(StorageUnavailable):
        get_prompt_view(db_session, prompt.id, alex.id)
