import itertools

import pytest

from blindaudit.core.status import (
    PartnerResponseState,
    PromptStatus,
    ResponseState,
    compute_status,
)

BOOLS = (False, True)


def _partner(submitted: bool, my_ack: bool = False, partner_ack: bool = False) -> PartnerResponseState:
    return PartnerResponseState(
        is_submitted=submitted,
        has_my_acknowledgment=my_ack,
        has_partner_acknowledgment=partner_ack,
    )


def test_no_records_is_incomplete():
    assert compute_status(None, None) == PromptStatus.INCOMPLETE


def test_missing_partner_record_counts_as_not_submitted():
    assert compute_status(ResponseState(is_submitted=True), None) == PromptStatus.PENDING_PARTNER
    assert compute_status(ResponseState(is_submitted=False), None) == PromptStatus.INCOMPLETE


def test_missing_own_record_counts_as_not_submitted():
    assert compute_status(None, _partner(True)) == PromptStatus.LOCKED


@pytest.mark.parametrize("my_ack,partner_ack", list(itertools.product(BOOLS, BOOLS)))
def test_not_both_submitted_ignores_acknowledgments(my_ack, partner_ack):
    mine_no, mine_yes = ResponseState(is_submitted=False), ResponseState(is_submitted=True)

    assert compute_status(mine_no, _partner(False, my_ack, partner_ack)) == PromptStatus.INCOMPLETE
    assert compute_status(mine_yes, _partner(False, my_ack, partner_ack)) == PromptStatus.PENDING_PARTNER
    assert compute_status(mine_no, _partner(True, my_ack, partner_ack)) == PromptStatus.LOCKED


@pytest.mark.parametrize(
    "my_ack,partner_ack,expected",
    [
        (False, False, PromptStatus.READY_FOR_REVIEW),
        (True, False, PromptStatus.READY_FOR_REVIEW),
        (False, True, PromptStatus.READY_FOR_REVIEW),
        (True, True, PromptStatus.DONE),
    ],
)
def test_both_submitted_splits_on_mutual_acknowledgment(my_ack, partner_ack, expected):
    status = compute_status(ResponseState(is_submitted=True), _partner(True, my_ack, partner_ack))
    assert status == expected


def test_status_serializes_as_plain_string():
    assert PromptStatus.READY_FOR_REVIEW.value == "ready_for_review"
    assert PromptStatus("pending_partner") is PromptStatus.PENDING_PARTNER
