from enum import Enum

from pydantic import BaseModel


class PromptStatus(str, Enum):
    """
    Lifecycle of a prompt as seen by one participant:
      incomplete       -> neither side has submitted
      pending_partner  -> I submitted, partner has not
      locked           -> partner submitted, I have not
      ready_for_review -> both submitted, acknowledgments outstanding
      done             -> both submitted and both acknowledged
    """
    INCOMPLETE = "incomplete"
    PENDING_PARTNER = "pending_partner"
    LOCKED = "locked"
    READY_FOR_REVIEW = "ready_for_review"
    DONE = "done"


class ResponseState(BaseModel):
    is_submitted: bool = False


class PartnerResponseState(BaseModel):
    is_submitted: bool = False
    has_my_acknowledgment: bool = False
    has_partner_acknowledgment: bool = False


def compute_status(
    my_response: ResponseState | None,
    partner_response: PartnerResponseState | None,
) -> PromptStatus:
    my_submitted = my_response.is_submitted if my_response else False
    partner_submitted = partner_response.is_submitted if partner_response else False

    if not my_submitted and not partner_submitted:
        return PromptStatus.INCOMPLETE
    if my_submitted and not partner_submitted:
        return PromptStatus.PENDING_PARTNER
    if not my_submitted and partner_submitted:
        return PromptStatus.LOCKED

    both_acknowledged = (
        partner_response.has_my_acknowledgment
        and partner_response.has_partner_acknowledgment
    )
    return PromptStatus.DONE if both_acknowledged else PromptStatus.READY_FOR_REVIEW
