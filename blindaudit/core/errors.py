from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any

from fastapi import status
from sqlalchemy.exc import DBAPIError, OperationalError

logger = logging.getLogger(__name__)


class BlindAuditError(Exception):
    """Base for every error the core surfaces to its callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "error"
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None, *, errors: list[dict[str, Any]] | None = None):
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.errors:
            body["errors"] = self.errors
        return body


class Unauthorized(BlindAuditError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"
    default_message = "Not authenticated"


class NotFound(BlindAuditError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Not found"


class AlreadySubmitted(BlindAuditError):
    status_code = status.HTTP_409_CONFLICT
    code = "already_submitted"
    default_message = "Response has already been submitted"


class SelfAcknowledgment(BlindAuditError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "self_acknowledgment"
    default_message = "Cannot acknowledge your own response"


class ResponseNotSubmitted(BlindAuditError):
    status_code = status.HTTP_409_CONFLICT
    code = "response_not_submitted"
    default_message = "Cannot acknowledge an unsubmitted response"


class ActorNotSubmitted(BlindAuditError):
    status_code = status.HTTP_409_CONFLICT
    code = "actor_not_submitted"
    default_message = "You must submit your response before acknowledging"


class ValidationError(BlindAuditError):
    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT
    code = "validation_error"
    default_message = "Validation failed"


class StorageUnavailable(BlindAuditError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "storage_unavailable"
    default_message = "Storage backend unavailable"


def _is_transient(exc: DBAPIError) -> bool:
    return isinstance(exc, OperationalError) or bool(exc.connection_invalidated)


@contextmanager
def storage_errors():
    """
    Translate backend outages into StorageUnavailable. Everything else
    (integrity errors, programming errors) propagates unchanged.
    """
    try:
        yield
    except DBAPIError as exc:
        if not _is_transient(exc):
            raise
        logger.error("storage backend unavailable: %s", exc.__class__.__name__, exc_info=True)
        raise StorageUnavailable() from exc
