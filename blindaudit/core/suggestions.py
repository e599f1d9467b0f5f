import logging

from sqlalchemy.orm import Session

from blindaudit.core.audit import log_event
from blindaudit.core.content_validation import validate_suggestion
from blindaudit.core.errors import storage_errors
from blindaudit.models.suggestion import Suggestion

logger = logging.getLogger(__name__)


def create_suggestion(db: Session, *, name: str, content: str) -> Suggestion:
    """Anonymous topic suggestion; no caller identity involved."""
    validate_suggestion(name, content)

    with storage_errors():
        s = Suggestion(name=name, content=content)
        db.add(s)
        db.flush()
        log_event(
            db=db,
            actor_id=None,
            action="SUGGESTION_CREATED",
            entity_type="suggestion",
            entity_id=s.id,
            metadata={"content_length": len(s.content)},
        )
        db.commit()
        db.refresh(s)

    logger.info("suggestion created id=%s", s.id)
    return s
