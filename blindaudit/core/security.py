import logging

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from blindaudit.core.config import settings
from blindaudit.core.errors import Unauthorized, storage_errors
from blindaudit.db.session import get_db
from blindaudit.models.user import User

logger = logging.getLogger(__name__)


def is_email_whitelisted(email: str) -> bool:
    # fail closed: an empty whitelist admits nobody
    return email.strip().lower() in settings.whitelist


def get_current_user(
    x_user_email: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """
    DEV AUTH: pass X-User-Email header to simulate logged-in user.
    Example: X-User-Email: alex@local.test
    """
    if not x_user_email:
        raise Unauthorized("Missing X-User-Email header (dev auth)")

    email = x_user_email.strip().lower()
    with storage_errors():
        user = db.query(User).filter(User.email == email).one_or_none()
    if not user or not user.is_active:
        raise Unauthorized("Invalid or inactive user")

    if not is_email_whitelisted(user.email):
        logger.warning("rejected non-whitelisted user user_id=%s", user.id)
        raise Unauthorized("User is not a participant")
    return user


def get_partner(db: Session, user: User) -> User | None:
    """The other active participant. Two-party: first match wins."""
    with storage_errors():
        candidates = (
            db.query(User)
            .filter(User.id != user.id, User.is_active.is_(True))
            .order_by(User.created_at, User.email)
            .all()
        )
    for c in candidates:
        if is_email_whitelisted(c.email):
            return c
    return None
