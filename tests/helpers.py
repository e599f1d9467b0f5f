from datetime import datetime, timezone
from sqlalchemy.orm import Session

from blindaudit.models.acknowledgment import Acknowledgment
from blindaudit.models.prompt import Prompt
from blindaudit.models.response import Response
from blindaudit.models.user import User


def create_user(db: Session, email: str, full_name="User", is_active=True) -> User:
    u = User(email=email.lower(), full_name=full_name, is_active=is_active)
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def create_prompt(db: Session, order: int, text: str | None = None, title: str | None = None) -> Prompt:
    p = Prompt(text=text or f"Prompt number {order}?", order=order, title=title)
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def create_response(
    db: Session,
    prompt: Prompt,
    user: User,
    content: str = "draft",
    is_submitted: bool = False,
) -> Response:
    """Writes a row directly, bypassing the mutation rules."""
    now = datetime.now(timezone.utc)
    r = Response(
        prompt_id=prompt.id,
        user_id=user.id,
        content=content,
        is_submitted=is_submitted,
        submitted_at=now if is_submitted else None,
        updated_at=now,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    return r


def create_acknowledgment(db: Session, response: Response, user: User) -> Acknowledgment:
    a = Acknowledgment(
        response_id=response.id,
        user_id=user.id,
        acknowledged_at=datetime.now(timezone.utc),
    )
    db.add(a)
    db.commit()
    db.refresh(a)
    return a


def setup_pair(db: Session):
    """Two participants and one prompt, the minimal double-blind setup."""
    alex = create_user(db, "alex@local.test", "Alex")
    sam = create_user(db, "sam@local.test", "Sam")
    prompt = create_prompt(db, order=1)
    return alex, sam, prompt


def hdr(user: User) -> dict[str, str]:
    return {"X-User-Email": user.email}
