import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from blindaudit.db.base import Base
from blindaudit.db.types import UTCDateTime


class Acknowledgment(Base):
    """A user has read the other participant's submitted response."""

    __tablename__ = "acknowledgments"
    __table_args__ = (
        UniqueConstraint("response_id", "user_id", name="uq_acknowledgments_response_user"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    response_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("responses.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    # set once on insert, never rewritten
    acknowledged_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
