import uuid
from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column
import sqlalchemy as sa

from blindaudit.db.base import Base
from blindaudit.db.types import UTCDateTime


class Response(Base):
    __tablename__ = "responses"
    __table_args__ = (
        UniqueConstraint("prompt_id", "user_id", name="uq_responses_prompt_user"),
        # submitted <=> submitted_at is set
        CheckConstraint(
            "(is_submitted AND submitted_at IS NOT NULL) OR (NOT is_submitted AND submitted_at IS NULL)",
            name="ck_responses_submitted_ts",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    prompt_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("prompts.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    # opaque rich-text markup
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    is_submitted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    submitted_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, server_default=sa.func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=sa.func.now(),
    )
