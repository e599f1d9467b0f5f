from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blindaudit.core.errors import NotFound

T = TypeVar("T")


class UpsertOutcome(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    UNCHANGED = "unchanged"  # row already existed and was left as-is


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def coerce_id(value: uuid.UUID | str, entity: str) -> uuid.UUID:
    """Malformed ids cannot name an existing row, so they are reported as NotFound."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise NotFound(f"{entity} not found")


def insert_or_fetch(
    db: Session,
    row: T,
    fetch_existing: Callable[[], T | None],
) -> tuple[T, bool]:
    """
    Insert `row` inside a SAVEPOINT. If a unique constraint fires because a
    concurrent request created the same composite key first, the savepoint is
    rolled back and the winner is returned instead.

    Returns (row, inserted).
    """
    try:
        with db.begin_nested():
            db.add(row)
            db.flush()  # may raise IntegrityError if unique constraint hits
    except IntegrityError:
        existing = fetch_existing()
        if existing is None:
            # constraint other than the composite key (e.g. FK); not a race
            raise
        return existing, False
    return row, True
