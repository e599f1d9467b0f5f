from typing import Generic, Sequence, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class PaginationMeta(BaseModel):
    total: int
    limit: int
    offset: int
    has_more: bool

    @property
    def page(self) -> int:
        """1-indexed page number"""
        if self.limit == 0:
            return 1
        return (self.offset // self.limit) + 1


class PaginatedResponse(BaseModel, Generic[T]):
    items: list[T]
    pagination: PaginationMeta


def paginate(items: Sequence[T], *, limit: int, offset: int) -> PaginatedResponse[T]:
    """Slice an already-ordered, already-filtered sequence."""
    window = list(items[offset:offset + limit])
    return PaginatedResponse(
        items=window,
        pagination=PaginationMeta(
            total=len(items),
            limit=limit,
            offset=offset,
            has_more=(offset + len(window) < len(items)),
        ),
    )
