"""
Page Model
==========

One page of a paginated listing.
"""
from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field

ItemType = TypeVar("ItemType")


class Page(BaseModel, Generic[ItemType]):
    """A 1-based page of items plus the totals needed to navigate."""
    items: List[ItemType] = Field(default_factory=list)
    total_count: int = Field(0, ge=0)
    has_next: bool = False
    current_page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)

    @classmethod
    def build(cls, items: List[ItemType], total_count: int, page: int, page_size: int) -> "Page[ItemType]":
        """Assemble a page; has_next is derived from the skip offset."""
        skip = (page - 1) * page_size
        return cls(
            items=items,
            total_count=total_count,
            has_next=skip + page_size < total_count,
            current_page=page,
            page_size=page_size,
        )
