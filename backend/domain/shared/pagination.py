"""Offset pagination primitives.

PageRequest validates the requested window, Page carries one slice of a
filtered result together with the counts a client needs to keep paging.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, Sequence, TypeVar

from domain.shared.errors import ErrorKind, ValidationError

T = TypeVar("T")

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class PageRequest:
    """Requested page window.

    Attributes:
        page: Zero-based page index (>= 0)
        size: Page size in [1, 100]
        sort: Optional sort key (informational, results keep repository order)
        direction: Sort direction for ``sort``

    Raises:
        ValidationError: INVALID_PAGE or INVALID_PAGE_SIZE.
    """

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: Optional[str] = None
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError(
                ErrorKind.INVALID_PAGE, f"Page must be zero or positive, got {self.page}"
            )
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValidationError(
                ErrorKind.INVALID_PAGE_SIZE,
                f"Page size must be between 1 and {MAX_PAGE_SIZE}, got {self.size}",
            )

    @property
    def offset(self) -> int:
        return self.page * self.size

    def slice(self, items: Sequence[T]) -> List[T]:
        """Items of this page; empty when the page lies past the end."""
        return list(items[self.offset : self.offset + self.size])


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results.

    ``total_pages`` is at least 1 even for an empty result, so an empty
    first page is reported as both ``first`` and ``last``.
    """

    content: List[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool

    @classmethod
    def of(cls, content: List[T], request: PageRequest, total_elements: int) -> "Page[T]":
        if total_elements == 0:
            total_pages = 1
        else:
            total_pages = (total_elements - 1) // request.size + 1

        return cls(
            content=content,
            page=request.page,
            size=request.size,
            total_elements=total_elements,
            total_pages=total_pages,
            first=request.page == 0,
            last=request.page >= total_pages - 1,
        )

    @classmethod
    def from_items(cls, items: Sequence[T], request: PageRequest) -> "Page[T]":
        """Paginate an already filtered, fully materialized sequence."""
        return cls.of(request.slice(items), request, len(items))
