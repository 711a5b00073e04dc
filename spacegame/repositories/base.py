"""Repository interface shared by the local and remote document stores."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, TypeVar

from spacegame.domain.models import Model

T = TypeVar("T", bound=Model)

Predicate = Callable[[T], bool]
SortKey = Callable[[T], float]


class RepositoryError(Exception):
    """Base exception for repository failures."""


class LoadError(RepositoryError):
    """Raised when the backing document cannot be read or parsed."""

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source


class ItemNotFoundError(RepositoryError, LookupError):
    """Raised when no document carries the requested id."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item {item_id!r} not found")
        self.item_id = item_id


class DocumentRepository(ABC, Generic[T]):
    """
    Read access to a collection of documents.

    ``page`` is zero-based: implementations skip ``page * page_size``
    matching documents before taking ``page_size`` of them.
    """

    @abstractmethod
    async def get_items(
        self,
        predicate: Predicate,
        sort_key: SortKey,
        page: int = 1,
        page_size: int = 10,
    ) -> Iterator[T]:
        """Return one page of matching documents ordered by ``sort_key`` descending."""

    @abstractmethod
    async def count_items(self, predicate: Predicate) -> int:
        """Return how many documents match ``predicate``."""

    @abstractmethod
    async def get_item(self, item_id: str) -> T:
        """Return the document with the given id or raise ItemNotFoundError."""
