"""
In-memory JSON-backed document repository.

The whole document is parsed at construction time into an immutable
snapshot. Queries are plain synchronous scans exposed through the async
DocumentRepository interface so callers can swap in the remote store.
"""

from __future__ import annotations

import logging
import os
from itertools import islice
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from pydantic import TypeAdapter, ValidationError

from .base import DocumentRepository, ItemNotFoundError, LoadError, Predicate, SortKey, T

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, BinaryIO]


def _read_source(source: Source) -> tuple[bytes, str]:
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            return path.read_bytes(), str(path)
        except OSError as exc:
            raise LoadError(f"Cannot read {path}: {exc}", source=str(path)) from exc

    name = str(getattr(source, "name", "<stream>"))
    try:
        data = source.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
    except (OSError, ValueError) as exc:
        # closed streams and undecodable text surface as ValueError
        raise LoadError(f"Cannot read {name}: {exc}", source=name) from exc
    return data, name


class LocalDocumentRepository(DocumentRepository[T]):
    """Read-only repository over a JSON array loaded from a file or stream."""

    def __init__(self, model: type[T], source: Source) -> None:
        self.model = model
        data, name = _read_source(source)
        try:
            items = TypeAdapter(list[model]).validate_json(data)
        except ValidationError as exc:
            raise LoadError(f"Malformed {model.__name__} document in {name}: {exc}", source=name) from exc
        self._items: tuple[T, ...] = tuple(items)
        logger.info("Loaded %d %s records from %s", len(self._items), model.__name__, name)

    def __len__(self) -> int:
        return len(self._items)

    async def get_items(
        self,
        predicate: Predicate,
        sort_key: SortKey,
        page: int = 1,
        page_size: int = 10,
    ) -> Iterator[T]:
        if page_size <= 0:
            return iter(())
        matches = [item for item in self._items if predicate(item)]
        # list.sort is stable with reverse=True, ties keep document order
        matches.sort(key=sort_key, reverse=True)
        start = max(page * page_size, 0)
        logger.debug(
            "%s query: %d matches, page=%d page_size=%d",
            self.model.__name__,
            len(matches),
            page,
            page_size,
        )
        return islice(matches, start, start + page_size)

    async def count_items(self, predicate: Predicate) -> int:
        return sum(1 for item in self._items if predicate(item))

    async def get_item(self, item_id: str) -> T:
        key = str(item_id)
        for item in self._items:
            if item.id == key:
                return item
        raise ItemNotFoundError(item_id)
