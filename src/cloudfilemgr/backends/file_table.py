"""Ordered in-memory file table guarded by a readers-writer lock."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, Optional

from cloudfilemgr.models import FileItem


class ReadWriteLock:
    """
    asyncio readers-writer lock.

    Any number of readers may hold the lock together; a writer holds it alone.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer)
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


class FileTable:
    """
    A backend's file table.

    Items are kept in insertion order; replacing an item keeps its position.
    Callers hold `lock.read()` / `lock.write()` around access.
    """

    def __init__(self, items: Iterable[FileItem] = ()) -> None:
        self.lock = ReadWriteLock()
        self._items_by_id: dict[str, FileItem] = {}
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return len(self._items_by_id)

    def __contains__(self, file_id: object) -> bool:
        return file_id in self._items_by_id

    # ----------------------------
    # Query helpers
    # ----------------------------
    def get(self, file_id: str) -> Optional[FileItem]:
        return self._items_by_id.get(file_id)

    def all_items(self) -> list[FileItem]:
        return list(self._items_by_id.values())

    def children_of(self, parent_id: str) -> list[FileItem]:
        return [item for item in self._items_by_id.values() if item.parent_id == parent_id]

    # ----------------------------
    # Mutation helpers
    # ----------------------------
    def append(self, item: FileItem) -> None:
        if item.id in self._items_by_id:
            raise ValueError(f"Duplicate file id: {item.id}")
        self._items_by_id[item.id] = item

    def replace(self, item: FileItem) -> None:
        """Replace the item with the same id in place. Raises KeyError if absent."""
        if item.id not in self._items_by_id:
            raise KeyError(item.id)
        self._items_by_id[item.id] = item

    def remove(self, file_id: str) -> bool:
        """Remove by id. Returns False if the id was not present."""
        return self._items_by_id.pop(file_id, None) is not None
