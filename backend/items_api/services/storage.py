"""Persistence for the item collection.

The whole collection is the unit of read and write: ``load`` returns every item
and ``save`` overwrites the backing store with the given list.
"""

import abc
import asyncio
import copy
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Entries are normally objects, but any JSON array read from disk is kept as-is.
Collection = list[Any]


class ItemStorage(abc.ABC):
    """Interface shared by every storage backend."""

    @abc.abstractmethod
    async def load(self) -> Collection:
        """Return the full collection, or an empty list if nothing can be read."""

    @abc.abstractmethod
    async def save(self, collection: Collection) -> None:
        """Replace the stored collection with ``collection``."""


class JsonFileStorage(ItemStorage):
    """Collection kept as a pretty-printed JSON array in a single file.

    Reads never fail: a missing, unreadable or malformed document is treated as
    an empty collection. Write errors are left to propagate.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def load(self) -> Collection:
        return await asyncio.to_thread(self._read)

    async def save(self, collection: Collection) -> None:
        await asyncio.to_thread(self._write, collection)

    def _read(self) -> Collection:
        try:
            raw = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            logger.debug('No data file at %s, starting with an empty collection', self.path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning('Could not read %s, using an empty collection: %s', self.path, e)
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning('Malformed JSON in %s, using an empty collection: %s', self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning('%s does not hold a JSON array, using an empty collection', self.path)
            return []

        return data

    def _write(self, collection: Collection) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(collection, ensure_ascii=False, indent=2), encoding='utf-8')
        logger.debug('Saved %d items to %s', len(collection), self.path)


class InMemoryStorage(ItemStorage):
    """Process-local storage; every load hands out an independent copy."""

    def __init__(self, initial: Collection | None = None):
        self._collection: Collection = copy.deepcopy(initial) if initial else []

    async def load(self) -> Collection:
        return copy.deepcopy(self._collection)

    async def save(self, collection: Collection) -> None:
        self._collection = copy.deepcopy(collection)
