import asyncio
import logging
import uuid
from typing import Any

from items_api.core.config import settings
from items_api.services.storage import Collection, ItemStorage, JsonFileStorage

logger = logging.getLogger(__name__)


def find_item(collection: Collection, item_id: str) -> dict[str, Any] | None:
    """Return the first item whose id matches ``item_id``.

    Ids are opaque tokens, so both sides are compared as strings. This also
    lets hand-written documents with numeric ids be looked up by path.
    """
    for item in collection:
        if isinstance(item, dict) and item.get('id') is not None and str(item['id']) == item_id:
            return item
    return None


def new_item(payload: dict[str, Any]) -> dict[str, Any]:
    """Build a stored item from client data, replacing any client-sent id."""
    fields = {key: value for key, value in payload.items() if key != 'id'}
    return {'id': str(uuid.uuid4()), **fields}


class ItemRepository:
    """Item operations on top of an ``ItemStorage``.

    Every call loads the collection fresh. Creates hold a lock across the
    load-append-save sequence so concurrent requests in this process cannot
    overwrite each other's appends.
    """

    def __init__(self, storage: ItemStorage):
        self.storage = storage
        self._write_lock = asyncio.Lock()

    async def list_items(self) -> Collection:
        return await self.storage.load()

    async def get_item(self, item_id: str) -> dict[str, Any] | None:
        collection = await self.storage.load()
        return find_item(collection, item_id)

    async def create_item(self, payload: dict[str, Any]) -> dict[str, Any]:
        item = new_item(payload)
        async with self._write_lock:
            collection = await self.storage.load()
            collection.append(item)
            try:
                await self.storage.save(collection)
            except Exception:
                logger.exception('Failed to save item %s', item['id'])
                raise

        logger.info('Created item %s (%d items stored)', item['id'], len(collection))
        return item


_item_repository: ItemRepository | None = None


def get_item_repository() -> ItemRepository:
    """Returns the process-wide repository backed by the configured data file."""
    global _item_repository
    if _item_repository is None:
        _item_repository = ItemRepository(JsonFileStorage(settings.data_file))
    return _item_repository
