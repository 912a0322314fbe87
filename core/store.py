import uuid
import asyncio
import logging
from typing import Any, Dict

from core.exceptions import RecordNotFound, PersistenceFailure
from core.identity import find_record_index, extract_key
from core.query import execute
from core.registry import TableRegistry
from core.seed import build_seed
from core.snapshot import SnapshotFile
from models.api import PageQuery, PageData

logger = logging.getLogger("storefront.store")


class TableStore:
    """
    page / create / update / delete over the registered tables.

    Each call holds the store lock until its snapshot write has finished, so
    calls never interleave and a returned mutation is already on disk (unless
    the write failed, which is logged and otherwise ignored).
    """

    def __init__(self, registry: TableRegistry, snapshot: SnapshotFile):
        self.registry = registry
        self.snapshot = snapshot
        self._lock = asyncio.Lock()

    def load(self) -> None:
        data = self.snapshot.load()
        if data is not None:
            self.registry.replace_all(data)
            logger.info(f"--- Loaded snapshot {self.snapshot.path}: {self.registry.counts()} ---")
            return

        logger.info("--- No usable snapshot. Installing seed data. ---")
        self.registry.replace_all(build_seed())
        self._flush()

    async def page(self, table_id: Any, query: PageQuery | None = None) -> PageData:
        if query is None:
            query = PageQuery()

        async with self._lock:
            records = self.registry.resolve(table_id)
            return execute(records, query)

    async def create(self, table_id: Any, record: Dict[str, Any]) -> Dict[str, Any]:
        async with self._lock:
            records = self.registry.resolve(table_id)

            new_record = dict(record)
            if not new_record.get("id"):
                new_record["id"] = str(uuid.uuid4())

            records.append(new_record)
            self._flush()

            logger.info(f"Record created in table {table_id}: {new_record['id']}")
            return dict(new_record)

    async def update(self, table_id: Any, patch: Dict[str, Any]) -> Dict[str, Any]:
        async with self._lock:
            records = self.registry.resolve(table_id)

            key_field, key = extract_key(patch)
            index = find_record_index(records, key)
            if index is None:
                raise RecordNotFound(table_id, key)

            changes = {k: v for k, v in patch.items() if k != key_field}
            records[index] = {**records[index], **changes}
            self._flush()

            logger.info(f"Record updated in table {table_id}: {key}")
            return dict(records[index])

    async def delete(self, table_id: Any, key: Any) -> None:
        async with self._lock:
            records = self.registry.resolve(table_id)

            index = find_record_index(records, key)
            if index is None:
                raise RecordNotFound(table_id, key)

            del records[index]
            self._flush()

            logger.info(f"Record deleted from table {table_id}: {key}")

    def _flush(self) -> None:
        try:
            self.snapshot.save(self.registry.dump())
        except PersistenceFailure as e:
            logger.error(f"!!! CRITICAL: {e}. In-memory change kept. !!!")
