import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from core.constants.main_values import STORAGE_FILE
from core.registry import TableRegistry
from core.snapshot import SnapshotFile
from core.store import TableStore

logger = logging.getLogger("storefront")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("--- Storefront: Starting up... ---")

    storage_file = getattr(app.state, "storage_file", STORAGE_FILE)
    store = TableStore(TableRegistry(), SnapshotFile(storage_file))
    store.load()
    app.state.store = store

    logger.info("--- Storefront: Startup complete. Service is running. ---")

    yield

    logger.info("--- Storefront: Shutting down. ---")
