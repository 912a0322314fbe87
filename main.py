from fastapi import FastAPI, Depends, Request, Body
from fastapi.responses import JSONResponse
from typing import Any, Dict
import uvicorn
import logging

from core.constants.main_values import LOG_FILE, LOG_LEVEL
from core.exceptions import TableNotFound, RecordNotFound
from core.identity import extract_key
from core.lifespan import lifespan
from core.store import TableStore
from models.api import PageQuery, PageResponse, RecordResponse, DeleteResponse, ErrorResponse
from prometheus_fastapi_instrumentator import Instrumentator

app = FastAPI(
    title="Storefront",
    description="Generic table store backing the storefront entities",
    version="1.0.0",
    lifespan=lifespan
)

Instrumentator().instrument(app).expose(app)

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(LOG_FILE),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger("storefront")


async def lookup_error_handler(request: Request, exc: LookupError):
    return JSONResponse(status_code=404, content=ErrorResponse(error=str(exc)).model_dump())


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=ErrorResponse(error=f"Internal server error: {exc}").model_dump())


app.add_exception_handler(TableNotFound, lookup_error_handler)
app.add_exception_handler(RecordNotFound, lookup_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)


def get_store(request: Request) -> TableStore:
    return request.app.state.store


@app.get("/ping")
async def root():
    return {"status": "alive"}


@app.post("/table/create/{table_id}", response_model=RecordResponse)
async def create_record_endpoint(
        table_id: str,
        record: Dict[str, Any] | None = Body(default=None),
        store: TableStore = Depends(get_store)
):
    created = await store.create(table_id, record or {})
    return RecordResponse(data=created)


@app.post("/table/update/{table_id}", response_model=RecordResponse)
async def update_record_endpoint(
        table_id: str,
        patch: Dict[str, Any] | None = Body(default=None),
        store: TableStore = Depends(get_store)
):
    updated = await store.update(table_id, patch or {})
    return RecordResponse(data=updated)


@app.post("/table/delete/{table_id}", response_model=DeleteResponse)
async def delete_record_endpoint(
        table_id: str,
        body: Dict[str, Any] | None = Body(default=None),
        store: TableStore = Depends(get_store)
):
    _, key = extract_key(body or {})
    await store.delete(table_id, key)
    return DeleteResponse()


@app.post("/table/{table_id}", response_model=PageResponse)
async def page_endpoint(
        table_id: str,
        query: PageQuery | None = Body(default=None),
        store: TableStore = Depends(get_store)
):
    page = await store.page(table_id, query)
    return PageResponse(data=page)


if __name__ == "__main__":
    print("--- Starting Storefront on http://0.0.0.0:8000 ---")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        workers=1,
        reload=False,
    )
