"""
REST endpoints for one resource collection (json-server contract).
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from triptracker.core.logging import get_logger
from triptracker.server.store import DuplicateIdError, ResourceStore, get_store

logger = get_logger(__name__)


def collection_router(name: str) -> APIRouter:
    router = APIRouter(prefix=f"/{name}", tags=[name.capitalize()])

    @router.get("")
    async def list_records(request: Request, store: ResourceStore = Depends(get_store)):
        """List records; every query parameter is an exact-match filter."""
        return store.list(name, dict(request.query_params))

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_record(
        record: dict[str, Any] = Body(...),
        store: ResourceStore = Depends(get_store),
    ):
        try:
            created = store.create(name, record)
        except DuplicateIdError as e:
            logger.warning("record_create_conflict", collection=name, error=str(e))
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        logger.info("record_created", collection=name, record_id=created["id"])
        return created

    @router.get("/{record_id}")
    async def get_record(record_id: str, store: ResourceStore = Depends(get_store)):
        record = store.get(name, record_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{name}/{record_id} not found")
        return record

    @router.put("/{record_id}")
    async def replace_record(
        record_id: str,
        record: dict[str, Any] = Body(...),
        store: ResourceStore = Depends(get_store),
    ):
        replaced = store.replace(name, record_id, record)
        if replaced is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{name}/{record_id} not found")
        logger.info("record_replaced", collection=name, record_id=record_id)
        return replaced

    @router.delete("/{record_id}")
    async def delete_record(record_id: str, store: ResourceStore = Depends(get_store)):
        if not store.delete(name, record_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{name}/{record_id} not found")
        logger.info("record_deleted", collection=name, record_id=record_id)
        return {}

    return router
