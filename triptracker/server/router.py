"""
Central router that aggregates the resource collections.
"""

from fastapi import APIRouter
from triptracker.server.routes.collection import collection_router
from triptracker.server.store import COLLECTIONS

api_router = APIRouter()
for collection in COLLECTIONS:
    api_router.include_router(collection_router(collection))
