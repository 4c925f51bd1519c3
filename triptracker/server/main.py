"""
Trip Tracker resource server - development backend.

A json-server style REST backend for the `users` and `trips`
collections, held in memory. Run with:

    uvicorn triptracker.server.main:app --port 3000
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from triptracker.core.config import get_settings
from triptracker.core.logging import setup_logging, get_logger
from triptracker.core.metrics import metrics_endpoint
from triptracker.server.middleware import RequestLoggingMiddleware
from triptracker.server.router import api_router
from triptracker.server.store import ResourceStore, get_store

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "resource_server_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    yield

    logger.info("resource_server_shutdown")


app = FastAPI(
    title=f"{settings.APP_NAME} Resource Server",
    version=settings.APP_VERSION,
    description="In-memory users/trips JSON resource API",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check(store: ResourceStore = Depends(get_store)):
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "records": store.counts(),
    }


@app.get("/metrics", tags=["Health"])
def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME} resource server",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
