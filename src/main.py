"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from src.api.v1.brands import router as brands_router
from src.api.v1.leads import router as leads_router
from src.config import settings
from src.logging_config import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("app_starting", environment=settings.environment)
    yield
    logger.info("app_shutting_down")


app = FastAPI(
    title="OmaHub Leads API",
    description="Lead intake and revenue estimation for designer brands",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(leads_router)
app.include_router(brands_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "OmaHub Leads API",
        "version": "0.1.0",
        "status": "running",
    }
