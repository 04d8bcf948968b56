"""Banner, Health & Readiness Probes.

Invariants:
    - GET / always returns the service banner
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)

Design Decisions:
    - db_manager read through the module at call time: it is assigned in the
      lifespan, after this module is imported
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from blog_api.infrastructure import database
from blog_api.schemas.envelope import success

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

SERVICE_NAME = "blog-api"
SERVICE_VERSION = "1.0.0"


@router.get("/")
async def banner():
    return {
        "status": "success",
        "message": "Simple Blog API is running",
        "version": SERVICE_VERSION,
    }


@router.get("/health/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return success(data={"service": SERVICE_NAME, "version": SERVICE_VERSION})


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "message": "Database unavailable"},
        )
    return success(data={"checks": {"database": "healthy"}})
