"""
Health check router.

Liveness/readiness probe: reports the application version and
whether the person database answers a trivial query.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.interfaces.persons.dependencies import get_db_engine
from app.interfaces.persons.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version and database reachability.",
)
def health_check(engine: Engine = Depends(get_db_engine)) -> HealthResponse:
    """Return current application health status."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", type(exc).__name__)
        database = "unavailable"
    return HealthResponse(status="ok", version=settings.version, database=database)
