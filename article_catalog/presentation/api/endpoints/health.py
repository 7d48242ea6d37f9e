"""Health check endpoint: reports version, environment and storage reachability."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from article_catalog.config import get_settings
from article_catalog.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_db_session)) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    try:
        await session.execute(text("SELECT 1"))
        database = "reachable"
    except SQLAlchemyError as exc:
        logger.warning("Health check could not reach the database: %s", exc)
        database = "unreachable"
    return {
        "status": "healthy" if database == "reachable" else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": database,
    }
