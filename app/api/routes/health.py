"""
Health check route.

Reports whether the database answers and whether every SkillHub table
exists there.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import Base, get_db
from app.core.logging import get_logger
from app.schemas.base import BaseSchema

router = APIRouter(tags=["health"])

logger = get_logger(__name__)


class HealthResponse(BaseSchema):
    status: str
    timestamp: str
    checks: Dict[str, str]


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Check storage and schema.

    Always 200; status is "degraded" when the database is unreachable or
    tables are missing, with the reason under checks.
    """
    checks = {}

    try:
        connection = await db.connection()
        present = set(await connection.run_sync(
            lambda sync_conn: inspect(sync_conn).get_table_names()
        ))
    except SQLAlchemyError as e:
        logger.warning("health_database_unreachable", error=str(e))
        checks["database"] = f"unhealthy: {e}"
        checks["schema"] = "unknown"
    else:
        checks["database"] = "healthy"
        missing = sorted(set(Base.metadata.tables) - present)
        checks["schema"] = f"missing: {', '.join(missing)}" if missing else "healthy"

    healthy = all(v == "healthy" for v in checks.values())

    return HealthResponse(
        status="healthy" if healthy else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
