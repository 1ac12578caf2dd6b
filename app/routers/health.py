"""
Health check endpoints.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app import __version__
from app.database import get_db_readonly

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    timestamp: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db_readonly)):
    """
    Health check endpoint.
    Returns server status and database connectivity.
    """
    db_status = "connected"
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        db_status = f"error: {str(e)}"

    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.utcnow().isoformat(),
        database=db_status,
    )


@router.get("/api/health", response_model=HealthResponse)
async def api_health_check(db: AsyncSession = Depends(get_db_readonly)):
    """Same as /health, under the /api prefix."""
    return await health_check(db)
