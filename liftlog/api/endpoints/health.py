"""Health check endpoints for load balancers and monitoring."""

import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.db.session import get_db

router = APIRouter()


@router.get("")
async def health():
    """Liveness check. Includes built_at when LIFTLOG_BUILT_AT is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("LIFTLOG_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Readiness: app + DB connectivity."""
    try:
        await db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": str(e)},
        )
