# app/api/routers/system.py - Liveness and database health
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.db import health_check
from app.schemas.common import ok

router = APIRouter()


@router.get("/health")
async def system_health():
    """Database connectivity; 503 when the database is unreachable"""
    database = health_check()
    data = {
        "status": "healthy" if database["status"] == "connected" else "unhealthy",
        "environment": settings.ENV,
        "version": settings.API_VERSION,
        "database": database,
    }
    if data["status"] != "healthy":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={**ok("Service unhealthy", data), "success": False},
        )
    return ok("Service healthy", data)
