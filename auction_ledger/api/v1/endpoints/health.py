"""
Health checks - for load balancers, Kubernetes, and monitoring.
Liveness is instant; readiness pings the database.
"""

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import text

from auction_ledger.config import get_settings
from auction_ledger.db.session import DbSession

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can the item store be reached?"""
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Database unavailable: {e.__class__.__name__}",
        ) from e
    return {"status": "ready"}
