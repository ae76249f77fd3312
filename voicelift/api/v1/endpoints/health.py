"""Health check endpoint for load balancers and monitoring."""

import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from voicelift.db.session import get_db

router = APIRouter()


@router.get("")
def health():
    """Simple liveness check. Optionally includes built_at if VOICELIFT_BUILT_AT env is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("VOICELIFT_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
def readiness(db: Session = Depends(get_db)):
    """Readiness: app + DB connectivity."""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except SQLAlchemyError as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": str(e)},
        )
