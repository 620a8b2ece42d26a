# autopark/routers/health.py
"""
System health check endpoint.
Returns status of backend + store.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from autopark.store import Store, get_store

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(store: Store = Depends(get_store)):
    result = {
        "ok": True,
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
        "store": store.backend,
        "database": "unknown",
    }

    try:
        store.ping()
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"
        result["ok"] = False

    return result
