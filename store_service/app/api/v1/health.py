import time
from typing import Any, Dict

from fastapi import APIRouter, Request

from ...utils.logging import get_store_logger

logger = get_store_logger("store_service.api.health")
router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> Dict[str, Any]:
    """Liveness probe including a database round trip."""
    settings = request.app.state.settings
    check_start = time.time()

    try:
        await request.app.state.database_manager.ping()
        database = {"status": "healthy"}
    except Exception as e:
        logger.warning(
            "Database health check failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        database = {"status": "unhealthy", "error": str(e)}
    database["duration_ms"] = round((time.time() - check_start) * 1000, 2)

    return {
        "service": "store-service",
        "version": settings.APP_VERSION,
        "status": database["status"],
        "checks": {"database": database},
        "timestamp": time.time(),
    }
