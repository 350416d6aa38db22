from fastapi import APIRouter, Depends

from customer_manager.api.deps import get_app_container
from customer_manager.container import Container

router = APIRouter(tags=["health"])


@router.get("/health")
async def get_health_status(container: Container = Depends(get_app_container)):
    """
    Endpoint to get the health status of the application.
    """
    database = container.get_db_manager().health_check()
    return {
        "status": "ok" if database["status"] == "healthy" else "degraded",
        "database": database,
        "caches": container.get_cache_manager().get_all_stats(),
    }
