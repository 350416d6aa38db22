"""
FastAPI application for the customer manager.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from customer_manager.api import customers_router, health_router
from customer_manager.container import Container, get_container
from customer_manager.infrastructure.events.application_events import (
    ContextClosedEvent,
    ContextRefreshedEvent,
)
from customer_manager.infrastructure.utilities.exceptions import (
    CustomerManagerError,
    ErrorReporter,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the database and announce the refreshed context"""
    container: Container = app.state.container

    logger.info("Starting %s...", container.config.app_name)
    container.get_db_manager().create_tables()
    container.get_customer_service()

    publisher = container.get_event_publisher()
    publisher.publish(ContextRefreshedEvent(source=app))
    container.get_cache_maintenance().start_maintenance()
    logger.info("%s started", container.config.app_name)

    try:
        yield
    finally:
        logger.info("Shutting down...")
        publisher.publish(ContextClosedEvent(source=app))
        container.shutdown()


async def handle_application_error(request: Request, exc: CustomerManagerError):
    """Translate application errors into JSON responses"""
    if exc.status_code >= 500:
        logger.error("Error handling %s %s: %s", request.method, request.url.path, exc)
        ErrorReporter.report_critical_error(exc)
    else:
        ErrorReporter.report_business_error(exc, f"{request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the FastAPI application around a container"""
    container = container or get_container()

    app = FastAPI(title=container.config.app_name, lifespan=lifespan)
    app.state.container = container

    app.add_exception_handler(CustomerManagerError, handle_application_error)
    app.include_router(health_router)
    app.include_router(customers_router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": f"{container.config.app_name} is running", "status": "active"}

    return app
