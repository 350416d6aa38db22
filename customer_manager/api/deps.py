"""FastAPI dependencies resolving components from the application container."""

from fastapi import Request

from customer_manager.application.services.customer_service import CustomerService
from customer_manager.container import Container


def get_app_container(request: Request) -> Container:
    """Container attached to the running application"""
    return request.app.state.container


def get_customer_service(request: Request) -> CustomerService:
    """Customer service for route handlers"""
    return get_app_container(request).get_customer_service()
