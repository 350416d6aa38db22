"""
Application services
"""

from .customer_service import CustomerService, DefaultCustomerService

__all__ = ["CustomerService", "DefaultCustomerService"]
