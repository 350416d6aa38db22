"""
Domain repository interfaces

Contains abstract repository interfaces that define contracts for data access.
"""

from .customer_repository import CustomerRepository

__all__ = [
    'CustomerRepository'
]
