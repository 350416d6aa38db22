"""
Domain entities package

Contains the core business entities of the customer manager.
"""

from .customer_entity import Customer

__all__ = ["Customer"]
