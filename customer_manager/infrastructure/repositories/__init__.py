"""
Repository implementations backed by SQLAlchemy
"""

from .session_handler import managed_session
from .sqlalchemy_customer_repository import SQLAlchemyCustomerRepository

__all__ = ["managed_session", "SQLAlchemyCustomerRepository"]
