"""
Database Infrastructure

Contains SQLAlchemy models and engine/session management.
"""

from .models import Base
from .models import Customer as CustomerModel
from .operations import (
    DatabaseManager,
    get_db_manager,
    get_session,
    init_db,
    set_db_manager,
)

__all__ = [
    "Base",
    "CustomerModel",
    "DatabaseManager",
    "get_db_manager",
    "get_session",
    "init_db",
    "set_db_manager",
]
