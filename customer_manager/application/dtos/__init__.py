"""
Data Transfer Objects for the application layer
"""

from .customer_dtos import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
    ErrorResponse,
)

__all__ = [
    "CustomerCreateRequest",
    "CustomerResponse",
    "CustomerUpdateRequest",
    "ErrorResponse",
]
