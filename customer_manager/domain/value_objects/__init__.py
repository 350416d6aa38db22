"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .address import Address
from .customer_id import CustomerId
from .customer_name import CustomerName
from .email_address import EmailAddress
from .phone_number import PhoneNumber

__all__ = [
    "Address",
    "CustomerId",
    "CustomerName",
    "EmailAddress",
    "PhoneNumber",
]
