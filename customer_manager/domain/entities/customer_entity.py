# pylint: disable=too-many-instance-attributes
"""
Customer domain entity

Represents a customer managed by the service.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from customer_manager.domain.value_objects.address import Address
from customer_manager.domain.value_objects.customer_id import CustomerId
from customer_manager.domain.value_objects.customer_name import CustomerName
from customer_manager.domain.value_objects.email_address import EmailAddress
from customer_manager.domain.value_objects.phone_number import PhoneNumber


@dataclass
class Customer:
    """
    Customer domain entity

    ``id`` stays ``None`` until the repository assigns one.
    """

    id: Optional[CustomerId]
    name: CustomerName
    email: EmailAddress
    phone_number: Optional[PhoneNumber] = None
    address: Optional[Address] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Initialize timestamps if not provided"""
        now = datetime.now(timezone.utc)
        if self.created_at is None:
            self.created_at = now
        if self.updated_at is None:
            self.updated_at = now

    @property
    def is_persisted(self) -> bool:
        """True once the customer has an identifier"""
        return self.id is not None

    def update_contact_info(
        self, name: CustomerName, email: EmailAddress, phone: Optional[PhoneNumber]
    ) -> None:
        """Update customer contact information"""
        self.name = name
        self.email = email
        self.phone_number = phone
        self.touch()

    def update_address(self, address: Optional[Address]) -> None:
        """Update customer address"""
        self.address = address
        self.touch()

    def touch(self) -> None:
        """Refresh the modification timestamp"""
        self.updated_at = datetime.now(timezone.utc)

    def __str__(self) -> str:
        return f"Customer(id={self.id}, name={self.name}, email={self.email})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Customer):
            return False
        return self.id == other.id if self.id and other.id else False

    def __hash__(self) -> int:
        return hash(self.id) if self.id else id(self)
