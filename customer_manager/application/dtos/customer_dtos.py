"""
Customer DTOs

Request/response schemas for customer operations and their mapping to the
domain entity.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from customer_manager.domain.entities.customer_entity import Customer
from customer_manager.domain.value_objects.address import Address
from customer_manager.domain.value_objects.customer_id import CustomerId
from customer_manager.domain.value_objects.customer_name import CustomerName
from customer_manager.domain.value_objects.email_address import EmailAddress
from customer_manager.domain.value_objects.phone_number import PhoneNumber
from customer_manager.infrastructure.utilities.exceptions import ValidationError


class CustomerCreateRequest(BaseModel):
    """Request schema for creating a customer."""

    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Unique email address")
    phone_number: Optional[str] = Field(None, description="Phone number")
    address: Optional[str] = Field(None, description="Postal address")

    def to_entity(self, customer_id: Optional[int] = None) -> Customer:
        """Build a domain customer, raising ValidationError on bad input"""
        field = "id"
        try:
            entity_id = CustomerId(customer_id) if customer_id is not None else None
            field = "name"
            name = CustomerName(self.name)
            field = "email"
            email = EmailAddress(self.email)
            field = "phone_number"
            phone = PhoneNumber(self.phone_number) if self.phone_number else None
            field = "address"
            address = Address(self.address) if self.address else None
        except ValueError as e:
            raise ValidationError(str(e), field=field) from e

        return Customer(
            id=entity_id,
            name=name,
            email=email,
            phone_number=phone,
            address=address,
        )


class CustomerUpdateRequest(CustomerCreateRequest):
    """Request schema for replacing a customer's details."""


class CustomerResponse(BaseModel):
    """Response schema for customer operations."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    phone_number: Optional[str]
    address: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        """Map a persisted domain customer"""
        return cls(
            id=customer.id.value,
            name=customer.name.value,
            email=customer.email.value,
            phone_number=customer.phone_number.value if customer.phone_number else None,
            address=customer.address.value if customer.address else None,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )


class ErrorResponse(BaseModel):
    """Error payload returned by the API."""

    error_code: str
    message: str
