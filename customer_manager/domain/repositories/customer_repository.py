"""
Customer Repository interface

Defines the contract for customer data access operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.customer_entity import Customer
from ..value_objects.customer_id import CustomerId
from ..value_objects.email_address import EmailAddress


class CustomerRepository(ABC):
    """
    Abstract repository interface for Customer entities

    Infrastructure layer provides concrete implementations.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Save or update a customer

        Args:
            customer: The customer entity to save. A customer without an id
                is inserted; otherwise the stored row is updated.

        Returns:
            The saved customer with updated fields (e.g., ID, timestamps)

        Raises:
            CustomerNotFoundError: If the customer has an id that is not stored
        """

    @abstractmethod
    async def find_by_id(self, customer_id: CustomerId) -> Optional[Customer]:
        """
        Find a customer by their ID

        Returns:
            The customer if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: EmailAddress) -> Optional[Customer]:
        """
        Find a customer by their email address

        Returns:
            The customer if found, None otherwise
        """

    @abstractmethod
    async def find_all(self) -> List[Customer]:
        """
        Find all customers

        Returns:
            List of all customers ordered by ID
        """

    @abstractmethod
    async def delete(self, customer_id: CustomerId) -> bool:
        """
        Delete a customer

        Returns:
            True if deleted, False if no such customer
        """

    @abstractmethod
    async def exists_by_id(self, customer_id: CustomerId) -> bool:
        """Check if a customer exists"""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored customers"""
