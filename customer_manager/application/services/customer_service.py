"""
Customer Service

Contract for customer management and its default implementation backed by
a repository and the cache manager.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List

from customer_manager.domain.entities.customer_entity import Customer
from customer_manager.domain.repositories.customer_repository import CustomerRepository
from customer_manager.domain.value_objects.customer_id import CustomerId
from customer_manager.infrastructure.cache.cache_manager import (
    CacheManager,
    cache_key_for_customer,
    cached,
)
from customer_manager.infrastructure.utilities.constants import CacheSettings
from customer_manager.infrastructure.utilities.exceptions import (
    CustomerNotFoundError,
    DuplicateCustomerError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class CustomerService(ABC):
    """Customer management operations"""

    @abstractmethod
    async def get_all(self) -> List[Customer]:
        """All customers, ordered by ID"""

    @abstractmethod
    async def add(self, customer: Customer) -> Customer:
        """
        Add a new customer

        Raises:
            ValidationError: If the customer already has an ID
            DuplicateCustomerError: If the email is already in use
        """

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """
        Replace a stored customer's details

        Raises:
            ValidationError: If the customer has no ID
            CustomerNotFoundError: If no customer has that ID
            DuplicateCustomerError: If another customer uses the email
        """

    @abstractmethod
    async def delete(self, customer_id: int) -> None:
        """
        Delete a customer

        Raises:
            CustomerNotFoundError: If no customer has that ID
        """

    @abstractmethod
    async def get_customer_by_id(self, customer_id: int) -> Customer:
        """
        Fetch one customer

        Raises:
            CustomerNotFoundError: If no customer has that ID
        """


class DefaultCustomerService(CustomerService):
    """
    Customer service with read-through caching

    Single customers live in the ``customers`` cache keyed by id; the full
    list lives in ``customer_list`` and is evicted on every write.
    """

    def __init__(self, customer_repository: CustomerRepository, cache_manager: CacheManager):
        self._customer_repository = customer_repository
        self._cache_manager = cache_manager
        self._logger = logging.getLogger(self.__class__.__name__)
        self._load_all = cached(
            cache_manager,
            CacheSettings.CUSTOMER_LIST_CACHE,
            lambda: CacheSettings.ALL_CUSTOMERS_KEY,
        )(customer_repository.find_all)

    async def get_all(self) -> List[Customer]:
        customers = await self._load_all()
        return list(customers)

    async def add(self, customer: Customer) -> Customer:
        if customer.id is not None:
            raise ValidationError("A new customer must not have an ID", field="id")

        if await self._customer_repository.find_by_email(customer.email):
            self._logger.warning("Rejected duplicate email on add: %s", customer.email)
            raise DuplicateCustomerError(customer.email.value)

        saved = await self._customer_repository.save(customer)
        self._cache_customer(saved)
        self._evict_list()
        self._logger.info("Customer added: %s", saved.id)
        return saved

    async def update(self, customer: Customer) -> Customer:
        if customer.id is None:
            raise ValidationError("Customer ID is required for update", field="id")

        existing = await self._customer_repository.find_by_id(customer.id)
        if existing is None:
            raise CustomerNotFoundError(customer.id.value)

        owner = await self._customer_repository.find_by_email(customer.email)
        if owner is not None and owner.id != customer.id:
            self._logger.warning(
                "Rejected update of %s: email %s belongs to %s",
                customer.id,
                customer.email,
                owner.id,
            )
            raise DuplicateCustomerError(customer.email.value)

        candidate = replace(customer, created_at=existing.created_at)
        candidate.touch()
        saved = await self._customer_repository.save(candidate)
        self._cache_customer(saved)
        self._evict_list()
        self._logger.info("Customer updated: %s", saved.id)
        return saved

    async def delete(self, customer_id: int) -> None:
        entity_id = self._to_customer_id(customer_id)
        deleted = await self._customer_repository.delete(entity_id)
        if not deleted:
            raise CustomerNotFoundError(customer_id)

        self._cache_manager.evict(
            CacheSettings.CUSTOMERS_CACHE, cache_key_for_customer(customer_id)
        )
        self._evict_list()
        self._logger.info("Customer deleted: %s", customer_id)

    async def get_customer_by_id(self, customer_id: int) -> Customer:
        entity_id = self._to_customer_id(customer_id)
        cache = self._cache_manager.get_cache(CacheSettings.CUSTOMERS_CACHE)
        key = cache_key_for_customer(customer_id)

        customer = cache.get(key)
        if customer is not None:
            return customer

        token = cache.version(key)
        customer = await self._customer_repository.find_by_id(entity_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        if not cache.set(key, customer, if_version=token):
            self._logger.debug("Skipped caching stale read of customer %s", customer_id)
        return customer

    def _cache_customer(self, customer: Customer) -> None:
        self._cache_manager.get_cache(CacheSettings.CUSTOMERS_CACHE).set(
            cache_key_for_customer(customer.id.value), customer
        )

    def _evict_list(self) -> None:
        self._cache_manager.evict(
            CacheSettings.CUSTOMER_LIST_CACHE, CacheSettings.ALL_CUSTOMERS_KEY
        )

    @staticmethod
    def _to_customer_id(customer_id: int) -> CustomerId:
        try:
            return CustomerId(customer_id)
        except ValueError as e:
            raise ValidationError(str(e), field="id") from e
