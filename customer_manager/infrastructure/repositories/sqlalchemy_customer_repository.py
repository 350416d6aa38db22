"""
SQLAlchemy implementation of CustomerRepository
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from customer_manager.domain.entities.customer_entity import Customer as DomainCustomer
from customer_manager.domain.repositories.customer_repository import CustomerRepository
from customer_manager.domain.value_objects.address import Address
from customer_manager.domain.value_objects.customer_id import CustomerId
from customer_manager.domain.value_objects.customer_name import CustomerName
from customer_manager.domain.value_objects.email_address import EmailAddress
from customer_manager.domain.value_objects.phone_number import PhoneNumber
from customer_manager.infrastructure.database.models import Customer as SQLCustomer
from customer_manager.infrastructure.repositories.session_handler import managed_session
from customer_manager.infrastructure.utilities.exceptions import (
    CustomerNotFoundError,
    DuplicateCustomerError,
)

logger = logging.getLogger(__name__)


class SQLAlchemyCustomerRepository(CustomerRepository):
    """SQLAlchemy implementation of customer repository"""

    def __init__(self):
        self._logger = logging.getLogger(self.__class__.__name__)

    async def save(self, customer: DomainCustomer) -> DomainCustomer:
        """Save customer to database"""
        saved: Optional[DomainCustomer] = None
        try:
            with managed_session("save_customer") as session:
                if customer.id is None:
                    sql_customer = SQLCustomer()
                    session.add(sql_customer)
                else:
                    sql_customer = session.get(SQLCustomer, customer.id.value)

                if sql_customer is not None:
                    self._copy_to_model(customer, sql_customer)
                    session.flush()
                    session.refresh(sql_customer)
                    saved = self._map_to_domain(sql_customer)
        except IntegrityError as e:
            self._logger.warning("Integrity error saving customer %s: %s", customer.email, e.orig)
            raise DuplicateCustomerError(customer.email.value) from e

        if saved is None:
            raise CustomerNotFoundError(customer.id.value)

        self._logger.debug("Saved customer %s", saved.id)
        return saved

    async def find_by_id(self, customer_id: CustomerId) -> Optional[DomainCustomer]:
        """Find customer by ID"""
        with managed_session("find_customer_by_id") as session:
            sql_customer = session.get(SQLCustomer, customer_id.value)
            if not sql_customer:
                return None
            return self._map_to_domain(sql_customer)

    async def find_by_email(self, email: EmailAddress) -> Optional[DomainCustomer]:
        """Find customer by email address"""
        with managed_session("find_customer_by_email") as session:
            sql_customer = session.scalars(
                select(SQLCustomer).where(SQLCustomer.email == email.value)
            ).first()
            if not sql_customer:
                return None
            return self._map_to_domain(sql_customer)

    async def find_all(self) -> List[DomainCustomer]:
        """Find all customers"""
        with managed_session("find_all_customers") as session:
            sql_customers = session.scalars(
                select(SQLCustomer).order_by(SQLCustomer.id)
            ).all()
            return [self._map_to_domain(customer) for customer in sql_customers]

    async def delete(self, customer_id: CustomerId) -> bool:
        """Delete customer by ID"""
        with managed_session("delete_customer") as session:
            sql_customer = session.get(SQLCustomer, customer_id.value)
            if not sql_customer:
                return False
            session.delete(sql_customer)
            return True

    async def exists_by_id(self, customer_id: CustomerId) -> bool:
        """Check if customer exists by ID"""
        with managed_session("customer_exists") as session:
            return (
                session.scalar(
                    select(SQLCustomer.id).where(SQLCustomer.id == customer_id.value)
                )
                is not None
            )

    async def count(self) -> int:
        """Count stored customers"""
        with managed_session("count_customers") as session:
            return session.scalar(select(func.count()).select_from(SQLCustomer)) or 0

    @staticmethod
    def _copy_to_model(customer: DomainCustomer, sql_customer: SQLCustomer) -> None:
        """Copy domain fields onto the ORM row"""
        sql_customer.name = customer.name.value
        sql_customer.email = customer.email.value
        sql_customer.phone_number = (
            customer.phone_number.value if customer.phone_number else None
        )
        sql_customer.address = customer.address.value if customer.address else None
        if sql_customer.created_at is None:
            sql_customer.created_at = customer.created_at
        sql_customer.updated_at = customer.updated_at

    def _map_to_domain(self, sql_customer: SQLCustomer) -> DomainCustomer:
        """Map SQLAlchemy Customer to domain Customer"""
        return DomainCustomer(
            id=CustomerId(sql_customer.id),
            name=CustomerName(sql_customer.name),
            email=EmailAddress(sql_customer.email),
            phone_number=PhoneNumber(sql_customer.phone_number)
            if sql_customer.phone_number
            else None,
            address=Address(sql_customer.address) if sql_customer.address else None,
            created_at=_as_utc(sql_customer.created_at),
            updated_at=_as_utc(sql_customer.updated_at or sql_customer.created_at),
        )


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops the offset on read; stored values are always UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
