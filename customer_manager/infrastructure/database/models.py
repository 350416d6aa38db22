# pylint: disable=too-few-public-methods
"""
SQLAlchemy database models for the customer manager
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from customer_manager.infrastructure.utilities.constants import CustomerLimits


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base for all tables"""


class Customer(Base):
    """Customer model"""
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(CustomerLimits.NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(
        String(CustomerLimits.EMAIL_MAX_LENGTH), unique=True, index=True, nullable=False
    )
    phone_number: Mapped[Optional[str]] = mapped_column(
        String(CustomerLimits.PHONE_COLUMN_LENGTH), nullable=True
    )
    address: Mapped[Optional[str]] = mapped_column(
        String(CustomerLimits.ADDRESS_MAX_LENGTH), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=True
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.id} email={self.email!r}>"
