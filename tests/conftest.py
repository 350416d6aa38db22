"""
Test configuration and fixtures for the customer manager
"""

import os
from unittest.mock import patch

import pytest

from customer_manager.container import Container
from customer_manager.domain.entities.customer_entity import Customer
from customer_manager.domain.value_objects import (
    Address,
    CustomerName,
    EmailAddress,
    PhoneNumber,
)
from customer_manager.infrastructure.configuration.config import Settings, reset_config
from customer_manager.infrastructure.database.operations import set_db_manager


@pytest.fixture(autouse=True)
def mock_env():
    """Isolate tests from the caller's environment"""
    test_env = {
        "DATABASE_URL": "sqlite:///:memory:",
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
        "ENABLE_FILE_LOGGING": "false",
    }

    with patch.dict(os.environ, test_env, clear=True):
        reset_config()
        yield test_env
    reset_config()


@pytest.fixture
def test_settings():
    """Settings backed by an in-memory database"""
    return Settings(
        _env_file=None,
        database_url="sqlite:///:memory:",
        environment="test",
        enable_file_logging=False,
        cache_maintenance_interval=3600,
    )


@pytest.fixture
def container(test_settings):
    """Container with tables created"""
    container = Container(test_settings)
    container.get_db_manager().create_tables()
    yield container
    container.shutdown()
    set_db_manager(None)


@pytest.fixture
def customer_repository(container):
    """Repository bound to the in-memory database"""
    return container.get_customer_repository()


@pytest.fixture
def customer_service(container):
    """Customer service bound to the in-memory database"""
    return container.get_customer_service()


@pytest.fixture
def cache_manager(container):
    """The container's cache manager"""
    return container.get_cache_manager()


def make_customer(
    name: str = "Ada Lovelace",
    email: str = "ada@example.com",
    phone: str | None = "+44 20 7946 0018",
    address: str | None = "12 St James's Square, London",
) -> Customer:
    """Build an unsaved customer"""
    return Customer(
        id=None,
        name=CustomerName(name),
        email=EmailAddress(email),
        phone_number=PhoneNumber(phone) if phone else None,
        address=Address(address) if address else None,
    )


@pytest.fixture
def new_customer():
    """An unsaved customer"""
    return make_customer()
