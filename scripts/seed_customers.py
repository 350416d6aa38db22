#!/usr/bin/env python3
"""
Script to insert fake customers into the customer manager database.

Goes through the customer service so validation and duplicate checks apply.
"""

import argparse
import asyncio
import logging

from dotenv import load_dotenv
from faker import Faker

load_dotenv()

from customer_manager.container import Container  # noqa: E402
from customer_manager.domain.entities.customer_entity import Customer  # noqa: E402
from customer_manager.domain.value_objects import (  # noqa: E402
    Address,
    CustomerName,
    EmailAddress,
    PhoneNumber,
)
from customer_manager.infrastructure.utilities.exceptions import (  # noqa: E402
    CustomerManagerError,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

fake = Faker("en_US")


def generate_customer() -> Customer:
    """Generate a realistic customer"""
    return Customer(
        id=None,
        name=CustomerName(fake.name()),
        email=EmailAddress(fake.unique.email()),
        phone_number=PhoneNumber(fake.numerify("+1##########")),
        address=Address(f"{fake.street_address()}, {fake.city()}"),
    )


async def seed(count: int) -> int:
    """Insert ``count`` customers, returning how many were stored"""
    container = Container()
    container.get_db_manager().create_tables()
    service = container.get_customer_service()

    inserted = 0
    try:
        for _ in range(count):
            try:
                await service.add(generate_customer())
                inserted += 1
            except CustomerManagerError as e:
                logger.warning("Skipped customer: %s", e)
    finally:
        container.shutdown()

    logger.info("Inserted %d of %d customers", inserted, count)
    return inserted


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=100, help="customers to create")
    args = parser.parse_args()
    asyncio.run(seed(args.count))


if __name__ == "__main__":
    main()
