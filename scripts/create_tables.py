#!/usr/bin/env python3
"""
Simple script to create database tables for the customer manager.
"""

import logging

from dotenv import load_dotenv

load_dotenv()

from customer_manager.infrastructure.configuration.config import get_config  # noqa: E402
from customer_manager.infrastructure.database.operations import init_db  # noqa: E402

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def create_tables():
    """Create all database tables"""
    config = get_config()
    logger.info("Creating database tables at %s", config.database_url)
    init_db()


if __name__ == "__main__":
    create_tables()
