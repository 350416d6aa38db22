#!/usr/bin/env python3
"""
Entry point for the customer manager web service
"""

import logging

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from customer_manager.infrastructure.configuration.config import get_config  # noqa: E402
from customer_manager.infrastructure.logging.logging_config import ProductionLogger  # noqa: E402
from customer_manager.main import create_app  # noqa: E402


def main():
    """Configure logging and serve the application"""
    config = get_config()
    ProductionLogger.setup_logging(config)
    logger = logging.getLogger(__name__)
    logger.info("Configuration loaded successfully (environment=%s)", config.environment)

    app = create_app()
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
