"""
Logging Infrastructure

Structured logging setup and performance logging helpers.
"""

from .logging_config import (
    ContextJsonFormatter,
    PerformanceLogger,
    ProductionLogger,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "ContextJsonFormatter",
    "PerformanceLogger",
    "ProductionLogger",
    "get_structured_logger",
    "setup_logging",
]
