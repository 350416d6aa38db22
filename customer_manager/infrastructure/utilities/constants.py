"""
Application constants for the customer manager

Centralizes magic numbers and hard-coded values.
"""

from typing import Final


# Application retry and timeout settings
class RetrySettings:
    """Configuration for retry logic and timeouts"""

    MAX_RETRIES: Final[int] = 3
    RETRY_DELAY_SECONDS: Final[int] = 1
    CONNECTION_TIMEOUT_SECONDS: Final[int] = 30


# Database configuration constants
class DatabaseSettings:
    """Database connection and pool configuration"""

    POOL_RECYCLE_SECONDS: Final[int] = 3600  # 1 hour

    # Production settings
    PRODUCTION_POOL_SIZE: Final[int] = 20
    PRODUCTION_MAX_OVERFLOW: Final[int] = 30

    # Development settings
    DEVELOPMENT_POOL_SIZE: Final[int] = 5
    DEVELOPMENT_MAX_OVERFLOW: Final[int] = 10


# Logging configuration constants
class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    MAIN_LOG_BACKUP_COUNT: Final[int] = 10
    ERROR_LOG_BACKUP_COUNT: Final[int] = 10


class FileSettings:
    """Log file names"""

    MAIN_LOG_FILE: Final[str] = "customer_manager.log"
    JSON_LOG_FILE: Final[str] = "customer_manager.json.log"
    ERROR_LOG_FILE: Final[str] = "errors.log"


# Cache configuration constants
class CacheSettings:
    """Cache names and key prefixes"""

    CUSTOMERS_CACHE: Final[str] = "customers"
    CUSTOMER_LIST_CACHE: Final[str] = "customer_list"
    ALL_CUSTOMERS_KEY: Final[str] = "all"
    DEFAULT_TTL_SECONDS: Final[int] = 300  # 5 minutes


# Performance monitoring constants
class PerformanceSettings:
    """Performance thresholds"""

    SLOW_QUERY_THRESHOLD_MS: Final[int] = 1000


# Customer field limits
class CustomerLimits:
    """Length limits shared by value objects and the table definition"""

    NAME_MIN_LENGTH: Final[int] = 2
    NAME_MAX_LENGTH: Final[int] = 100
    EMAIL_MAX_LENGTH: Final[int] = 254
    PHONE_MIN_DIGITS: Final[int] = 7
    PHONE_MAX_DIGITS: Final[int] = 15
    PHONE_COLUMN_LENGTH: Final[int] = 20
    ADDRESS_MIN_LENGTH: Final[int] = 5
    ADDRESS_MAX_LENGTH: Final[int] = 500


# Error codes
class ErrorCodes:
    """Error codes carried by application exceptions"""

    GENERAL_ERROR: Final[str] = "GENERAL_ERROR"
    VALIDATION_ERROR: Final[str] = "VALIDATION_ERROR"
    BUSINESS_ERROR: Final[str] = "BUSINESS_ERROR"
    CUSTOMER_NOT_FOUND: Final[str] = "CUSTOMER_NOT_FOUND"
    DUPLICATE_CUSTOMER: Final[str] = "DUPLICATE_CUSTOMER"
    DATABASE_ERROR: Final[str] = "DATABASE_ERROR"
