"""
Custom exceptions for the customer manager
"""

import logging
import traceback

from customer_manager.infrastructure.utilities.constants import ErrorCodes

logger = logging.getLogger(__name__)


class CustomerManagerError(Exception):
    """Base exception for the customer manager"""

    status_code = 500

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or ErrorCodes.GENERAL_ERROR

    def to_dict(self) -> dict:
        """Serializable error payload"""
        return {"error_code": self.error_code, "message": self.user_message}


class DatabaseError(CustomerManagerError):
    """Database-related errors"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(
            message,
            "Sorry, there was a problem with our system. Please try again in a moment.",
            ErrorCodes.DATABASE_ERROR,
        )
        self.operation = operation


class DatabaseOperationError(DatabaseError):
    """A schema or maintenance operation failed"""


class ValidationError(CustomerManagerError):
    """Input validation errors"""

    status_code = 422

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message, message, ErrorCodes.VALIDATION_ERROR  # Validation errors are user-friendly
        )
        self.field = field


class BusinessLogicError(CustomerManagerError):
    """Business rule violations"""

    status_code = 400

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(
            message, user_message or message, error_code or ErrorCodes.BUSINESS_ERROR
        )


class CustomerNotFoundError(BusinessLogicError):
    """Customer not found"""

    status_code = 404

    def __init__(self, customer_id: int):
        super().__init__(
            f"Customer not found: {customer_id}",
            f"Customer #{customer_id} not found.",
            ErrorCodes.CUSTOMER_NOT_FOUND,
        )
        self.customer_id = customer_id


class DuplicateCustomerError(BusinessLogicError):
    """Another customer already uses the email address"""

    status_code = 409

    def __init__(self, email: str):
        super().__init__(
            f"Customer with email {email} already exists",
            f"A customer with email {email} already exists.",
            ErrorCodes.DUPLICATE_CUSTOMER,
        )
        self.email = email


# pylint: disable=too-few-public-methods
class ErrorReporter:
    """Error reporting and monitoring class"""

    @staticmethod
    def report_critical_error(error: Exception):
        """Report critical errors to monitoring system"""
        logger.critical(
            "CRITICAL ERROR: %s",
            error,
            extra={
                "error_type": type(error).__name__,
                "traceback": traceback.format_exc(),
            },
        )

    @staticmethod
    def report_business_error(error: CustomerManagerError, operation: str):
        """Report business logic errors for analysis"""
        logger.info(
            "Business error in %s: %s - %s",
            operation,
            error.error_code,
            error,
            extra={
                "error_code": error.error_code,
                "operation": operation,
                "error_type": type(error).__name__,
            },
        )
