"""
Logging configuration for the customer manager

Console output for development, rotating plain and JSON files, and
structlog for structured loggers.
"""

import logging
import logging.handlers
import os
import sys
import threading
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from customer_manager.infrastructure.configuration.config import Settings, get_config
from customer_manager.infrastructure.utilities.constants import (
    FileSettings,
    LoggingSettings,
)


class ProductionLogger:
    """Production-ready logging configuration"""

    @staticmethod
    def setup_logging(config: Optional[Settings] = None):
        """
        Setup logging for the service

        Features:
        - Console output outside production
        - Rotating text and JSON logs
        - Error-only log
        - structlog bound to the stdlib logging tree
        """
        config = config or get_config()

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.log_level.upper()))

        # Clear existing handlers
        root_logger.handlers.clear()

        if config.environment != "production":
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, config.log_level.upper()))
            console_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            console_handler.setFormatter(console_formatter)
            root_logger.addHandler(console_handler)

        if config.enable_file_logging:
            logs_dir = Path(config.log_dir)
            logs_dir.mkdir(parents=True, exist_ok=True)

            app_handler = logging.handlers.RotatingFileHandler(
                logs_dir / FileSettings.MAIN_LOG_FILE,
                maxBytes=LoggingSettings.MAX_LOG_FILE_SIZE,
                backupCount=LoggingSettings.MAIN_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            app_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            app_handler.setLevel(logging.INFO)
            root_logger.addHandler(app_handler)

            json_handler = logging.handlers.RotatingFileHandler(
                logs_dir / FileSettings.JSON_LOG_FILE,
                maxBytes=LoggingSettings.MAX_LOG_FILE_SIZE,
                backupCount=LoggingSettings.MAIN_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            json_handler.setFormatter(ContextJsonFormatter())
            json_handler.setLevel(logging.INFO)
            root_logger.addHandler(json_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                logs_dir / FileSettings.ERROR_LOG_FILE,
                maxBytes=LoggingSettings.MAX_LOG_FILE_SIZE,
                backupCount=LoggingSettings.ERROR_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            error_handler.setFormatter(ContextJsonFormatter())
            error_handler.setLevel(logging.ERROR)
            root_logger.addHandler(error_handler)

        ProductionLogger._configure_structlog()
        ProductionLogger._configure_specific_loggers()

        logger = logging.getLogger(__name__)
        logger.info(
            "Logging configured successfully",
            extra={
                "environment": config.environment,
                "log_level": config.log_level,
            },
        )

    @staticmethod
    def _configure_structlog():
        """Configure structlog for structured logging"""
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer(),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    @staticmethod
    def _configure_specific_loggers():
        """Configure specific loggers for different components"""
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


class ContextJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that adds process and thread context"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["thread_name"] = threading.current_thread().name
        log_record["process_id"] = os.getpid()

        if hasattr(record, "operation_time"):
            log_record["operation_time_ms"] = record.operation_time


class PerformanceLogger:
    """Context manager for performance logging"""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None, details: Optional[Dict[str, Any]] = None):
        self.operation_name = operation_name
        self.logger = logger or logging.getLogger(__name__)
        self.details = details or {}
        self.start_time = 0.0
        self.duration_ms = 0.0

    def __enter__(self):
        self.start_time = time.time()
        self.logger.debug(
            "Starting operation: %s",
            self.operation_name,
            extra={"operation": self.operation_name, **self.details},
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (time.time() - self.start_time) * 1000

        if exc_type is None:
            self.logger.info(
                "Completed operation: %s",
                self.operation_name,
                extra={
                    "operation": self.operation_name,
                    "operation_time": self.duration_ms,
                    "success": True,
                    **self.details,
                },
            )
        else:
            self.logger.error(
                "Failed operation: %s",
                self.operation_name,
                extra={
                    "operation": self.operation_name,
                    "operation_time": self.duration_ms,
                    "success": False,
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val) if exc_val else None,
                    **self.details,
                },
            )
        return False


def setup_logging(config: Optional[Settings] = None):
    """Setup logging using the production configuration"""
    ProductionLogger.setup_logging(config)


def get_structured_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
