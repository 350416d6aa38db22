"""
Tests for database management, logging and error types
"""

import json
import logging
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from customer_manager.infrastructure.configuration.config import Settings
from customer_manager.infrastructure.database.models import Base
from customer_manager.infrastructure.database.operations import DatabaseManager
from customer_manager.infrastructure.logging.logging_config import (
    PerformanceLogger,
    ProductionLogger,
    get_structured_logger,
)
from customer_manager.infrastructure.utilities.exceptions import (
    CustomerManagerError,
    CustomerNotFoundError,
    DatabaseOperationError,
    DuplicateCustomerError,
    ValidationError,
)


@pytest.fixture
def restore_root_logger():
    """Keep logging changes local to a test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestDatabaseManager:
    """Test engine and table management"""

    def test_create_tables_and_health(self, test_settings):
        """Test tables are created and the health check passes"""
        manager = DatabaseManager(test_settings)
        manager.create_tables()

        assert "customers" in Base.metadata.tables
        assert manager.health_check()["status"] == "healthy"
        manager.close()

    def test_creates_sqlite_directory(self, tmp_path):
        """Test the parent directory of a file database is created"""
        db_path = tmp_path / "nested" / "customers.db"
        settings = Settings(_env_file=None, database_url=f"sqlite:///{db_path}")
        manager = DatabaseManager(settings)

        manager.create_tables()

        assert db_path.parent.is_dir()
        assert db_path.exists()
        manager.close()

    def test_create_tables_failure_is_wrapped(self, test_settings):
        """Test SQLAlchemy errors become DatabaseOperationError"""
        manager = DatabaseManager(test_settings)
        with patch.object(Base.metadata, "create_all", side_effect=SQLAlchemyError("nope")):
            with pytest.raises(DatabaseOperationError) as exc_info:
                manager.create_tables()

        assert exc_info.value.operation == "create_tables"
        assert exc_info.value.error_code == "DATABASE_ERROR"

    def test_health_check_reports_failure(self, test_settings):
        """Test an unreachable database is reported as unhealthy"""
        manager = DatabaseManager(test_settings)
        with patch.object(manager, "get_session", side_effect=SQLAlchemyError("down")):
            result = manager.health_check()

        assert result["status"] == "unhealthy"
        assert "down" in result["error"]

    def test_close_resets_engine(self, test_settings):
        """Test close drops the engine"""
        manager = DatabaseManager(test_settings)
        engine = manager.get_engine()
        manager.close()

        assert manager.get_engine() is not engine
        manager.close()


class TestLogging:
    """Test logging setup"""

    def test_setup_writes_json_log(self, tmp_path, restore_root_logger):
        """Test the JSON file handler writes structured records"""
        settings = Settings(
            _env_file=None,
            log_dir=str(tmp_path),
            environment="production",
            enable_file_logging=True,
        )
        ProductionLogger.setup_logging(settings)

        logging.getLogger("customer_manager.test").info("hello %s", "world")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = (tmp_path / "customer_manager.json.log").read_text().splitlines()
        records = [json.loads(line) for line in lines]
        hello = [r for r in records if r.get("message") == "hello world"]
        assert hello
        assert hello[0]["level"] == "INFO"
        assert hello[0]["logger"] == "customer_manager.test"

    def test_setup_without_files(self, tmp_path, restore_root_logger):
        """Test console-only logging creates no files"""
        settings = Settings(
            _env_file=None, log_dir=str(tmp_path / "logs"), enable_file_logging=False
        )
        ProductionLogger.setup_logging(settings)

        assert not (tmp_path / "logs").exists()
        assert logging.getLogger().handlers

    def test_structured_logger(self):
        """Test structlog logger creation"""
        assert get_structured_logger("customer_manager") is not None

    def test_performance_logger_success(self, caplog):
        """Test completed operations are logged with timing"""
        logger = logging.getLogger("perf.test")
        with caplog.at_level(logging.INFO, logger="perf.test"):
            with PerformanceLogger("load", logger) as perf:
                pass

        assert perf.duration_ms >= 0
        assert any("Completed operation: load" in r.getMessage() for r in caplog.records)

    def test_performance_logger_failure(self, caplog):
        """Test failures are logged and re-raised"""
        logger = logging.getLogger("perf.test")
        with caplog.at_level(logging.INFO, logger="perf.test"):
            with pytest.raises(ValueError):
                with PerformanceLogger("load", logger):
                    raise ValueError("bad")

        failed = [r for r in caplog.records if "Failed operation: load" in r.getMessage()]
        assert failed and failed[0].levelno == logging.ERROR


class TestExceptions:
    """Test the error hierarchy"""

    def test_status_codes_and_payloads(self):
        """Test HTTP mapping data carried by each error"""
        not_found = CustomerNotFoundError(5)
        duplicate = DuplicateCustomerError("a@example.com")
        invalid = ValidationError("bad email", field="email")

        assert not_found.status_code == 404
        assert not_found.to_dict() == {
            "error_code": "CUSTOMER_NOT_FOUND",
            "message": "Customer #5 not found.",
        }
        assert duplicate.status_code == 409
        assert duplicate.error_code == "DUPLICATE_CUSTOMER"
        assert invalid.status_code == 422
        assert invalid.user_message == "bad email"
        assert invalid.field == "email"
        assert isinstance(not_found, CustomerManagerError)
        assert DatabaseOperationError("x").status_code == 500
