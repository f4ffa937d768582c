import json
import logging

import pytest

from store_service.app.core.setting import StoreSettings
from store_service.app.main import create_app
from store_service.app.middleware.error.error_handler import logger as error_logger
from store_service.app.repository.product_repository import (
    logger as repository_logger,
)
from store_service.app.utils.logging import (
    StoreJSONFormatter,
    get_store_logger,
    mask_database_url,
    setup_store_logging,
)


def _record(**extra):
    record = logging.LogRecord(
        name="store_service.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Product %s created",
        args=("7",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    payload = json.loads(StoreJSONFormatter().format(_record(entity="product", id=7)))

    assert payload["message"] == "Product 7 created"
    assert payload["service"] == "store_service"
    assert payload["level"] == "INFO"
    assert payload["entity"] == "product"
    assert payload["id"] == 7
    assert "lineno" not in payload


def test_json_formatter_respects_exclude_fields():
    formatter = StoreJSONFormatter(exclude_fields=["secret"])

    payload = json.loads(formatter.format(_record(secret="hunter2")))

    assert "secret" not in payload


def test_setup_store_logging_replaces_handlers():
    logger = setup_store_logging("store_service.test_setup", log_level="DEBUG")
    logger = setup_store_logging("store_service.test_setup", log_level="DEBUG")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0].formatter, StoreJSONFormatter)


def test_setup_store_logging_file_handlers(tmp_path):
    logger = setup_store_logging(
        "store_service.test_files", enable_file_logging=True, log_dir=str(tmp_path)
    )

    assert len(logger.handlers) == 3
    assert (tmp_path / "store_service.test_files.log").exists()
    for handler in logger.handlers:
        handler.close()


def test_mask_database_url():
    assert (
        mask_database_url("postgresql+asyncpg://user:pw@db:5432/store")
        == "postgresql+asyncpg://***@db:5432/store"
    )
    assert mask_database_url("sqlite+aiosqlite:///./x.db") == "sqlite+aiosqlite:///./x.db"


def test_get_store_logger_has_no_handlers():
    logger = get_store_logger("store_service.test_component")

    assert logger.handlers == []
    assert logger.propagate is True
    assert logger.level == logging.NOTSET


class TestApplicationLoggingTree:
    @pytest.fixture
    def production_logging(self, database_url, tmp_path):
        settings = StoreSettings(
            STORE_DATABASE_URL=database_url,
            SECRET_KEY="unit-test-secret",
            ENVIRONMENT="production",
            LOG_LEVEL="DEBUG",
            LOG_DIR=str(tmp_path / "logs"),
        )
        create_app(settings)
        service_logger = logging.getLogger("store_service")
        yield tmp_path / "logs"
        for handler in service_logger.handlers:
            handler.close()
        setup_store_logging("store_service", log_level="WARNING")

    def _flush(self):
        for handler in logging.getLogger("store_service").handlers:
            handler.flush()

    def test_component_records_follow_configured_level(self, production_logging):
        assert repository_logger.isEnabledFor(logging.DEBUG)

        repository_logger.debug("Product cache miss", extra={"entity": "product"})
        self._flush()

        lines = (production_logging / "store_service.log").read_text().splitlines()
        payload = json.loads(lines[-1])
        assert payload["message"] == "Product cache miss"
        assert payload["logger"] == "store_service.repository.products"
        assert payload["entity"] == "product"

    def test_component_errors_reach_error_file(self, production_logging):
        error_logger.error("Unhandled exception occurred", extra={"path": "/api"})
        repository_logger.info("Product created")
        self._flush()

        errors = (production_logging / "store_service_errors.log").read_text()
        assert "Unhandled exception occurred" in errors
        assert "Product created" not in errors
