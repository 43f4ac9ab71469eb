"""Tests for health, root and logging setup."""

import logging

from finance_tracker.logging_config import get_logger, setup_logging


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["app"] == "Finance Tracker"


def test_root_reports_demo_mode(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["api"] == "/app/v1"
    assert response.json()["plaid"] == "demo"


def test_setup_logging_writes_app_log(tmp_path):
    app_logger = setup_logging(tmp_path)
    try:
        get_logger("test").info("hello from tests")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert app_logger.name == "finance_tracker"
        assert "hello from tests" in (tmp_path / "app.log").read_text()
    finally:
        setup_logging()


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    root = logging.getLogger()
    setup_logging(tmp_path)
    count = len(root.handlers)

    setup_logging(tmp_path)

    assert len(root.handlers) == count
    setup_logging()
