"""
Pytest configuration and shared fixtures for the handler builder.

This module provides the fake hosting-framework collaborators (request,
response sink, next callback) and the logger provider used across unit and
integration tests.
"""

import os
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "POWERTOOLS_SERVICE_NAME": "test-handler-builder",
        "LOG_LEVEL": "DEBUG",
        "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
    })
    os.environ.pop("ENVIRONMENT", None)


class FakeRequest:
    """Minimal request object exposing params and body as attributes."""

    def __init__(self, params: Optional[Dict[str, Any]] = None, body: Any = None, **extra: Any):
        self.params = params or {}
        self.body = body
        for key, value in extra.items():
            setattr(self, key, value)


class FakeResponse:
    """Response sink recording every JSON body written to it."""

    def __init__(self):
        self.status_code = 200
        self.bodies: List[Any] = []

    def status(self, status_code: int) -> "FakeResponse":
        self.status_code = status_code
        return self

    def json(self, data: Any) -> None:
        self.bodies.append(data)


@pytest.fixture
def request_factory():
    return FakeRequest


@pytest.fixture
def sample_request() -> FakeRequest:
    return FakeRequest(params={"id": "42"}, body={"name": "Ada", "address": {"city": "London"}})


@pytest.fixture
def response() -> FakeResponse:
    return FakeResponse()


@pytest.fixture
def next_fn() -> Mock:
    return Mock(name="next")


@pytest.fixture
def scoped_logger() -> Mock:
    return Mock(name="scoped_logger")


@pytest.fixture
def logger_provider(scoped_logger) -> Mock:
    """Logger provider returning a single mock logger for every invocation."""
    return Mock(name="logger_provider", return_value=scoped_logger)


@pytest.fixture
def user_schema() -> Dict[str, Any]:
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": {
            "id": {"type": "string", "pattern": "^[0-9]+$"},
            "name": {"type": "string", "minLength": 1},
        },
        "required": ["id", "name"],
    }


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
