"""
Unit tests for the environment variable model.
"""

import pytest
from pydantic import ValidationError

from handler_builder.models.env_vars import DEFAULT_ALIAS, HandlerEnvVars, get_handler_env_vars


def test_defaults():
    env_vars = HandlerEnvVars.model_validate({})

    assert env_vars.alias == DEFAULT_ALIAS == "default"


def test_alias_from_environment():
    env_vars = HandlerEnvVars.model_validate({"ENVIRONMENT": "prod", "UNRELATED": "x"})

    assert env_vars.alias == "prod"


def test_empty_alias_rejected():
    with pytest.raises(ValidationError):
        HandlerEnvVars.model_validate({"ENVIRONMENT": ""})


def test_logger_settings_are_not_validated(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "")
    monkeypatch.setenv("ENVIRONMENT", "staging")

    assert get_handler_env_vars().alias == "staging"
