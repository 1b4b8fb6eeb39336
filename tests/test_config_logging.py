"""Tests for settings, logging and the exception hierarchy."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from wealth_projection.config import ProjectionSettings
from wealth_projection.exceptions import (
    ConfigurationError,
    InvalidProjectionRequestError,
    ProjectionError,
    SimulationNotFoundError,
)
from wealth_projection.logging import JsonFormatter, get_logger, setup_logging


class TestProjectionSettings:
    def test_default_values(self) -> None:
        settings = ProjectionSettings()

        assert settings.default_end_year == 2060
        assert settings.min_end_year == 2024
        assert settings.max_end_year == 2100
        assert settings.log_level == "INFO"
        assert settings.log_format == "standard"

    def test_from_env(self) -> None:
        env = {
            "WEALTH_DEFAULT_END_YEAR": "2070",
            "WEALTH_MIN_END_YEAR": "2030",
            "WEALTH_MAX_END_YEAR": "2090",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "JSON",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = ProjectionSettings.from_env()

        assert settings.default_end_year == 2070
        assert settings.min_end_year == 2030
        assert settings.max_end_year == 2090
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_from_env_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert ProjectionSettings.from_env() == ProjectionSettings()

    def test_from_env_rejects_non_integer(self) -> None:
        with patch.dict(os.environ, {"WEALTH_DEFAULT_END_YEAR": "soon"}, clear=True):
            with pytest.raises(ConfigurationError, match="WEALTH_DEFAULT_END_YEAR"):
                ProjectionSettings.from_env()

    def test_rejects_inverted_bounds(self) -> None:
        with pytest.raises(ConfigurationError):
            ProjectionSettings(min_end_year=2100, max_end_year=2024)

    def test_rejects_default_outside_bounds(self) -> None:
        with pytest.raises(ConfigurationError, match="default_end_year"):
            ProjectionSettings(default_end_year=2200)

    def test_rejects_unknown_log_format(self) -> None:
        with pytest.raises(ConfigurationError, match="log_format"):
            ProjectionSettings(log_format="xml")


class TestLogging:
    def test_setup_logging_standard(self) -> None:
        setup_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_setup_logging_json(self) -> None:
        setup_logging("warning", format_type="json")

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("LOUD")

        assert logging.getLogger().level == logging.INFO

    def test_json_formatter(self) -> None:
        record = logging.LogRecord("wealth_projection.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)

        data = json.loads(JsonFormatter().format(record))

        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "wealth_projection.test"
        assert "timestamp" in data

    def test_json_formatter_with_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]

    def test_get_logger(self) -> None:
        assert get_logger("wealth_projection.core").name == "wealth_projection.core"


class TestExceptionHierarchy:
    def test_not_found_is_projection_and_lookup_error(self) -> None:
        err = SimulationNotFoundError("Simulation 1 not found")
        assert isinstance(err, ProjectionError)
        assert isinstance(err, LookupError)
        assert str(err) == "Simulation 1 not found"

    def test_invalid_request_is_value_error(self) -> None:
        err = InvalidProjectionRequestError("bad")
        assert isinstance(err, ProjectionError)
        assert isinstance(err, ValueError)

    def test_configuration_error(self) -> None:
        assert isinstance(ConfigurationError("x"), ProjectionError)
