"""Tests for config and logging."""

import io
import json
import logging
import os
import sys
from typing import Any
from unittest.mock import patch

import pytest

from lease_intake.config import (
    AddressLookupConfig,
    LeaseIntakeConfig,
    NarrativeConfig,
    OutputConfig,
)
from lease_intake.exceptions import ConfigurationError
from lease_intake.logging import NOISY_LOGGERS, JsonFormatter, setup_logging
from lease_intake.models.lease import PartyRole


class TestAddressLookupConfig:
    """Tests for AddressLookupConfig."""

    def test_default_values(self) -> None:
        config = AddressLookupConfig()

        assert config.base_url == "https://viacep.com.br/ws"
        assert config.timeout_seconds == 5.0

    def test_url_for(self) -> None:
        assert AddressLookupConfig().url_for("01310100") == "https://viacep.com.br/ws/01310100/json/"


class TestNarrativeConfig:
    """Tests for NarrativeConfig."""

    def test_default_values(self) -> None:
        config = NarrativeConfig()

        assert config.api_key is None
        assert config.model == "gemini-2.5-flash"
        assert config.temperature == 0.3
        assert config.max_output_tokens == 4096

    def test_require_api_key(self) -> None:
        assert NarrativeConfig(api_key="secret").require_api_key() == "secret"

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_require_api_key_missing(self, api_key: str | None) -> None:
        with pytest.raises(ConfigurationError):
            NarrativeConfig(api_key=api_key).require_api_key()


class TestLeaseIntakeConfig:
    """Tests for LeaseIntakeConfig."""

    def test_default_values(self) -> None:
        config = LeaseIntakeConfig()

        assert config.address_lookup == AddressLookupConfig()
        assert config.narrative == NarrativeConfig()
        assert config.output == OutputConfig()
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self) -> None:
        """Test loading defaults from an empty environment."""
        with patch.dict(os.environ, {}, clear=True):
            config = LeaseIntakeConfig.from_env()

        assert config.address_lookup.base_url == "https://viacep.com.br/ws"
        assert config.address_lookup.timeout_seconds == 5.0
        assert config.narrative.api_key is None
        assert config.output.pretty_json is True
        assert config.seed is None

    def test_from_env_custom(self) -> None:
        """Test loading custom values from the environment."""
        env = {
            "VIACEP_BASE_URL": "http://localhost:8080/ws",
            "VIACEP_TIMEOUT": "2.5",
            "GEMINI_API_KEY": "secret",
            "GEMINI_MODEL": "gemini-2.5-pro",
            "GEMINI_TEMPERATURE": "0.7",
            "PRETTY_JSON": "false",
            "SEED": "7",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = LeaseIntakeConfig.from_env()

        assert config.address_lookup.base_url == "http://localhost:8080/ws"
        assert config.address_lookup.timeout_seconds == 2.5
        assert config.narrative.api_key == "secret"
        assert config.narrative.model == "gemini-2.5-pro"
        assert config.narrative.temperature == 0.7
        assert config.output.pretty_json is False
        assert config.seed == 7
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    @pytest.mark.parametrize("name", ["VIACEP_TIMEOUT", "GEMINI_TEMPERATURE", "SEED"])
    def test_from_env_invalid_number(self, name: str) -> None:
        with patch.dict(os.environ, {name: "abc"}, clear=True):
            with pytest.raises(ConfigurationError):
                LeaseIntakeConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("lease_intake").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_handler_writes_to_stderr(self) -> None:
        setup_logging()

        (handler,) = logging.getLogger().handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_custom_stream(self) -> None:
        stream = io.StringIO()
        setup_logging(format_type="json", stream=stream)

        logger = logging.getLogger("lease_intake.test")
        logger.info("Resolving CEP %s", "01310100", extra={"cep": "01310100"})

        output = json.loads(stream.getvalue())
        assert output["cep"] == "01310100"
        assert output["message"] == "Resolving CEP 01310100"

    def test_external_loggers_quieted(self) -> None:
        setup_logging(level="DEBUG")

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, exc_info: Any = None) -> logging.LogRecord:
        return logging.LogRecord(
            name="lease_intake.test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="Resolving CEP %s",
            args=("01310100",),
            exc_info=exc_info,
        )

    def test_format_basic(self) -> None:
        output = json.loads(JsonFormatter().format(self._record()))

        assert output["level"] == "INFO"
        assert output["logger"] == "lease_intake.test"
        assert output["message"] == "Resolving CEP 01310100"
        assert "timestamp" in output

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()

        output = json.loads(JsonFormatter().format(self._record(exc_info=exc_info)))

        assert "ValueError: boom" in output["exception"]

    def test_format_with_context(self) -> None:
        record = self._record()
        record.party_id = "abc"
        record.role = PartyRole.GUARANTOR

        output = json.loads(JsonFormatter().format(record))

        assert output["party_id"] == "abc"
        assert output["role"] == "Fiador"
        assert "cep" not in output

    def test_non_ascii_kept(self) -> None:
        record = self._record()
        record.msg = "Locatário"
        record.args = ()

        assert "Locatário" in JsonFormatter().format(record)

