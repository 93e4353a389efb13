"""Tests for logging infrastructure."""

import json
import logging
from io import StringIO

from enumkit.observability import configure_logging, get_logger


class TestGetLogger:
    """Tests for logger naming."""

    def test_prefixed_name(self):
        """Loggers live under the enumkit namespace."""
        assert get_logger("registry").name == "enumkit.registry"


class TestConfigureLogging:
    """Tests for handler setup."""

    def test_readable_format(self):
        """Readable format has level, logger name and message."""
        stream = StringIO()
        configure_logging(level=logging.DEBUG, stream=stream)

        get_logger("test").info("hello there")

        output = stream.getvalue()
        assert "INFO" in output
        assert "enumkit.test" in output
        assert "hello there" in output

    def test_json_format(self):
        """JSON format emits one parseable object per record."""
        stream = StringIO()
        configure_logging(level=logging.DEBUG, json_format=True, stream=stream)

        get_logger("test").warning("structured")

        data = json.loads(stream.getvalue().strip())
        assert data["level"] == "WARNING"
        assert data["logger"] == "enumkit.test"
        assert data["message"] == "structured"
        assert "timestamp" in data

    def test_level_filters(self):
        """Records below the configured level are dropped."""
        stream = StringIO()
        configure_logging(level=logging.WARNING, stream=stream)

        get_logger("test").info("quiet")

        assert stream.getvalue() == ""

    def test_boot_is_logged_at_debug(self):
        """Booting an enum emits a debug record."""
        from enumkit import EnumBase

        class Logged(EnumBase):
            A = "a"

        stream = StringIO()
        configure_logging(level=logging.DEBUG, stream=stream)

        Logged.values()

        assert "Booted" in stream.getvalue()
        assert "1 members" in stream.getvalue()

    def test_boot_record_carries_fields(self):
        """JSON boot records include the enum name and member count."""
        from enumkit import EnumBase

        class Structured(EnumBase):
            A = "a"
            B = "b"

        stream = StringIO()
        configure_logging(level=logging.DEBUG, json_format=True, stream=stream)

        Structured.values()

        data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert data["enum"].endswith("Structured")
        assert data["members"] == 2
        assert data["boot_hook"] is False

    def test_fallback_record_carries_fields(self):
        """JSON fallback warnings include the rejected value and the default."""
        from sample_enums import FallbackSample

        FallbackSample.values()
        stream = StringIO()
        configure_logging(level=logging.WARNING, json_format=True, stream=stream)

        FallbackSample("bogus")

        data = json.loads(stream.getvalue().strip())
        assert data["level"] == "WARNING"
        assert data["enum"] == "FallbackSample"
        assert data["value"] == "bogus"
        assert data["default"] == "pending"

    def test_reconfigure_replaces_handler(self):
        """Calling configure_logging twice keeps a single handler."""
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())

        assert len(logging.getLogger("enumkit").handlers) == 1
