"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods delegate to structlog with context
- Exception details on error/critical
- Context binding
- Renderer selection (JSON vs console)
"""

from unittest.mock import MagicMock, patch

import pytest
import structlog

from src.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so captured streams do not leak."""
    yield
    structlog.reset_defaults()


@pytest.mark.unit
class TestConsoleAdapterLogging:
    def test_info_logs_message_with_context(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("employee_created", employee_id=5, user_id=3)

            mock_logger.info.assert_called_once_with("employee_created", employee_id=5, user_id=3)

    def test_debug_and_warning_delegate(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.debug("authorization_denied", target=4)
            adapter.warning("authorization_user_not_found", user_id=9)

            mock_logger.debug.assert_called_once_with("authorization_denied", target=4)
            mock_logger.warning.assert_called_once_with("authorization_user_not_found", user_id=9)

    def test_error_adds_exception_fields(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("authorization_check_error", error=RuntimeError("boom"), role="Manager")

            mock_logger.error.assert_called_once_with(
                "authorization_check_error",
                role="Manager",
                error_type="RuntimeError",
                error_message="boom",
            )

    def test_critical_without_exception(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("database_unavailable", attempts=3)

            mock_logger.critical.assert_called_once_with("database_unavailable", attempts=3)


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="abc")
            bound.info("request_handled")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(trace_id="abc")
            bound_logger.info.assert_called_once_with("request_handled")

    def test_with_context_is_bind(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(user_id=1)

            mock_logger.bind.assert_called_once_with(user_id=1)


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    def test_json_renderer_when_requested(self):
        ConsoleAdapter(use_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_by_default(self):
        ConsoleAdapter()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_output_includes_event_and_context(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")

        adapter.info("goal_created", goal_id=7)

        out = capsys.readouterr().out
        assert '"event": "goal_created"' in out
        assert '"goal_id": 7' in out
        assert '"level": "info"' in out

    def test_level_filters_lower_messages(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="WARNING")

        adapter.info("hidden_event")
        adapter.warning("shown_event")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "shown_event" in out
