# Area: Commands Tests
"""Tests for Handler Base Class."""

from typing import Optional
from unittest.mock import Mock, patch

from bulls_and_cows._commands.handler_base import BaseCommandHandler, normalize_keyword


class KeywordHandler(BaseCommandHandler):
    """Concrete implementation for testing."""

    def __init__(self, keyword: str):
        super().__init__()
        self.keyword = keyword
        self.processed = []

    def can_handle(self, command: Optional[str]) -> bool:
        return command == self.keyword

    def process(self, command: Optional[str], game) -> None:
        self.processed.append(command)


class TestBaseCommandHandler:
    """Tests for BaseCommandHandler class."""

    def test_handles_recognized_command(self):
        """Test that a recognized command is processed and reported handled."""
        handler = KeywordHandler("ping")
        assert handler.handle("ping", Mock()) is True
        assert handler.processed == ["ping"]

    def test_delegates_to_successor(self):
        """Test that an unrecognized command goes to the successor."""
        first = KeywordHandler("ping")
        second = KeywordHandler("pong")
        first.set_successor(second)

        assert first.handle("pong", Mock()) is True
        assert first.processed == []
        assert second.processed == ["pong"]

    def test_returns_false_without_successor(self):
        """Test that an unclaimed command at the end of a chain returns False."""
        handler = KeywordHandler("ping")
        assert handler.handle("other", Mock()) is False

    def test_set_successor_returns_successor(self):
        """Test that set_successor allows fluent linking."""
        first, second, third = KeywordHandler("a"), KeywordHandler("b"), KeywordHandler("c")
        first.set_successor(second).set_successor(third)

        assert first.successor is second
        assert second.successor is third

    def test_name_is_class_name(self):
        """Test that name reports the handler class."""
        assert KeywordHandler("a").name == "KeywordHandler"

    def test_not_terminal_by_default(self):
        """Test that handlers are non-terminal unless declared."""
        assert KeywordHandler("a").terminal is False

    def test_logs_handling(self):
        """Test that handling is logged."""
        handler = KeywordHandler("ping")
        with patch("bulls_and_cows._commands.handler_base.logger") as mock_logger:
            handler.handle("ping", Mock())
            mock_logger.debug.assert_called()


class TestNormalizeKeyword:
    """Tests for keyword normalization."""

    def test_strips_and_lowercases(self):
        assert normalize_keyword("  HeLp \n") == "help"

    def test_none_passes_through(self):
        assert normalize_keyword(None) is None
