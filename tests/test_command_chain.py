# Area: Commands Tests
"""Tests for CommandChain wiring."""

import pytest
from unittest.mock import Mock

from bulls_and_cows._commands import (
    CommandChain,
    ExitCommandHandler,
    HelpCommandHandler,
    InvalidCommandHandler,
    NumberCommandHandler,
    RestartCommandHandler,
    TopCommandHandler,
    build_default_chain,
)
from bulls_and_cows.errors import ConfigurationError, MissingTerminalHandlerError


class TestCommandChainWiring:
    """Tests for construction-time validation."""

    def test_empty_chain_fails_fast(self):
        """Test that an empty chain is a configuration error."""
        with pytest.raises(MissingTerminalHandlerError) as exc_info:
            CommandChain([])
        assert exc_info.value.handler_name is None

    def test_chain_without_terminal_handler_fails_fast(self):
        """Test that a chain not ending in a terminal handler is rejected."""
        with pytest.raises(MissingTerminalHandlerError) as exc_info:
            CommandChain([NumberCommandHandler(), HelpCommandHandler()])
        assert exc_info.value.handler_name == "HelpCommandHandler"
        assert "HelpCommandHandler" in str(exc_info.value)

    def test_missing_terminal_is_configuration_error(self):
        """Test that the wiring error belongs to the configuration errors."""
        with pytest.raises(ConfigurationError):
            CommandChain([RestartCommandHandler()])

    def test_terminal_handler_must_be_last(self):
        """Test that a terminal handler in the middle does not count."""
        with pytest.raises(MissingTerminalHandlerError):
            CommandChain([InvalidCommandHandler(), HelpCommandHandler()])

    def test_links_handlers_in_order(self):
        """Test that each handler's successor is the next one."""
        handlers = [NumberCommandHandler(), HelpCommandHandler(), InvalidCommandHandler()]
        chain = CommandChain(handlers)

        assert chain.head is handlers[0]
        assert handlers[0].successor is handlers[1]
        assert handlers[1].successor is handlers[2]
        assert handlers[2].successor is None

    def test_default_chain_order(self):
        """Test the standard handler order."""
        chain = build_default_chain()
        assert [type(h) for h in chain.handlers] == [
            NumberCommandHandler,
            HelpCommandHandler,
            RestartCommandHandler,
            TopCommandHandler,
            ExitCommandHandler,
            InvalidCommandHandler,
        ]


class TestCommandChainDispatch:
    """Tests for dispatching through the chain."""

    def test_unrecognized_command_reaches_terminal_handler(self):
        """Test that unknown input is claimed by the terminal handler."""
        game = Mock()
        chain = build_default_chain()

        assert chain.dispatch("banana", game) is True
        game.printer.print_message.assert_called_once()

    def test_dispatch_uses_first_matching_handler(self):
        """Test that help reaches the help handler only."""
        game = Mock()
        chain = build_default_chain()

        chain.dispatch("help", game)

        game.reveal_digit.assert_called_once()
        game.restart.assert_not_called()
