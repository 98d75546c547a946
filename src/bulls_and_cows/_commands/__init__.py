# Area: Commands
"""
Command handling - chain of responsibility over player input.

This package handles:
- Numeric guesses
- help / restart / top / exit keywords
- Reporting unrecognized input
"""

from .handler_base import BaseCommandHandler
from .handler_number import NumberCommandHandler
from .handler_help import HelpCommandHandler
from .handler_restart import RestartCommandHandler
from .handler_top import TopCommandHandler
from .handler_exit import ExitCommandHandler
from .handler_invalid import InvalidCommandHandler
from .chain import CommandChain, build_default_chain

__all__ = [
    "BaseCommandHandler",
    "NumberCommandHandler",
    "HelpCommandHandler",
    "RestartCommandHandler",
    "TopCommandHandler",
    "ExitCommandHandler",
    "InvalidCommandHandler",
    "CommandChain",
    "build_default_chain",
]
