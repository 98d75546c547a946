# Area: Collaborators
"""
bulls_and_cows.console — Line input
===================================

Blocking line readers. End of input is reported as None, which the
command chain treats like an exit command.
"""

from typing import Callable, Iterable, Iterator, Optional, Protocol


class LineReader(Protocol):
    """Protocol for line input sources."""

    def read_line(self) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        ...


class ConsoleReader:
    """LineReader that reads from the terminal via input()."""

    def __init__(self, input_func: Optional[Callable[[], str]] = None):
        self._input = input_func

    def read_line(self) -> Optional[str]:
        read = self._input or input
        try:
            return read()
        except EOFError:
            return None


class ScriptedReader:
    """
    LineReader that replays a fixed list of lines.

    Useful for demos and tests; returns None once the lines run out.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)

    def read_line(self) -> Optional[str]:
        return next(self._lines, None)
