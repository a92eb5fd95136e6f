"""Console output abstraction.

Commands write through `ConsoleProtocol` so they never depend on Rich
directly and tests can capture what would have been printed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
]


class ConsoleProtocol(Protocol):
    def print(self, message: str) -> None:
        """Print one line of text.

        Args:
            message: The text to print, emitted verbatim
        """
        ...


class RichConsole:
    """Console implementation using the Rich library.

    Rich decides where output goes (stdout unless redirected); lines are
    written to that stream unrendered, since rendering would apply markup,
    emoji codes and tab expansion to the message text.
    """

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(highlight=False, emoji=False, soft_wrap=True)

    def print(self, message: str) -> None:
        stream = self._console.file
        stream.write(f"{message}\n")
        stream.flush()


def _empty_outputs() -> list[str]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[str] = field(default_factory=_empty_outputs)

    def print(self, message: str) -> None:
        self.outputs.append(message)

    @property
    def messages(self) -> list[str]:
        """All output messages as a list of strings."""
        return list(self.outputs)

    @property
    def text(self) -> str:
        """All output as a single newline-separated string."""
        return "\n".join(self.outputs)
