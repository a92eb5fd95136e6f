"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
]
