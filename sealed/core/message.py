"""Messages as a closed variant type.

`MessageType` is sealed: its only variants are `MessageSuccess` and
`MessageFailure`, each with its own fields. Unlike an enumeration, every
variant can be instantiated many times, each instance with its own state.

Functions that inspect a message take the `Message` union rather than the
root class, so a type checker flags a `match` that forgets a variant.
Adding a third variant means updating `Message` and every dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from .sealed import Sealed

__all__ = [
    "SUCCESS_TEXT",
    "FAILURE_TEXT",
    "FAILURE_ERROR",
    "MessageType",
    "MessageSuccess",
    "MessageFailure",
    "Message",
    "default_messages",
    "describe_error",
    "format_message",
]

SUCCESS_TEXT = "It worked!"
FAILURE_TEXT = "Boj!"
FAILURE_ERROR = "Gone wrong!"


class MessageType(Sealed):
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class MessageSuccess(MessageType):
    text: str


@dataclass(frozen=True, slots=True)
class MessageFailure(MessageType):
    text: str
    error: BaseException


type Message = MessageSuccess | MessageFailure


def default_messages() -> tuple[Message, Message]:
    """Build the failure and success messages, in that order."""
    return (
        MessageFailure(FAILURE_TEXT, Exception(FAILURE_ERROR)),
        MessageSuccess(SUCCESS_TEXT),
    )


def describe_error(error: BaseException) -> str:
    """Render an exception as `Type: message`.

    Built-in exception types are shown by bare name, others with their
    module, e.g. `Exception: Gone wrong!` or `pkg.errors.Boom: bad input`.
    """
    cls = type(error)
    name = cls.__qualname__ if cls.__module__ == "builtins" else f"{cls.__module__}.{cls.__qualname__}"
    detail = str(error)
    return f"{name}: {detail}" if detail else name


def format_message(message: Message) -> str:
    """Return the display text of a message."""
    match message:
        case MessageSuccess(text=text):
            return text
        case MessageFailure(text=text, error=error):
            return f"{text} {describe_error(error)}"
        case _:
            assert_never(message)
