"""Core domain types and logic."""

from .errors import ErrorCode
from .message import (
    FAILURE_ERROR,
    FAILURE_TEXT,
    SUCCESS_TEXT,
    Message,
    MessageFailure,
    MessageSuccess,
    MessageType,
    default_messages,
    describe_error,
    format_message,
)
from .options import EnergyOption, HighlightOption, Option, Options, VolumeOption, option_for
from .result import Err, Ok, Result, is_err, is_ok
from .sealed import Sealed, variants_of
from .selection import choose

__all__ = [
    # errors
    "ErrorCode",
    # message
    "FAILURE_ERROR",
    "FAILURE_TEXT",
    "SUCCESS_TEXT",
    "Message",
    "MessageFailure",
    "MessageSuccess",
    "MessageType",
    "default_messages",
    "describe_error",
    "format_message",
    # options
    "EnergyOption",
    "HighlightOption",
    "Option",
    "Options",
    "VolumeOption",
    "option_for",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # sealed
    "Sealed",
    "variants_of",
    # selection
    "choose",
]
