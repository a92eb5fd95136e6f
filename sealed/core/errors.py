"""Process exit codes.

The numeric values are part of the command line contract; the `sealed`
command has no failure path, so success is the only code it reports.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the `sealed` command."""

    OK = 0
