"""Reading text files with the failure modes spelled out.

`read_text` turns the OS errors a caller can reasonably react to into an
`Err(FileReadError)`. Anything else (a bug, an interrupted process) still
raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from .result import Err, Ok, Result

__all__ = ["FileErrorKind", "FileReadError", "read_text"]


class FileErrorKind(Enum):
    NOT_FOUND = auto()
    PERMISSION_DENIED = auto()
    IS_DIRECTORY = auto()
    DECODE = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True, slots=True)
class FileReadError:
    kind: FileErrorKind
    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def read_text(path: Path, *, encoding: str = "utf-8") -> Result[str, FileReadError]:
    """Read a whole file as text.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        Ok(content) on success, Err(FileReadError) if the file is missing,
        not readable, a directory, or not valid text in `encoding`.
    """
    try:
        return Ok(path.read_text(encoding=encoding))
    except FileNotFoundError:
        return Err(FileReadError(FileErrorKind.NOT_FOUND, path, "file not found"))
    except PermissionError:
        return Err(FileReadError(FileErrorKind.PERMISSION_DENIED, path, "permission denied"))
    except IsADirectoryError:
        return Err(FileReadError(FileErrorKind.IS_DIRECTORY, path, "is a directory"))
    except UnicodeDecodeError as e:
        return Err(FileReadError(FileErrorKind.DECODE, path, f"cannot decode as {encoding}: {e.reason}"))
