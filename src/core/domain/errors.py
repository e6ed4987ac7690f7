"""Errores del dominio.

Each error carries the exit code the CLI uses when it reaches the top level,
so the mapping lives next to the error and not in the command.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.domain.models import Operation


class BytePipeError(Exception):
    """Base error for every failure surfaced to the user."""

    exit_code: int = 1

    def __init__(self, message: str, *, context: str = "") -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class ArgumentError(BytePipeError):
    """Bad, missing or conflicting command-line arguments."""

    exit_code = 2


class NotFoundError(BytePipeError):
    """Input file missing or unreadable."""

    exit_code = 3

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        message = f"Could not find file {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class OutputWriteError(BytePipeError):
    """Output file could not be created or written."""

    exit_code = 6

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        message = f"Could not write output file {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TransformError(BytePipeError):
    """Failure raised by a decoding transform."""

    def __init__(self, message: str, *, operation: Operation | None = None) -> None:
        self.operation = operation
        context = operation.value if operation is not None else ""
        super().__init__(message, context=context)


class DecodeError(TransformError):
    """Base64 or hex text is malformed."""

    exit_code = 4


class EncodingError(TransformError):
    """Bytes handed to the hex decoder are not valid UTF-8."""

    exit_code = 5
