"""Exception hierarchy, including errors received from the server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ServerExceptionInfo:
    """Exception details as sent by the server, possibly chained."""

    code: int = 0
    name: str = ""
    display_text: str = ""
    stack_trace: str = ""
    nested: Optional[ServerExceptionInfo] = None


class Error(RuntimeError):
    """Base class of every error raised by this package."""


class ValidationError(Error):
    """Invalid user input, such as wrong column types or arguments."""


class ProtocolError(Error):
    """I/O, (de)serialization or checksum failures."""


class UnimplementedError(Error):
    """A feature that is not supported."""


class InternalAssertionError(Error):
    """An internal consistency check failed."""


class OpenSSLError(Error):
    """A TLS layer failure."""


class CompressionError(Error):
    """Compression or decompression failed."""


class ServerException(Error):
    """An exception reported by the server."""

    def __init__(self, exception: ServerExceptionInfo) -> None:
        super().__init__(exception.display_text)
        self.exception = exception

    @property
    def code(self) -> int:
        """The server's error code."""
        return self.exception.code

    def __str__(self) -> str:
        return self.exception.display_text


ServerError = ServerException