# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception types."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_HOST = "INVALID_HOST"
    UNSUPPORTED_PROTOCOL = "UNSUPPORTED_PROTOCOL"
    URL_PARSE = "URL_PARSE"
    IO = "IO"
    HANDSHAKE = "HANDSHAKE"
    TLS = "TLS"


class GopherError(Exception):
    """Base class for every error raised by gophers."""

    kind: ErrorKind | None = None

    def __init__(self, message: str | None = None):
        super().__init__(message or error_kind_to_reason(self.kind))


class InvalidHostError(GopherError):
    """The endpoint URL parsed but carries no host."""

    kind = ErrorKind.INVALID_HOST


class UnsupportedProtocolError(GopherError):
    """The endpoint scheme is neither ``gopher`` nor ``gophers``."""

    kind = ErrorKind.UNSUPPORTED_PROTOCOL


class UrlParseError(GopherError):
    """The endpoint string is not a valid absolute URL."""

    kind = ErrorKind.URL_PARSE


class GopherIOError(GopherError):
    """A socket-level failure while dialing, reading or writing."""

    kind = ErrorKind.IO


class HandshakeError(GopherError):
    """The TLS handshake failed after the TCP connection was established."""

    kind = ErrorKind.HANDSHAKE


class TlsError(GopherError):
    """The TLS context could not be created."""

    kind = ErrorKind.TLS


def error_kind_to_reason(kind: ErrorKind | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorKind.INVALID_HOST: "Invalid host",
        ErrorKind.UNSUPPORTED_PROTOCOL: "Unsupported protocol",
        ErrorKind.URL_PARSE: "Malformed endpoint URL",
        ErrorKind.IO: "Network I/O failure",
        ErrorKind.HANDSHAKE: "TLS handshake failed",
        ErrorKind.TLS: "TLS setup failed",
        None: "",
    }
    return mapping.get(kind, "Gopher request failed")


__all__ = [
    "ErrorKind",
    "GopherError",
    "GopherIOError",
    "HandshakeError",
    "InvalidHostError",
    "TlsError",
    "UnsupportedProtocolError",
    "UrlParseError",
    "error_kind_to_reason",
]
