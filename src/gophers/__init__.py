# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
gophers package entrypoint.

A small synchronous client for the Gopher protocol over plain TCP
(``gopher://``) or TLS (``gophers://``). Endpoints resolve into typed
dataclasses, transports are abstracted behind a minimal protocol, and every
failure surfaces as a GopherError subclass.
"""

from .config import GopherSettings, load_gopher_settings
from .connection import GopherConnection, connect, fetch
from .endpoint import Endpoint, resolve
from .errors import (
    ErrorKind,
    GopherError,
    GopherIOError,
    HandshakeError,
    InvalidHostError,
    TlsError,
    UnsupportedProtocolError,
    UrlParseError,
)
from .log import setup_logging
from .runtime import Gopher
from .transport import Transport, TransportKind
from .version import __version__

__all__ = [
    "Endpoint",
    "ErrorKind",
    "Gopher",
    "GopherConnection",
    "GopherError",
    "GopherIOError",
    "GopherSettings",
    "HandshakeError",
    "InvalidHostError",
    "TlsError",
    "Transport",
    "TransportKind",
    "UnsupportedProtocolError",
    "UrlParseError",
    "connect",
    "fetch",
    "load_gopher_settings",
    "resolve",
    "setup_logging",
    "__version__",
]
