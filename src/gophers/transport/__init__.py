# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport exports."""

from .adapters import StubTransport
from .base import Transport, TransportKind
from .tcp import TcpTransport
from .tls import TlsTransport, create_tls_context

__all__ = [
    "StubTransport",
    "TcpTransport",
    "TlsTransport",
    "Transport",
    "TransportKind",
    "create_tls_context",
]
