# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""TLS transport and client context construction."""

from __future__ import annotations

import logging
import socket
import ssl

from ..config import GopherSettings
from ..errors import HandshakeError, TlsError
from .base import Transport, TransportKind

logger = logging.getLogger(__name__)


def create_tls_context(settings: GopherSettings) -> ssl.SSLContext:
    """Build a client-side context, raising TlsError when it cannot be created."""
    try:
        context = ssl.create_default_context(cafile=settings.ca_file)
    except (OSError, ValueError) as exc:
        raise TlsError(str(exc)) from exc
    if not settings.verify_tls:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


class TlsTransport(Transport):
    """Encrypted stream over an already handshaken ``ssl.SSLSocket``."""

    kind = TransportKind.TLS

    def __init__(self, sock: ssl.SSLSocket):
        self._sock = sock

    @classmethod
    def handshake(cls, sock: socket.socket, server_hostname: str, context: ssl.SSLContext) -> TlsTransport:
        """
        Wrap a connected socket and complete the TLS handshake.

        ``server_hostname`` is used for SNI and certificate validation. The
        raw socket is closed when the handshake fails.
        """
        try:
            tls_sock = context.wrap_socket(sock, server_hostname=server_hostname)
        except OSError as exc:
            sock.close()
            raise HandshakeError(str(exc)) from exc
        logger.debug("TLS handshake with %s complete (%s)", server_hostname, tls_sock.version())
        return cls(tls_sock)

    def read(self, size: int) -> bytes:
        return self._sock.recv(size)

    def write(self, data: bytes) -> int:
        return self._sock.send(data)

    def flush(self) -> None:
        return None

    def close(self) -> None:
        self._sock.close()
