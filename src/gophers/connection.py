# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Gopher connections and the fetch primitive."""

from __future__ import annotations

import logging
import socket

from .config import GopherSettings
from .endpoint import Endpoint
from .errors import GopherIOError, TlsError
from .transport.base import Transport, TransportKind
from .transport.tcp import TcpTransport
from .transport.tls import TlsTransport, create_tls_context

logger = logging.getLogger(__name__)

REQUEST_TERMINATOR = b"\r\n"


class GopherConnection:
    """
    An open plain or TLS stream to a Gopher server.

    The connection owns its transport exclusively. It is open until ``close``
    is called (directly or by leaving a ``with`` block); after that every I/O
    call raises GopherIOError. Connections are not thread-safe and are never
    reused by the library: open a new one per fetch.
    """

    def __init__(self, transport: Transport, settings: GopherSettings | None = None):
        self._transport = transport
        self.settings = settings or GopherSettings()
        self._closed = False

    @property
    def kind(self) -> TransportKind:
        return self._transport.kind

    @property
    def encrypted(self) -> bool:
        return self._transport.kind is TransportKind.TLS

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> Transport:
        if self._closed:
            raise GopherIOError("connection is closed")
        return self._transport

    def read(self, size: int) -> bytes:
        transport = self._ensure_open()
        try:
            return transport.read(size)
        except OSError as exc:
            raise GopherIOError(str(exc)) from exc

    def write(self, data: bytes) -> int:
        transport = self._ensure_open()
        try:
            return transport.write(data)
        except OSError as exc:
            raise GopherIOError(str(exc)) from exc

    def flush(self) -> None:
        transport = self._ensure_open()
        try:
            transport.flush()
        except OSError as exc:
            raise GopherIOError(str(exc)) from exc

    def write_all(self, data: bytes) -> None:
        """Write ``data`` completely, retrying partial writes."""
        view = memoryview(data)
        while view:
            written = self.write(view)
            if written == 0:
                raise GopherIOError("failed to write whole buffer")
            view = view[written:]

    def read_to_end(self) -> bytes:
        """Read until the peer closes the stream and return everything received."""
        chunk_size = self.settings.read_chunk_size
        buffer = bytearray()
        while True:
            chunk = self.read(chunk_size)
            if not chunk:
                break
            buffer.extend(chunk)
        return bytes(buffer)

    def fetch(self, path: str) -> bytes:
        """
        Request ``path`` and return the raw response body.

        Sends ``path`` followed by CRLF, then blocks until the server closes the
        stream. There is no timeout. The response is returned uninterpreted.
        """
        request = path.encode("utf-8") + REQUEST_TERMINATOR
        self.write_all(request)
        self.flush()
        logger.debug("Sent %d byte request for selector %r", len(request), path)
        response = self.read_to_end()
        logger.debug("Received %d bytes for selector %r", len(response), path)
        return response

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._transport.close()

    def __enter__(self) -> GopherConnection:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


def connect(endpoint: Endpoint, settings: GopherSettings | None = None) -> GopherConnection:
    """
    Dial ``endpoint`` and return an open connection.

    Without ``settings`` the built-in defaults apply; the environment is not
    consulted. Raises GopherIOError when the TCP connection cannot be made,
    TlsError when the TLS context cannot be built and HandshakeError when the
    TLS handshake fails.
    """
    settings = settings or GopherSettings()
    host, port = endpoint.address
    logger.debug("Connecting to %s:%d (%s)", host, port, endpoint.scheme)
    try:
        sock = socket.create_connection((host, port))
    except (OSError, UnicodeError) as exc:
        # UnicodeError comes from IDNA-encoding a host label that is empty or too long.
        raise GopherIOError(str(exc)) from exc

    if not endpoint.encrypted:
        return GopherConnection(TcpTransport(sock), settings)

    try:
        context = create_tls_context(settings)
    except TlsError:
        sock.close()
        raise
    return GopherConnection(TlsTransport.handshake(sock, host, context), settings)


def fetch(connection: GopherConnection, path: str) -> bytes:
    """Module-level alias for ``GopherConnection.fetch``."""
    return connection.fetch(path)


__all__ = ["GopherConnection", "REQUEST_TERMINATOR", "connect", "fetch"]
