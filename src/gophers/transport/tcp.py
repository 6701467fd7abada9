# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plain TCP transport."""

from __future__ import annotations

import socket

from .base import Transport, TransportKind


class TcpTransport(Transport):
    """Unencrypted socket stream."""

    kind = TransportKind.PLAIN

    def __init__(self, sock: socket.socket):
        self._sock = sock

    def read(self, size: int) -> bytes:
        return self._sock.recv(size)

    def write(self, data: bytes) -> int:
        return self._sock.send(data)

    def flush(self) -> None:
        # Sockets are unbuffered on the Python side.
        return None

    def close(self) -> None:
        self._sock.close()
