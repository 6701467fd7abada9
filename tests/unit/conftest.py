# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl
import threading
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"
# Test CA and an example.org server certificate it signed.
CA_CERT = DATA_DIR / "ca.pem"
SERVER_CERT = DATA_DIR / "server.pem"
SERVER_KEY = DATA_DIR / "server.key"


class OneShotServer:
    """Loopback TCP (or TLS) server that handles exactly one connection."""

    def __init__(
        self,
        response: bytes = b"",
        *,
        read_request: bool = True,
        ssl_context: ssl.SSLContext | None = None,
    ):
        self.response = response
        self.read_request = read_request
        self.ssl_context = ssl_context
        self.request = b""
        self.error: OSError | None = None
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(1)
        self.host, self.port = self._listener.getsockname()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def address(self) -> tuple[str, int]:
        return (self.host, self.port)

    def _serve(self) -> None:
        try:
            conn, _ = self._listener.accept()
        except OSError:
            return
        try:
            if self.ssl_context is not None:
                conn = self.ssl_context.wrap_socket(conn, server_side=True)
            with conn:
                self._handle(conn)
        except OSError as exc:
            # Rejected handshakes land here; tests inspect it.
            self.error = exc
            conn.close()

    def _handle(self, conn: socket.socket) -> None:
        if self.read_request:
            buffer = b""
            while not buffer.endswith(b"\r\n"):
                chunk = conn.recv(1024)
                if not chunk:
                    break
                buffer += chunk
            self.request = buffer
        if self.response:
            conn.sendall(self.response)
        try:
            conn.shutdown(socket.SHUT_WR)
        except OSError:
            pass

    def join(self, timeout: float = 5.0) -> None:
        self._thread.join(timeout)

    def close(self) -> None:
        self._listener.close()
        self.join()


@pytest.fixture
def gopher_server():
    servers: list[OneShotServer] = []

    def _start(response: bytes = b"", *, read_request: bool = True, tls: bool = False) -> OneShotServer:
        ssl_context = None
        if tls:
            ssl_context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
            ssl_context.load_cert_chain(SERVER_CERT, SERVER_KEY)
        server = OneShotServer(response, read_request=read_request, ssl_context=ssl_context)
        servers.append(server)
        return server

    yield _start
    for server in servers:
        server.close()


@pytest.fixture
def ca_file() -> str:
    return str(CA_CERT)


@pytest.fixture
def redirect_dial(monkeypatch):
    """Route every dial from gophers.connection to the given loopback address."""
    original = socket.create_connection
    dialed: list[tuple[str, int]] = []

    def _redirect(address: tuple[str, int]) -> None:
        def _create_connection(target, *args, **kwargs):
            dialed.append(target)
            return original(address, *args, **kwargs)

        monkeypatch.setattr("gophers.connection.socket.create_connection", _create_connection)

    _redirect.dialed = dialed
    return _redirect


@pytest.fixture
def closed_port() -> int:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
