# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level gophers facade."""

from __future__ import annotations

from .config import GopherSettings
from .connection import GopherConnection, connect
from .endpoint import Endpoint, resolve


class Gopher:
    """
    A resolved Gopher endpoint, ready to connect.

    Resolution happens in the constructor, so a bad endpoint string fails
    immediately with InvalidHostError, UnsupportedProtocolError or
    UrlParseError.

    Example::

        gopher = Gopher("gophers://bitreich.org")
        with gopher.connect() as conn:
            data = conn.fetch("/memecache/index.meme")
    """

    def __init__(self, endpoint: str | Endpoint, settings: GopherSettings | None = None):
        self.endpoint = endpoint if isinstance(endpoint, Endpoint) else resolve(endpoint)
        self.settings = settings or GopherSettings()

    @property
    def host(self) -> str:
        return self.endpoint.host

    @property
    def port(self) -> int:
        return self.endpoint.port

    @property
    def tls(self) -> bool:
        return self.endpoint.encrypted

    def connect(self) -> GopherConnection:
        """Open a fresh connection; each call dials (and handshakes) again."""
        return connect(self.endpoint, self.settings)

    def fetch(self, path: str = "") -> bytes:
        """Connect, fetch ``path`` and close the connection on every exit path."""
        with self.connect() as conn:
            return conn.fetch(path)

    def __repr__(self) -> str:
        return f"Gopher({self.endpoint.url!r})"
