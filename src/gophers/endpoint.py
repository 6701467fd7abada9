# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Endpoint resolution.

Turns a ``gopher://`` or ``gophers://`` URL into an immutable Endpoint that
``connect`` can dial. Nothing in this module performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .config import DEFAULT_PORT
from .errors import InvalidHostError, UnsupportedProtocolError, UrlParseError

PLAIN_SCHEME = "gopher"
TLS_SCHEME = "gophers"
MAX_PORT = 65535

_SCHEME_ENCRYPTION = {
    PLAIN_SCHEME: False,
    TLS_SCHEME: True,
}


@dataclass(frozen=True)
class Endpoint:
    """Resolved host, port and transport choice for a Gopher server."""

    host: str
    port: int = DEFAULT_PORT
    encrypted: bool = False

    @classmethod
    def parse(cls, endpoint: str) -> Endpoint:
        return resolve(endpoint)

    @property
    def scheme(self) -> str:
        return TLS_SCHEME if self.encrypted else PLAIN_SCHEME

    @property
    def address(self) -> tuple[str, int]:
        return (self.host, self.port)

    @property
    def url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.scheme}://{host}:{self.port}"

    def __str__(self) -> str:
        return self.url


def _parse_url(endpoint: str) -> httpx.URL:
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        raise UrlParseError(str(exc)) from exc
    if not url.scheme:
        raise UrlParseError("relative URL without a base")
    if url.port is not None and not 0 <= url.port <= MAX_PORT:
        raise UrlParseError("invalid port number")
    return url


def resolve(endpoint: str) -> Endpoint:
    """
    Parse an endpoint string such as ``gophers://example.org:105``.

    The host is checked before the scheme, so a bare ``gopher:`` fails with
    InvalidHostError. Any path, query or fragment is ignored; selectors are
    passed to ``fetch`` separately.
    """
    url = _parse_url(endpoint)

    if not url.host:
        raise InvalidHostError()

    encrypted = _SCHEME_ENCRYPTION.get(url.scheme)
    if encrypted is None:
        raise UnsupportedProtocolError(f"scheme {url.scheme!r} is not gopher or gophers")

    port = url.port if url.port is not None else DEFAULT_PORT
    return Endpoint(host=url.host, port=port, encrypted=encrypted)


__all__ = ["Endpoint", "MAX_PORT", "PLAIN_SCHEME", "TLS_SCHEME", "resolve"]
