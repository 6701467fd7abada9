# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Byte-stream transport abstraction."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class TransportKind(str, Enum):
    PLAIN = "plain"
    TLS = "tls"


class Transport(Protocol):
    """
    Blocking byte stream owned by a single GopherConnection.

    ``read`` returns ``b""`` only at clean end-of-stream, ``write`` returns the
    number of bytes accepted. Socket failures propagate as ``OSError``.
    """

    kind: TransportKind

    def read(self, size: int) -> bytes: ...

    def write(self, data: bytes) -> int: ...

    def flush(self) -> None: ...

    def close(self) -> None: ...
