# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory transports for tests and offline callers."""

from __future__ import annotations

from .base import Transport, TransportKind


class StubTransport(Transport):
    """Deterministic, programmable Transport for tests."""

    def __init__(
        self,
        response: bytes = b"",
        *,
        kind: TransportKind = TransportKind.PLAIN,
        max_write: int | None = None,
        read_error: OSError | None = None,
        write_error: OSError | None = None,
    ):
        self.kind = kind
        self._response = bytes(response)
        self._offset = 0
        self._max_write = max_write
        self._read_error = read_error
        self._write_error = write_error
        self.sent = bytearray()
        self.write_calls = 0
        self.flushed = 0
        self.closed = False

    def read(self, size: int) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        chunk = self._response[self._offset : self._offset + size]
        self._offset += len(chunk)
        return chunk

    def write(self, data: bytes) -> int:
        self.write_calls += 1
        if self._write_error is not None:
            raise self._write_error
        accepted = bytes(data) if self._max_write is None else bytes(data[: self._max_write])
        self.sent.extend(accepted)
        return len(accepted)

    def flush(self) -> None:
        self.flushed += 1

    def close(self) -> None:
        self.closed = True
