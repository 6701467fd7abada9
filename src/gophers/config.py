# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Client settings.

The library never reads the environment on its own: ``connect``, ``fetch``
and ``Gopher`` use ``GopherSettings()`` unless settings are passed in.
``GopherSettings.from_env`` exists for the CLI entry point.
"""

import os
from dataclasses import dataclass

DEFAULT_PORT = 70
DEFAULT_READ_CHUNK_SIZE = 8192

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _chunk_size_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _bool_env(name: str, default: bool) -> bool:
    """Only an explicit true/false spelling overrides ``default``."""
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _path_env(name: str) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or None


@dataclass
class GopherSettings:
    """
    Defaults shared by connect and fetch.

    There is no timeout field: reads block until the peer closes.
    """

    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE
    verify_tls: bool = True
    ca_file: str | None = None

    @classmethod
    def from_env(cls) -> "GopherSettings":
        """Build settings from ``GOPHERS_*`` variables, evaluated at call time."""
        return cls(
            read_chunk_size=_chunk_size_env("GOPHERS_READ_CHUNK_SIZE", cls.read_chunk_size),
            verify_tls=_bool_env("GOPHERS_VERIFY_TLS", cls.verify_tls),
            ca_file=_path_env("GOPHERS_CA_FILE"),
        )


def load_gopher_settings() -> GopherSettings:
    """Environment-backed settings for the CLI."""
    return GopherSettings.from_env()
