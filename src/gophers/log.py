# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging setup for the gophers CLI."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "GOPHERS_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (argument, then $GOPHERS_LOG_LEVEL) to a logging constant."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None = None) -> None:
    """
    Send log records to stderr.

    stdout is reserved for raw response bytes, so handlers must never write
    there. The library modules only log at DEBUG and never call this.
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


__all__ = ["resolve_log_level", "setup_logging"]
