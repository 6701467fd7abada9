# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""gophers CLI."""

from __future__ import annotations

import argparse
import sys

from ..config import GopherSettings, load_gopher_settings
from ..errors import GopherError, error_kind_to_reason
from ..log import setup_logging
from ..runtime import Gopher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch a resource from a Gopher server (gopher:// or gophers://)")
    parser.add_argument("url", help="Endpoint URL, e.g. gophers://bitreich.org:70")
    parser.add_argument("selector", nargs="?", default="", help="Selector to request (default: root menu)")
    parser.add_argument(
        "-o",
        "--output",
        help="Write the response to this file instead of stdout",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS certificate verification (useful for self-signed servers)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $GOPHERS_LOG_LEVEL or WARNING)",
    )
    return parser


def _write_output(data: bytes, output: str | None) -> None:
    if output:
        with open(output, "wb") as fh:
            fh.write(data)
        return
    sys.stdout.buffer.write(data)
    sys.stdout.flush()


def _format_error(exc: GopherError) -> str:
    reason = error_kind_to_reason(exc.kind)
    detail = str(exc)
    if detail and detail != reason:
        return f"error: {reason}: {detail}"
    return f"error: {reason}"


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: GopherSettings = load_gopher_settings()
    if args.ignore_ssl_errors:
        settings.verify_tls = False

    try:
        data = Gopher(args.url, settings).fetch(args.selector)
    except GopherError as exc:
        print(_format_error(exc), file=sys.stderr)
        return 1

    _write_output(data, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
