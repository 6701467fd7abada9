# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import sys

from gophers.cli import main as cli
from gophers.cli.main import build_parser, main
from gophers.errors import HandshakeError


class _Stdout:
    def __init__(self):
        self.buffer = io.BytesIO()

    def flush(self) -> None:
        return None


def test_build_parser_defaults():
    args = build_parser().parse_args(["gophers://bitreich.org"])
    assert args.url == "gophers://bitreich.org"
    assert args.selector == ""
    assert args.output is None
    assert args.ignore_ssl_errors is False

    args = build_parser().parse_args(["gopher://sdf.org", "/users", "--ignore-ssl-errors", "-o", "out.txt"])
    assert args.selector == "/users"
    assert args.ignore_ssl_errors is True
    assert args.output == "out.txt"


def test_main_writes_raw_bytes_to_stdout(gopher_server, redirect_dial, monkeypatch):
    server = gopher_server(b"iHello\r\n.\r\n")
    redirect_dial(server.address)
    stdout = _Stdout()
    monkeypatch.setattr(sys, "stdout", stdout)

    assert main(["gopher://example.org", "/hello"]) == 0

    server.join()
    assert stdout.buffer.getvalue() == b"iHello\r\n.\r\n"
    assert server.request == b"/hello\r\n"


def test_main_writes_output_file(gopher_server, redirect_dial, tmp_path):
    server = gopher_server(b"\x89PNG binary")
    redirect_dial(server.address)
    target = tmp_path / "image.png"

    assert main(["gopher://example.org:7070", "/image.png", "--output", str(target)]) == 0
    assert target.read_bytes() == b"\x89PNG binary"


def test_main_reports_resolution_errors(capsys):
    assert main(["https://example.org"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: Unsupported protocol")


def test_main_ignore_ssl_errors_disables_verification(monkeypatch, capsys):
    captured = {}

    class FailingGopher:
        def __init__(self, url, settings):
            captured["url"] = url
            captured["settings"] = settings

        def fetch(self, selector):
            raise HandshakeError("certificate verify failed")

    monkeypatch.setattr(cli, "Gopher", FailingGopher)

    assert main(["gophers://example.org", "--ignore-ssl-errors"]) == 1
    assert captured["settings"].verify_tls is False
    assert "error: TLS handshake failed: certificate verify failed" in capsys.readouterr().err
