"""Client that sends the operations in a file to a calculator server."""

from __future__ import annotations

import socket
import sys
from typing import BinaryIO

from .errors import (
    ArgsLenFailure,
    FileOpenFailure,
    ListeningFailure,
    ReadLineFailure,
    SocketFailure,
    WritingFailure,
)
from .response import ErrorResponse


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in {address!r}")
    port_number = int(port)
    if not 0 <= port_number <= 0xFFFF:
        raise ValueError(f"port out of range in {address!r}")
    return host.strip("[]"), port_number


def _strip_line_end(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def send_request(stream: BinaryIO, kind: str, data: str) -> None:
    """Write ``<kind> <data>`` as one request line and flush it.

    Write failures are reported on standard error.
    """
    try:
        stream.write(f"{kind} {data}\n".encode())
    except OSError:
        ErrorResponse(WritingFailure()).eprint()
    try:
        stream.flush()
    except OSError:
        ErrorResponse(WritingFailure()).eprint()


def read_response(reader: BinaryIO) -> str | None:
    """Read one reply line and report it.

    A ``VALUE`` reply prints its number on standard output; an ``ERROR`` reply
    is echoed to standard error. Returns the line read, or ``None`` if it could
    not be read.
    """
    try:
        response = reader.readline().decode("utf-8")
    except (OSError, UnicodeDecodeError):
        ErrorResponse(ListeningFailure()).eprint()
        return None

    if response.startswith("VALUE"):
        parts = response.split(" ")
        if len(parts) > 1:
            print(parts[1], end="")
    if response.startswith("ERROR"):
        print(response, end="", file=sys.stderr)
    return response


def _send_file(stream: BinaryIO, path: str) -> None:
    try:
        source = open(path, "rb")
    except OSError:
        ErrorResponse(FileOpenFailure()).eprint()
        return

    with source:
        for raw in source:
            try:
                line = _strip_line_end(raw).decode("utf-8")
            except UnicodeDecodeError:
                ErrorResponse(ReadLineFailure()).eprint()
                continue
            send_request(stream, "OP", line)
            read_response(stream)

    send_request(stream, "GET", "")
    read_response(stream)


def run_client(address: str, path: str) -> None:
    """Connect to ``address``, send every line of ``path`` as an operation, then ask for the value."""
    try:
        conn = socket.create_connection(_split_address(address))
    except (OSError, ValueError, OverflowError):
        ErrorResponse(SocketFailure()).eprint()
        return

    with conn, conn.makefile("rwb") as stream:
        _send_file(stream, path)


def main(argv: list[str] | None = None) -> int:
    """Run the client with ``<address> <file>`` arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        ErrorResponse(ArgsLenFailure()).eprint()
        return 0
    run_client(args[0], args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())