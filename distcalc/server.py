"""Server that shares one calculator between all connected clients."""

from __future__ import annotations

import socket
import sys
import threading

from .calculator import Calculator
from .errors import (
    ArgsLenFailure,
    CalculatorError,
    ListeningFailure,
    ReadLineFailure,
    SocketFailure,
)
from .operation import parse_operation
from .response import ErrorResponse, OkResponse, Response, ValueResponse


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


def handle_line(line: str, calculator: Calculator, lock: threading.Lock) -> Response:
    """Parse one request line, apply it under ``lock`` and return the reply."""
    try:
        op = parse_operation(line)
        with lock:
            result = calculator.apply(op)
    except CalculatorError as error:
        return ErrorResponse(error)
    if result is None:
        return OkResponse()
    return ValueResponse(result)


def handle_client(conn: socket.socket, calculator: Calculator, lock: threading.Lock) -> None:
    """Answer every request line sent on ``conn`` until the peer closes it."""
    with conn, conn.makefile("rwb") as stream:
        while True:
            try:
                raw = stream.readline()
            except OSError:
                ErrorResponse(ReadLineFailure()).send(stream)
                break
            if not raw:
                break
            try:
                line = _strip_line_end(raw).decode("utf-8")
            except UnicodeDecodeError:
                ErrorResponse(ReadLineFailure()).send(stream)
                continue
            handle_line(line, calculator, lock).send(stream)


def _bind(address: str) -> socket.socket:
    host, port = _split_address(address)
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return socket.create_server((host, port), family=family)


def serve(address: str) -> None:
    """Listen on ``address`` and serve each client in its own thread."""
    try:
        listener = _bind(address)
    except (OSError, ValueError, OverflowError):
        ErrorResponse(SocketFailure()).eprint()
        return

    calculator = Calculator()
    lock = threading.Lock()
    with listener:
        while True:
            try:
                conn, _ = listener.accept()
            except OSError:
                ErrorResponse(ListeningFailure()).eprint()
                continue
            worker = threading.Thread(
                target=handle_client, args=(conn, calculator, lock)
            )
            worker.start()


def main(argv: list[str] | None = None) -> int:
    """Run the server with an ``<address>`` argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        ErrorResponse(ArgsLenFailure()).eprint()
        return 0
    try:
        serve(args[0])
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())