"""Errors raised by the calculator, its parser and the network programs."""

from __future__ import annotations


class CalculatorError(Exception):
    """Base class for every calculator failure.

    Each subclass carries a fixed reason text. ``protocol_message`` renders it
    in the wire form ``ERROR "<reason>"``.
    """

    reason = "calculator failure"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(self.protocol_message())

    def protocol_message(self) -> str:
        """Return the error line as the protocol specifies it."""
        text = self.reason if self.detail is None else f"{self.reason}: {self.detail}"
        return f'ERROR "{text}"'


class _DetailedError(CalculatorError):
    """An error that always names the offending input."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)


# Client errors


class DivisionByZero(CalculatorError):
    """A division by zero was attempted."""

    reason = "division by zero"

    def __init__(self) -> None:
        super().__init__()


class InvalidOperation(_DetailedError):
    """The operator of an ``OP`` request is not one of ``+ - * /``."""

    reason = "parsing error: unknown operation"


class InvalidInteger(_DetailedError):
    """The operand of an ``OP`` request is not an integer in 0..255."""

    reason = "parsing error: invalid integer"


class UnexpectedMessage(_DetailedError):
    """The request keyword is neither ``OP`` nor ``GET``."""

    reason = "unexpected message"


# Server and program errors


class _PlainError(CalculatorError):
    """An error with no detail attached."""

    def __init__(self) -> None:
        super().__init__()


class JoinFailure(_PlainError):
    """A worker thread failed to finish."""

    reason = "thread join failure"


class LockFailure(_PlainError):
    """The shared calculator could not be locked."""

    reason = "mutex lock failure"


class WritingFailure(_PlainError):
    """A message could not be written."""

    reason = "writing failure"


class ListeningFailure(_PlainError):
    """A message or connection could not be read."""

    reason = "reading failure"


class SocketFailure(_PlainError):
    """A socket could not be opened, bound or connected."""

    reason = "socket failure"


class FileOpenFailure(_PlainError):
    """A file could not be opened."""

    reason = "file open failure"


class ReadLineFailure(_PlainError):
    """A line could not be read."""

    reason = "line reading failure"


class ArgsLenFailure(_PlainError):
    """A wrong number of arguments or request tokens was given."""

    reason = "invalid number of arguments"