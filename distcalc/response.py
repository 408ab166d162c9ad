"""Responses the server sends back for each request line."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO

from .errors import CalculatorError, WritingFailure


class Response(ABC):
    """A single protocol reply."""

    @abstractmethod
    def message(self) -> str:
        """Return the reply line without its trailing newline."""

    def send(self, stream: BinaryIO) -> None:
        """Write the reply line to a binary stream and flush it.

        Write failures are reported on standard error, not raised.
        """
        data = f"{self.message()}\n".encode()
        try:
            stream.write(data)
        except OSError:
            ErrorResponse(WritingFailure()).eprint()
        try:
            stream.flush()
        except OSError:
            ErrorResponse(WritingFailure()).eprint()

    def eprint(self) -> str:
        """Write the reply line to standard error, followed by a blank line.

        Returns the text that was written.
        """
        text = f"{self.message()}\n\n"
        sys.stderr.write(text)
        sys.stderr.flush()
        return text


@dataclass(frozen=True)
class OkResponse(Response):
    """The operation succeeded."""

    def message(self) -> str:
        return "OK"


@dataclass(frozen=True)
class ValueResponse(Response):
    """The current value of the calculator."""

    value: int

    def message(self) -> str:
        return f"VALUE {self.value}"


@dataclass(frozen=True)
class ErrorResponse(Response):
    """An error occurred while handling the request."""

    error: CalculatorError

    def message(self) -> str:
        return self.error.protocol_message()