"""Parsing of request lines into calculator operations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import ArgsLenFailure, InvalidInteger, InvalidOperation, UnexpectedMessage

_OPERAND_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_OPERAND_MAX = 255


class OpKind(Enum):
    """The kinds of request the calculator understands."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    GET = "GET"


@dataclass(frozen=True)
class Operation:
    """An operation on the calculator; ``operand`` is ``None`` for ``GET``."""

    kind: OpKind
    operand: int | None = None


def _parse_operand(text: str) -> int:
    if not _OPERAND_RE.fullmatch(text):
        raise InvalidInteger(text)
    value = int(text)
    if value > _OPERAND_MAX:
        raise InvalidInteger(text)
    return value


def make_operation(operator: str, operand: str) -> Operation:
    """Build an arithmetic operation from its operator and operand text.

    The operand is checked before the operator, so a line with both wrong
    reports the operand.
    """
    value = _parse_operand(operand)
    if operator == OpKind.GET.value:
        raise InvalidOperation(operator)
    try:
        kind = OpKind(operator)
    except ValueError:
        raise InvalidOperation(operator) from None
    return Operation(kind, value)


def parse_operation(line: str) -> Operation:
    """Parse a request line: ``GET`` or ``OP <operator> <operand>``."""
    tokens = line.split()
    if not tokens:
        raise UnexpectedMessage("")
    keyword = tokens[0]
    if keyword == "GET":
        if len(tokens) != 1:
            raise ArgsLenFailure()
        return Operation(OpKind.GET)
    if keyword == "OP":
        if len(tokens) != 3:
            raise ArgsLenFailure()
        return make_operation(tokens[1], tokens[2])
    raise UnexpectedMessage(keyword)