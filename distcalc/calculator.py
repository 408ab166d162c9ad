"""An accumulator that works on 8-bit unsigned integers."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import DivisionByZero
from .operation import OpKind, Operation

_MASK = 0xFF


@dataclass
class Calculator:
    """Holds a single value in 0..255; arithmetic wraps around."""

    value: int = 0

    def apply(self, op: Operation) -> int | None:
        """Apply ``op``; return the value for ``GET`` and ``None`` otherwise.

        Raises ``DivisionByZero`` and leaves the value unchanged when dividing by 0.
        """
        if op.kind is OpKind.GET:
            return self.value
        operand = op.operand
        if op.kind is OpKind.ADD:
            self.value = (self.value + operand) & _MASK
        elif op.kind is OpKind.SUB:
            self.value = (self.value - operand) & _MASK
        elif op.kind is OpKind.MUL:
            self.value = (self.value * operand) & _MASK
        elif op.kind is OpKind.DIV:
            if operand == 0:
                raise DivisionByZero()
            self.value //= operand
        return None