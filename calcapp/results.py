"""Structured calculation outcomes and their text rendering.

A calculation produces either a ``Success`` or a ``Failure``. Decision logic
works with these values; ``render`` turns them into the display strings
printed by the CLI and stored in history::

    Result: 10.0 + 5.0 = 15.0
    Error: Division by zero is not allowed!

Every rendered failure starts with ``ERROR_PREFIX``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ERROR_PREFIX = "Error"


class FailureKind(Enum):
    INVALID_OPERAND = "invalid_operand"
    UNKNOWN_OPERATION = "unknown_operation"
    DIVISION_BY_ZERO = "division_by_zero"


@dataclass(frozen=True)
class Success:
    operand_a: float
    operand_b: float
    symbol: str
    value: float

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False


CalculationResult = Success | Failure


def format_number(value: float) -> str:
    """Render a float as its shortest round-trip text (``15.0``, ``0.25``)."""
    return repr(float(value))


def render(result: CalculationResult) -> str:
    """Render a result as its display string."""
    if isinstance(result, Failure):
        return result.message
    return (
        f"Result: {format_number(result.operand_a)} {result.symbol} "
        f"{format_number(result.operand_b)} = {format_number(result.value)}"
    )


def invalid_operand(text: str) -> Failure:
    return Failure(FailureKind.INVALID_OPERAND, f"{ERROR_PREFIX}: '{text}' is not a valid number")


def unknown_operation(token: str) -> Failure:
    return Failure(
        FailureKind.UNKNOWN_OPERATION,
        f"{ERROR_PREFIX}: Unknown operation '{token}'. Use +, -, *, or /",
    )


def division_by_zero() -> Failure:
    return Failure(FailureKind.DIVISION_BY_ZERO, f"{ERROR_PREFIX}: Division by zero is not allowed!")
