"""Calculator that parses text operands and dispatches through the alias table."""

from __future__ import annotations

import logging
import math

from rich.console import Console
from rich.table import Table

from calcapp.operations import OPERATIONS, lookup_operation
from calcapp.results import (
    CalculationResult,
    Success,
    division_by_zero,
    invalid_operand,
    render,
    unknown_operation,
)

logger = logging.getLogger(__name__)

_OPERATION_LABELS = {
    "add": "Addition",
    "subtract": "Subtraction",
    "multiply": "Multiplication",
    "divide": "Division",
}


def parse_number(text: str) -> float | None:
    """Parse trimmed ``text`` as a finite float, or return None.

    Only ASCII decimal text is accepted: digit-group underscores, non-ASCII
    digits, ``inf`` and ``nan`` are rejected.
    """
    stripped = text.strip()
    if not stripped or not stripped.isascii() or "_" in stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class Calculator:
    """Two-operand calculator returning structured or rendered results."""

    def evaluate(self, num1: str, num2: str, operation: str) -> CalculationResult:
        a = parse_number(num1)
        if a is None:
            return invalid_operand(num1)
        b = parse_number(num2)
        if b is None:
            return invalid_operand(num2)

        op = lookup_operation(operation)
        if op is None:
            return unknown_operation(operation)

        try:
            value = op.func(a, b)
        except ZeroDivisionError:
            return division_by_zero()
        return Success(operand_a=a, operand_b=b, symbol=op.display, value=value)

    def evaluate_and_render(
        self, num1: str, num2: str, operation: str
    ) -> tuple[CalculationResult, str]:
        result = self.evaluate(num1, num2, operation)
        rendered = render(result)
        logger.debug("calculate(%r, %r, %r) -> %s", num1, num2, operation, rendered)
        return result, rendered

    def calculate(self, num1: str, num2: str, operation: str) -> str:
        return self.evaluate_and_render(num1, num2, operation)[1]

    def menu_entries(self) -> list[tuple[str, str]]:
        """Return (forms, label) pairs such as ``("+ or add", "Addition")``."""
        return [
            (f"{op.symbol} or {op.name}", _OPERATION_LABELS[op.name])
            for op in OPERATIONS
        ]

    def show_menu(self, console: Console | None = None) -> None:
        console = console or Console()
        table = Table(title="SIMPLE CALCULATOR APP")
        table.add_column("Operation", style="cyan", no_wrap=True)
        table.add_column("Description")
        for forms, label in self.menu_entries():
            table.add_row(forms, label)
        console.print(table)
