"""Operation alias table.

Each of the four operations can be selected by its symbol or by a name
alias. Lookup is case-insensitive. ``symbol`` is the token typed by users;
``display`` is what appears in rendered results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from calcapp.engine import add, divide, multiply, subtract


@dataclass(frozen=True)
class Operation:
    name: str
    symbol: str
    display: str
    aliases: tuple[str, ...]
    func: Callable[[float, float], float]


OPERATIONS: tuple[Operation, ...] = (
    Operation("add", "+", "+", ("+", "add", "addition"), add),
    Operation("subtract", "-", "-", ("-", "subtract", "subtraction"), subtract),
    Operation("multiply", "*", "×", ("*", "multiply", "multiplication"), multiply),
    Operation("divide", "/", "÷", ("/", "divide", "division"), divide),
)

_BY_ALIAS: dict[str, Operation] = {
    alias: op for op in OPERATIONS for alias in op.aliases
}


def lookup_operation(token: str) -> Operation | None:
    """Return the operation for ``token``, or None if it is not an alias."""
    return _BY_ALIAS.get(token.lower())
