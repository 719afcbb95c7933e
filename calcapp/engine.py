"""Arithmetic primitives used by the calculator."""


def add(a: float, b: float) -> float:
    """Add two numbers."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Subtract b from a."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Multiply two numbers."""
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b.

    The divisor is compared to exactly 0.0 before dividing; there is no
    tolerance, so 1e-300 is a valid divisor.
    """
    if b == 0.0:
        raise ZeroDivisionError("division by zero")
    return a / b
