"""Calculator wrapper that keeps a log of successful results."""

from __future__ import annotations

import logging

from rich.console import Console

from calcapp.calculator import Calculator

logger = logging.getLogger(__name__)


class HistoryTrackingCalculator:
    """Delegates to a Calculator and records each successful rendered result.

    Failed calculations are returned to the caller but never recorded.
    """

    def __init__(self, delegate: Calculator | None = None):
        self.delegate = delegate or Calculator()
        self._history: list[str] = []

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def calculate_and_save_history(self, num1: str, num2: str, operation: str) -> str:
        result, rendered = self.delegate.evaluate_and_render(num1, num2, operation)
        if result.ok:
            self._history.append(rendered)
            logger.debug("Recorded history entry %d: %s", len(self._history), rendered)
        else:
            logger.debug("Not recording failed calculation: %s", rendered)
        return rendered

    def history_lines(self) -> list[str]:
        return [f"{idx}. {entry}" for idx, entry in enumerate(self._history, start=1)]

    def show_history(self, console: Console | None = None) -> None:
        console = console or Console()
        if not self._history:
            console.print("No calculation history available.")
            return
        console.rule("CALCULATION HISTORY")
        for line in self.history_lines():
            console.print(line, markup=False, highlight=False)
        console.rule()

    def clear_history(self) -> None:
        self._history.clear()
        logger.debug("History cleared")

    def get_history_size(self) -> int:
        return len(self._history)
