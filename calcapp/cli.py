"""Command-line front end: demonstration run and interactive prompt."""

import argparse
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import yaml
from rich.console import Console

from calcapp.calculator import Calculator
from calcapp.history import HistoryTrackingCalculator

log = logging.getLogger(__name__)

QUIT_WORDS = {"quit", "exit"}


@dataclass
class Case:
    a: str
    b: str
    op: str


DEFAULT_CASES: list[Case] = [
    Case("10", "5", "+"),
    Case("15.5", "7.3", "-"),
    Case("8", "6", "*"),
    Case("20", "4", "/"),
    Case("10", "0", "/"),          # division by zero
    Case("abc", "5", "+"),         # bad first operand
    Case("10", "xyz", "*"),        # bad second operand
    Case("5", "3", "%"),           # unknown operation
    Case("3.14", "2.5", "*"),
    Case("-15", "3", "/"),
    Case("100", "25", "divide"),   # name alias
    Case("1", "3", "/"),
    Case("999999", "888888", "+"),
    Case("0", "5", "*"),
    Case("  10  ", "  5  ", "+"),  # surrounding whitespace
]

HISTORY_DEMO_CASES: list[Case] = [
    Case("10", "5", "+"),
    Case("20", "4", "/"),
    Case("7", "8", "*"),
    Case("100", "35", "-"),
]


def load_cases(path: str | Path) -> list[Case]:
    """Read demonstration cases from a YAML file.

    The file must have a top-level 'cases' key holding a list of mappings,
    each with 'a', 'b' and 'op'. Scalars are loaded without YAML type
    resolution, so ``1_000``, ``010`` and ``~`` reach the calculator exactly
    as written.

    Raises ValueError if 'cases' is missing or empty, an entry lacks a key,
    or a value is not a scalar.
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.load(f, Loader=yaml.BaseLoader) or {}

    raw_cases = data.get("cases") if isinstance(data, dict) else None
    if not raw_cases or not isinstance(raw_cases, list):
        raise ValueError(f"No 'cases' key found in {path}")

    cases = []
    for idx, entry in enumerate(raw_cases, start=1):
        if not isinstance(entry, dict):
            raise ValueError(f"Case {idx} in {path} is not a mapping")
        missing = [key for key in ("a", "b", "op") if key not in entry]
        if missing:
            raise ValueError(f"Case {idx} in {path} is missing {', '.join(missing)}")
        values = [entry[key] for key in ("a", "b", "op")]
        if not all(isinstance(value, str) for value in values):
            raise ValueError(f"Case {idx} in {path} has a non-scalar value")
        cases.append(Case(*values))

    log.info("Loaded %d cases from %s", len(cases), path)
    return cases


# ---------------------------------------------------------------------------
# Demonstrations
# ---------------------------------------------------------------------------


def demonstrate_calculator(console: Console, cases: list[Case] | None = None) -> None:
    console.rule("[bold cyan]CALCULATOR DEMONSTRATION")
    calc = Calculator()
    calc.show_menu(console)

    for idx, case in enumerate(cases or DEFAULT_CASES, start=1):
        console.print(f"Test {idx}: {case.op.upper()}", markup=False, highlight=False)
        console.print(calc.calculate(case.a, case.b, case.op), markup=False, highlight=False)
        console.print()


def demonstrate_history(console: Console) -> HistoryTrackingCalculator:
    console.rule("[bold cyan]ENHANCED CALCULATOR WITH HISTORY")
    calc = HistoryTrackingCalculator()
    for case in HISTORY_DEMO_CASES:
        calc.calculate_and_save_history(case.a, case.b, case.op)

    calc.show_history(console)
    console.print(f"Total calculations in history: {calc.get_history_size()}", highlight=False)
    return calc


# ---------------------------------------------------------------------------
# Interactive prompt
# ---------------------------------------------------------------------------


def _is_quit(text: str) -> bool:
    return text.lower() in QUIT_WORDS


def run_interactive(
    console: Console,
    read: Callable[[str], str] | None = None,
    history: HistoryTrackingCalculator | None = None,
) -> None:
    """Prompt for first number, operation, second number until quit or EOF.

    When ``history`` is given, calculations go through it and the recorded
    history is shown on exit.
    """
    read = read or console.input
    calc = history.delegate if history is not None else Calculator()
    calc.show_menu(console)
    console.print("\nEnter 'quit' or 'exit' at any time to stop\n")

    prompts = (
        "Enter first number: ",
        "Enter operation (+, -, *, /): ",
        "Enter second number: ",
    )
    while True:
        answers = []
        try:
            for prompt in prompts:
                answer = read(prompt).strip()
                if _is_quit(answer):
                    break
                answers.append(answer)
        except EOFError:
            break
        if len(answers) < len(prompts):
            break

        n1, op, n2 = answers
        if history is not None:
            result = history.calculate_and_save_history(n1, n2, op)
        else:
            result = calc.calculate(n1, n2, op)
        console.print(f"\n{result}\n", markup=False, highlight=False)
        console.print("-" * 40)

    if history is not None:
        history.show_history(console)
    console.print("Thank you for using the calculator!")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Two-operand calculator with an optional result history"
    )
    parser.add_argument(
        "--cases",
        default=None,
        help="YAML file of demonstration cases (default: built-in table)",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start the interactive prompt after the demonstration",
    )
    parser.add_argument(
        "--no-demo",
        action="store_true",
        help="Skip the demonstration run",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Record interactive results and show them on exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(
    argv: list[str] | None = None,
    console: Console | None = None,
    read: Callable[[str], str] | None = None,
) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    console = console or Console()

    cases = None
    if args.cases:
        try:
            cases = load_cases(args.cases)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)

    console.rule("[bold]SIMPLE CALCULATOR APP")

    if not args.no_demo:
        log.info("Running demonstration")
        demonstrate_calculator(console, cases)
        demonstrate_history(console)

    if args.interactive:
        log.info("Starting interactive calculator")
        history = HistoryTrackingCalculator() if args.history else None
        run_interactive(console, read=read, history=history)

    console.print("\n=== Calculator session complete ===")


if __name__ == "__main__":
    main()
