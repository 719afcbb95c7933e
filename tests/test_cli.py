"""Tests for the command-line front end."""
import io

import pytest
from rich.console import Console

from calcapp.cli import (
    DEFAULT_CASES,
    Case,
    demonstrate_calculator,
    demonstrate_history,
    load_cases,
    main,
    run_interactive,
)
from calcapp.history import HistoryTrackingCalculator


def make_console():
    buf = io.StringIO()
    return Console(file=buf, width=120), buf


def make_reader(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


# --- load_cases ---

def test_load_cases(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text(
        "cases:\n"
        "  - {a: 10, b: 5, op: '+'}\n"
        "  - {a: abc, b: '5', op: add}\n"
    )
    assert load_cases(plan) == [Case("10", "5", "+"), Case("abc", "5", "add")]


def test_load_cases_missing_key_raises(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text("cases:\n  - {a: 10, op: '+'}\n")
    with pytest.raises(ValueError, match="missing b"):
        load_cases(plan)


def test_load_cases_without_cases_raises(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text("other: 1\n")
    with pytest.raises(ValueError, match="No 'cases' key"):
        load_cases(plan)


def test_load_cases_empty_file_raises(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text("")
    with pytest.raises(ValueError):
        load_cases(plan)


# --- demonstrations ---

def test_default_cases_table():
    assert len(DEFAULT_CASES) == 15
    assert DEFAULT_CASES[0] == Case("10", "5", "+")


def test_demonstrate_calculator_output():
    console, buf = make_console()
    demonstrate_calculator(console)
    out = buf.getvalue()
    assert "Test 1: +" in out
    assert "Result: 10.0 + 5.0 = 15.0" in out
    assert "Error: Division by zero is not allowed!" in out
    assert "Error: 'xyz' is not a valid number" in out
    assert "Test 11: DIVIDE" in out
    assert "Test 15: +" in out


def test_demonstrate_calculator_with_custom_cases():
    console, buf = make_console()
    demonstrate_calculator(console, [Case("2", "3", "multiply")])
    out = buf.getvalue()
    assert "Test 1: MULTIPLY" in out
    assert "Result: 2.0 × 3.0 = 6.0" in out
    assert "Test 2" not in out


def test_demonstrate_history():
    console, buf = make_console()
    calc = demonstrate_history(console)
    assert calc.get_history_size() == 4
    out = buf.getvalue()
    assert "4. Result: 100.0 - 35.0 = 65.0" in out
    assert "Total calculations in history: 4" in out


# --- interactive ---

def test_interactive_calculates_until_quit():
    console, buf = make_console()
    run_interactive(console, read=make_reader(["10", "+", "5", "quit"]))
    out = buf.getvalue()
    assert "Result: 10.0 + 5.0 = 15.0" in out
    assert "Thank you for using the calculator!" in out


def test_interactive_quit_at_operation_prompt():
    console, buf = make_console()
    run_interactive(console, read=make_reader(["10", "EXIT", "5"]))
    out = buf.getvalue()
    assert "Result:" not in out
    assert "Thank you for using the calculator!" in out


def test_interactive_stops_on_end_of_input():
    console, buf = make_console()
    run_interactive(console, read=make_reader(["10", "+"]))
    out = buf.getvalue()
    assert "Result:" not in out
    assert "Thank you for using the calculator!" in out


def test_interactive_trims_answers_and_reports_errors():
    console, buf = make_console()
    run_interactive(console, read=make_reader(["  8 ", " / ", " 0 ", "Quit"]))
    assert "Error: Division by zero is not allowed!" in buf.getvalue()


def test_interactive_with_history():
    console, buf = make_console()
    history = HistoryTrackingCalculator()
    run_interactive(
        console,
        read=make_reader(["10", "+", "5", "1", "/", "0", "quit"]),
        history=history,
    )
    assert history.get_history_size() == 1
    assert "1. Result: 10.0 + 5.0 = 15.0" in buf.getvalue()


# --- main ---

def test_main_runs_demo():
    console, buf = make_console()
    main([], console=console)
    out = buf.getvalue()
    assert "Test 15: +" in out
    assert "Total calculations in history: 4" in out
    assert "=== Calculator session complete ===" in out


def test_main_no_demo():
    console, buf = make_console()
    main(["--no-demo"], console=console)
    out = buf.getvalue()
    assert "Test 1" not in out
    assert "=== Calculator session complete ===" in out


def test_main_with_cases_file(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text("cases:\n  - {a: 9, b: 3, op: division}\n")
    console, buf = make_console()
    main(["--cases", str(plan)], console=console)
    out = buf.getvalue()
    assert "Test 1: DIVISION" in out
    assert "Result: 9.0 ÷ 3.0 = 3.0" in out
    assert "Test 2:" not in out


def test_main_bad_cases_file_exits_1(tmp_path, capsys):
    console, _ = make_console()
    with pytest.raises(SystemExit) as exc_info:
        main(["--cases", str(tmp_path / "missing.yaml")], console=console)
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_load_cases_keeps_scalars_as_written(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text("cases:\n  - {a: 1_000, b: 010, op: '+'}\n  - {a: ~, b: 5, op: yes}\n")
    assert load_cases(plan) == [Case("1_000", "010", "+"), Case("~", "5", "yes")]


def test_yaml_cases_reject_what_direct_calls_reject(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text("cases:\n  - {a: 1_000, b: 8, op: '+'}\n")
    console, buf = make_console()
    demonstrate_calculator(console, load_cases(plan))
    assert "Error: '1_000' is not a valid number" in buf.getvalue()


def test_load_cases_non_scalar_value_raises(tmp_path):
    plan = tmp_path / "cases.yaml"
    plan.write_text("cases:\n  - {a: [1, 2], b: 5, op: '+'}\n")
    with pytest.raises(ValueError, match="non-scalar"):
        load_cases(plan)


def test_main_interactive_with_history():
    console, buf = make_console()
    main(
        ["--no-demo", "--interactive", "--history"],
        console=console,
        read=make_reader(["7", "*", "8", "abc", "+", "1", "exit"]),
    )
    out = buf.getvalue()
    assert "Test 1" not in out
    assert "Error: 'abc' is not a valid number" in out
    assert "CALCULATION HISTORY" in out
    assert "1. Result: 7.0 × 8.0 = 56.0" in out
    assert "2. Result" not in out
    assert "Thank you for using the calculator!" in out
