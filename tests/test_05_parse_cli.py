"""Tests of the text input boundary and the command line front end."""
import io
import sys

import pytest

import exactgauss as eg
from exactgauss import InvalidDimensions, MalformedValue, Rational, read_system
from exactgauss.cli import main, prompt_system

SYSTEM = """\
# X0 + X1 = 3, X0 - X1 = 1
2 2
1  1 3
1 -1 1
"""


def test_parse_value():
    assert eg.parse_value("-2/4") == Rational(-1, 2)
    with pytest.raises(MalformedValue):
        eg.parse_value("1/0")


def test_parse_dimensions():
    assert eg.parse_dimensions("2", "3") == (2, 3)
    assert eg.parse_dimensions(2, 2) == (2, 2)
    with pytest.raises(InvalidDimensions):
        eg.parse_dimensions("3", "2")
    with pytest.raises(MalformedValue):
        eg.parse_dimensions("two", "2")


def test_read_system():
    matrix = read_system(SYSTEM)
    assert matrix.shape == (2, 3)
    assert matrix[0] == [1, 1, 3]
    assert matrix[1] == [1, -1, 1]


def test_read_system_fractions_blank_lines_and_comments():
    matrix = read_system(["1 2", "", "2 / 4  1/3  # half X0", "-1/2 2/3"])
    assert matrix[0] == [Rational(1, 2), Rational(1, 3)]
    assert matrix[1] == [Rational(-1, 2), Rational(2, 3)]


def test_read_system_checks_dimensions_first():
    # the equation lines are garbage, the header is reported first
    with pytest.raises(InvalidDimensions):
        read_system("3 2\nabc\ndef\n")


def test_read_system_errors():
    with pytest.raises(MalformedValue, match="line 3"):
        read_system("2 2\n1 1 3\n1 -1\n")
    with pytest.raises(MalformedValue, match="line 2"):
        read_system("2 2\n1 x 3\n1 -1 1\n")
    with pytest.raises(MalformedValue, match="denominator"):
        read_system("1 1\n1/0 3\n")
    with pytest.raises(MalformedValue, match="expected 2"):
        read_system("2 2\n1 1 3\n")
    with pytest.raises(MalformedValue):
        read_system("2\n1 1 3\n")
    with pytest.raises(MalformedValue):
        read_system("")


def test_format():
    matrix = read_system("2 2\n2 0 1\n3 1 2\n")
    sol = eg.solve_system(matrix)
    assert eg.format_matrix(sol.matrix) == "1 1/3 2/3\n0 1 1/2"
    assert eg.format_solution(sol.values) == "1/2 1/2"
    assert eg.format_solution(sol.values, as_float=True) == "1/2 (~0.5) 1/2 (~0.5)"
    assert eg.format_row([Rational(-3), Rational(5, 7)]) == "-3 5/7"


def test_cli_file(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text(SYSTEM)
    out, err = io.StringIO(), io.StringIO()
    assert main(["-i", str(path)], out=out, err=err) == 0
    assert out.getvalue().splitlines() == ["1 1 3", "0 1 1", "2 1"]
    assert err.getvalue() == ""


def test_cli_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3 3\n1 0 0 1\n0 2 0 1\n0 0 3 1\n"))
    out = io.StringIO()
    assert main(["-i", "-", "--float"], out=out, err=io.StringIO()) == 0
    assert out.getvalue().splitlines()[-1] == "1 (~1) 1/2 (~0.5) 1/3 (~0.333333)"


def test_cli_no_sort(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text("2 2\n1 -1 1\n1 1 3\n")
    out = io.StringIO()
    assert main(["-i", str(path), "--no-sort"], out=out, err=io.StringIO()) == 0
    assert out.getvalue().splitlines() == ["1 -1 1", "0 1 1", "2 1"]


def test_cli_interactive():
    answers = iter(["2", "2", "1", "1", "3", "1", "-1", "1"])
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(answers)

    out = io.StringIO()
    assert main([], read=read, out=out, err=io.StringIO()) == 0
    assert prompts[:2] == [eg.PROMPT_NUM_VARS, eg.PROMPT_NUM_EQS]
    assert prompts[2:5] == ["   X0: ", "   X1: ", "   eq0 = "]
    lines = out.getvalue().splitlines()
    assert lines[0] == eg.PROMPT_COEFFS
    assert lines[-3:] == ["1 1 3", "0 1 1", "2 1"]


def test_prompt_rejects_dimensions_before_coefficients():
    answers = iter(["3", "2"])
    with pytest.raises(InvalidDimensions):
        prompt_system(lambda prompt: next(answers), io.StringIO())


def test_cli_reports_errors(tmp_path):
    err = io.StringIO()
    answers = iter(["3", "2"])
    assert main([], read=lambda prompt: next(answers), out=io.StringIO(), err=err) == 1
    assert err.getvalue().startswith("error: num_eqs must be >= num_vars")

    path = tmp_path / "bad.txt"
    path.write_text("1 1\n1/0 2\n")
    err = io.StringIO()
    assert main(["-i", str(path)], out=io.StringIO(), err=err) == 1
    assert "denominator cannot be 0" in err.getvalue()

    err = io.StringIO()
    assert main(["-i", str(tmp_path / "missing.txt")], out=io.StringIO(), err=err) == 1
    assert err.getvalue().startswith("error: ")


def test_cli_end_of_input():
    def read(prompt):
        raise EOFError

    err = io.StringIO()
    assert main([], read=read, out=io.StringIO(), err=err) == 1
    assert err.getvalue().startswith("error: input ended")


def test_cli_logs_to_current_stream(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text(SYSTEM)
    first, second = io.StringIO(), io.StringIO()
    assert main(["-i", str(path)], out=io.StringIO(), err=first) == 0
    assert main(["-i", str(path), "-v"], out=io.StringIO(), err=second) == 0
    assert "INFO: Solving system of 2 equations in 2 variables." in second.getvalue()
    assert "Solving" not in first.getvalue()
