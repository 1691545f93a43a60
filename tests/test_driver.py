"""Tests for end-to-end evaluation."""

import io

import pytest

from core import (
    ArithmeticOverflow, DivisionByZero, DriverState, EvaluationDriver,
    NotEnoughElements, ParseError, StackUnderflow, UnbalancedGroup,
    UnsupportedConstruct, evaluate
)


@pytest.mark.parametrize("expr,expected", [
    ("1 + 1", 2),
    ("6 - 3", 3),
    ("2 * 3", 6),
    ("4 / 2", 2),
])
def test_single_op(expr, expected):
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("1 + 1 - 1 + 1 - 1 + 1 - 1 + 1 - 1 + 1 - 1 + 1 - 1 + 1 - 1 + 1 - 1", 1),
    ("2 * 3 / 6 * 2 * 3 / 6 * 2 * 3 / 1", 6),
    ("10 - 4 - 3", 3),
    ("100 / 10 / 5", 2),
])
def test_multi_op_with_same_prec(expr, expected):
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("2 + 2 * 2", 6),
    ("4 * 3 + 2", 14),
    ("8 + 4 / 2", 10),
    ("3 - 2 * 4", -5),
    ("3 * 2 - 4", 2),
    ("1 + 2 * 3 - 8 / 4", 5),
])
def test_ops_with_diff_prec(expr, expected):
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("7 / 2", 3),
    ("( 1 - 8 ) / 2", -3),
])
def test_division_truncates_toward_zero(expr, expected):
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("42", 42),
    ("12 + 30", 42),
    ("1 + 1\n", 2),
])
def test_multi_digit_and_trailing_newline(expr, expected):
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("( 2 + 3 ) * 4", 20),
    ("2 * ( 3 + 4 )", 14),
    ("10 - ( 4 - 3 )", 9),
    ("( ( 1 + 2 ) * ( 3 + 4 ) )", 21),
    ("( 5 )", 5),
])
def test_grouping(expr, expected):
    assert evaluate(expr) == expected


def test_reevaluation_is_identical():
    expr = "3 - 2 * 4 + 9 / 3"
    assert evaluate(expr) == evaluate(expr) == -2


def test_stream_sources():
    assert evaluate(io.BytesIO(b"2 + 2 * 2")) == 6
    assert evaluate(io.StringIO("3 * 2 - 4")) == 2
    assert evaluate(["8", "+", "4", "/", "2"]) == 10


@pytest.mark.parametrize("expr,error", [
    ("", StackUnderflow),
    ("1 2", StackUnderflow),
    ("( )", StackUnderflow),
    ("1 +", NotEnoughElements),
    ("+", NotEnoughElements),
    ("+ 1", NotEnoughElements),
    ("1 + a", ParseError),
    ("1  + 1", ParseError),
    ("-1 + 1", ParseError),
    ("1" * 5000 + " + 1", ParseError),
    ("7 / 0", DivisionByZero),
    ("2147483647 + 1", ArithmeticOverflow),
    ("( 1 + 2", UnbalancedGroup),
    ("1 + 2 )", UnbalancedGroup),
])
def test_failures(expr, error):
    with pytest.raises(error):
        evaluate(expr)


@pytest.mark.parametrize("expr", ["2 * ( 3 )", "1 + 2 )"])
def test_grouping_disabled(expr):
    with pytest.raises(UnsupportedConstruct):
        evaluate(expr, grouping=False)


def test_driver_states():
    driver = EvaluationDriver()
    assert driver.state == DriverState.SCANNING
    for text in ["2", "+", "3"]:
        driver.feed(text)
    assert driver.finish() == 5
    assert driver.state == DriverState.DONE
    with pytest.raises(RuntimeError):
        driver.feed("1")
    with pytest.raises(RuntimeError):
        driver.finish()


def test_failed_drain_stays_draining():
    driver = EvaluationDriver()
    driver.feed("1")
    driver.feed("+")
    with pytest.raises(NotEnoughElements):
        driver.finish()
    assert driver.state == DriverState.DRAINING
