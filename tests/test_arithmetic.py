import pytest

from library.loghorizon.arithmetic import evaluate, parse
from library.loghorizon.exceptions import ExpressionError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+1", 1),
        ("-2", -2),
        ("1+2*3", 7),
        ("(1+2)*3", 9),
        ("+3-1-1", 1),
        ("7/2", 3),
        ("-7/2", -4),
        ("--1", 1),
    ],
)
def test_parse(text, expected):
    assert parse(text) == expected


@pytest.mark.parametrize("text", ["", "+", "1+", "(1", "1)", "2/0", "a"])
def test_parse_invalid(text):
    with pytest.raises(ExpressionError):
        parse(text)


def test_evaluate_defaults():
    assert evaluate(None) == 0
    assert evaluate("") == 0
    assert evaluate("1-") == 0
    assert evaluate("1-", default=5) == 5
    assert evaluate("+10-3") == 7
