from __future__ import annotations

import pytest

from src.engine import (
    ArithmeticNode,
    DiceNode,
    NumericNode,
    TokenClassificationError,
    classify_dice,
    classify_numeric,
    classify_token,
)


def test_numeric_tokens() -> None:
    assert classify_token("20") == NumericNode(20)
    assert classify_token("-1") == NumericNode(-1)


def test_numeric_rejects_non_decimal_literals() -> None:
    with pytest.raises(TokenClassificationError):
        classify_numeric("1_000")
    with pytest.raises(TokenClassificationError):
        classify_numeric("2d6")


def test_operator_tokens() -> None:
    assert classify_token("+") == ArithmeticNode(operator="+")
    assert classify_token("-") == ArithmeticNode(operator="-")


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("d20", DiceNode(repetitions=0, faces=20)),
        ("1d20", DiceNode(repetitions=1, faces=20)),
        ("10d20", DiceNode(repetitions=10, faces=20)),
        ("2d20kh1", DiceNode(repetitions=2, faces=20, keep=1)),
        ("2d20kl1", DiceNode(repetitions=2, faces=20, keep=-1)),
        ("4d6kh12", DiceNode(repetitions=4, faces=6, keep=12)),
    ],
)
def test_dice_tokens(token: str, expected: DiceNode) -> None:
    assert classify_token(token) == expected


def test_missing_repetitions_are_stored_as_zero() -> None:
    assert classify_dice("d6").repetitions == 0


@pytest.mark.parametrize(
    ("token", "reason"),
    [
        ("d", "dice token must specify face count"),
        ("2dk", "dice token must specify face count"),
        ("2d0", "dice token must specify at least one face"),
        ("x2d20", "dice token must start with digit or 'd'"),
        ("2d20k", "could not evaluate kh/kl suffix"),
        ("2d20kh", "could not evaluate kh/kl suffix"),
        ("2d20kx1", "keep suffix must be 'kh' or 'kl'"),
        ("2d20kha", "the kh/kl parameter must be numeric"),
        ("2d20kh1x", "the kh/kl parameter must be numeric"),
        ("2d20x", "unexpected 'x' after face count"),
    ],
)
def test_malformed_dice_tokens(token: str, reason: str) -> None:
    with pytest.raises(TokenClassificationError) as excinfo:
        classify_token(token)
    assert excinfo.value.token == token
    assert excinfo.value.reason == reason
    assert token in str(excinfo.value)


def test_dice_without_d_is_rejected() -> None:
    with pytest.raises(TokenClassificationError) as excinfo:
        classify_dice("12")
    assert excinfo.value.reason == "dice token must contain 'd'"


def test_unknown_token_names_the_token() -> None:
    with pytest.raises(TokenClassificationError) as excinfo:
        classify_token("abc")
    assert str(excinfo.value).startswith("Unknown token 'abc'")


def test_classification_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        classify_token("?")


@pytest.mark.parametrize(
    ("token", "reason"),
    [
        ("1" * 5000, "integer literal is too large"),
        ("9" * 5000 + "d6", "repetition count is too large"),
        ("1d" + "9" * 5000, "face count is too large"),
        ("4d6kh" + "1" * 5000, "kh/kl parameter is too large"),
    ],
)
def test_oversized_digit_runs_are_classification_errors(token: str, reason: str) -> None:
    with pytest.raises(TokenClassificationError) as excinfo:
        classify_token(token)
    assert excinfo.value.reason == reason


def test_numeric_rejects_trailing_newline() -> None:
    with pytest.raises(TokenClassificationError):
        classify_numeric("5\n")
