from __future__ import annotations

from src.bots.telegram_bot import USAGE, roll_reply


class _FixedRng:
    """Deterministic RNG returning preset d20 rolls."""

    def __init__(self) -> None:
        self.values = [5, 12]

    def randint(self, _a: int, _b: int) -> int:
        return self.values.pop(0)


def test_roll_reply_joins_arguments() -> None:
    reply = roll_reply(["2d20kh1", "+", "3"], rng=_FixedRng())
    assert "ROLL: 2d20kh1 + 3" in reply
    assert "Details: (3)+(2d20kh1(5,12)=>(12))" in reply
    assert reply.endswith("Total: 15")


def test_roll_reply_without_arguments_shows_usage() -> None:
    assert roll_reply([]) == USAGE


def test_roll_reply_rejects_long_expressions() -> None:
    reply = roll_reply(["1d6+1d6+1d6"], max_length=5)
    assert reply.startswith("Expression is too long")


def test_roll_reply_reports_parse_errors() -> None:
    reply = roll_reply(["+5"])
    assert reply.startswith("⚠️ Could not roll '+5'")
    assert "cannot start with an operator" in reply


def test_roll_reply_rejects_too_many_dice() -> None:
    reply = roll_reply(["3000000d6"], max_dice=100)
    assert "more than the limit of 100" in reply
    assert len(reply) < 200
