"""Error types raised while parsing and evaluating dice notation."""

from __future__ import annotations

from typing import Optional


class DiceError(Exception):
    """Base class for every failure raised by the dice engine."""


class DiceParseError(DiceError, ValueError):
    """The expression text could not be turned into a tree."""

    def __init__(self, message: str, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.token = token


class TokenClassificationError(DiceParseError):
    """A token matched none of the numeric, operator or dice forms."""

    def __init__(self, message: str, token: Optional[str] = None, reason: str = "") -> None:
        super().__init__(message, token)
        self.reason = reason


class ExpressionStructureError(DiceParseError):
    """Tokens are individually valid but arranged in an unsupported order."""


class DiceLimitError(DiceError, ValueError):
    """The expression asks for more dice than the caller allows."""


class IncompleteExpressionError(DiceError, RuntimeError):
    """An empty tree or an operator with a missing operand reached evaluation."""


__all__ = [
    "DiceError",
    "DiceParseError",
    "TokenClassificationError",
    "ExpressionStructureError",
    "DiceLimitError",
    "IncompleteExpressionError",
]
