"""Split raw dice notation into lexical tokens."""

from __future__ import annotations

from ..utils.logger import get_logger

logger = get_logger(__name__)

DIGITS = frozenset("0123456789")


def tokenize(expression: str) -> list[str]:
    """
    Split ``expression`` into number, operator and dice tokens.

    Operators always become single-character tokens. A ``d`` only starts a new
    token when the buffer already holds something other than digits, so an
    optional repetition count stays glued to its dice specifier. Whitespace
    separates tokens and is dropped. Tokenizing never fails; unknown characters
    are left in place for the classifier to reject.
    """
    tokens: list[str] = []
    buffer: list[str] = []
    split_before = False
    split_after = False

    for char in expression:
        is_space = char.isspace()
        if is_space:
            split_before = True

        if char in ("+", "-"):
            split_before = True
            split_after = True

        if char == "d" and any(existing not in DIGITS for existing in buffer):
            split_before = True

        if split_before:
            if buffer:
                tokens.append("".join(buffer))
            buffer = []
            split_before = False

        if is_space:
            continue

        buffer.append(char)

        if split_after:
            tokens.append("".join(buffer))
            buffer = []
            split_after = False

    if buffer:
        tokens.append("".join(buffer))

    logger.debug("Tokenized %r into %s", expression, tokens)
    return tokens


__all__ = ["tokenize"]
