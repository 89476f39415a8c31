"""Turn single tokens into expression tree nodes."""

from __future__ import annotations

import re
from typing import NoReturn

from .errors import TokenClassificationError
from .nodes import OPERATORS, ArithmeticNode, DiceNode, Node, NumericNode

NUMERIC_PATTERN = re.compile(r"[+-]?[0-9]+")
DIGIT_RUN_PATTERN = re.compile(r"[0-9]+")


def classify_numeric(token: str) -> NumericNode:
    if not NUMERIC_PATTERN.fullmatch(token):
        raise TokenClassificationError(
            f"'{token}' is not a valid integer.", token=token, reason="not an integer"
        )
    return NumericNode(value=_to_int(token, token, "integer literal"))


def classify_arithmetic(token: str) -> ArithmeticNode:
    if token not in OPERATORS:
        raise TokenClassificationError(
            f"'{token}' is not a valid arithmetic operation.",
            token=token,
            reason="not an operator",
        )
    return ArithmeticNode(operator=token)


def classify_dice(token: str) -> DiceNode:
    """
    Parse ``[repetitions]d<faces>[kh<n>|kl<n>]``.

    A missing repetition count is stored as ``0``. ``kh<n>`` stores ``+n`` and
    ``kl<n>`` stores ``-n`` in ``keep``.
    """
    d_position = -1
    for index, char in enumerate(token):
        if char == "d":
            d_position = index
            break
        if char not in "0123456789":
            _dice_error(token, "dice token must start with digit or 'd'")

    if d_position == -1:
        _dice_error(token, "dice token must contain 'd'")

    repetitions = _to_int(token, token[:d_position], "repetition count") if d_position > 0 else 0

    faces_match = DIGIT_RUN_PATTERN.match(token, d_position + 1)
    if not faces_match:
        _dice_error(token, "dice token must specify face count")
    faces = _to_int(token, faces_match.group(0), "face count")
    if faces < 1:
        _dice_error(token, "dice token must specify at least one face")

    suffix = token[faces_match.end():]
    if not suffix:
        return DiceNode(repetitions=repetitions, faces=faces)

    if suffix[0] != "k":
        _dice_error(token, f"unexpected '{suffix}' after face count")

    # at least k(h|l)<digit>
    if len(suffix) < 3:
        _dice_error(token, "could not evaluate kh/kl suffix")

    selector = suffix[1]
    if selector not in ("h", "l"):
        _dice_error(token, "keep suffix must be 'kh' or 'kl'")

    count_text = suffix[2:]
    if not DIGIT_RUN_PATTERN.fullmatch(count_text):
        _dice_error(token, "the kh/kl parameter must be numeric")

    count = _to_int(token, count_text, "kh/kl parameter")
    keep = count if selector == "h" else -count
    return DiceNode(repetitions=repetitions, faces=faces, keep=keep)


def classify_token(token: str) -> Node:
    """Return the first of numeric, operator or dice that ``token`` parses as."""
    if NUMERIC_PATTERN.fullmatch(token):
        return classify_numeric(token)
    if token in OPERATORS:
        return classify_arithmetic(token)

    try:
        return classify_dice(token)
    except TokenClassificationError as exc:
        raise TokenClassificationError(
            f"Unknown token '{token}': {exc.reason}.", token=token, reason=exc.reason
        ) from exc


def _to_int(token: str, digits: str, label: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        reason = f"{label} is too large"
        raise TokenClassificationError(
            f"Invalid token '{token[:20]}...': {reason}.", token=token, reason=reason
        ) from exc


def _dice_error(token: str, reason: str) -> NoReturn:
    raise TokenClassificationError(f"Invalid dice token '{token}': {reason}.", token=token, reason=reason)


__all__ = [
    "classify_arithmetic",
    "classify_dice",
    "classify_numeric",
    "classify_token",
]
