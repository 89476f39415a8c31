"""Evaluate expression trees into a value and a player-facing trace."""

from __future__ import annotations

import random
from typing import Optional, Protocol

from .builder import parse
from .errors import DiceLimitError, IncompleteExpressionError
from .nodes import ArithmeticNode, DiceNode, Node, NumericNode, RollResult
from ..utils.logger import get_logger

logger = get_logger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


def evaluate(
    expression: str,
    rng: Optional[RandomSource] = None,
    *,
    max_dice: Optional[int] = None,
) -> RollResult:
    """
    Parse and evaluate ``expression`` in one call.

    When ``max_dice`` is given, expressions rolling more dice in total are
    rejected before any die is rolled.
    """
    tree = parse(expression)
    if tree is None:
        raise IncompleteExpressionError(f"Expression {expression!r} contains nothing to evaluate.")
    if max_dice is not None:
        total = count_dice(tree)
        if total > max_dice:
            raise DiceLimitError(
                f"Expression rolls {total} dice, more than the limit of {max_dice}."
            )
    result = evaluate_node(tree, rng=rng)
    logger.debug("Evaluated %r to %s via %s", expression, result.value, result.details)
    return result


def evaluate_node(node: Optional[Node], rng: Optional[RandomSource] = None) -> RollResult:
    rng = rng or random.Random()

    if node is None:
        raise IncompleteExpressionError("Cannot evaluate an empty expression tree.")
    if isinstance(node, NumericNode):
        return RollResult(value=node.value, details=str(node.value))
    if isinstance(node, ArithmeticNode):
        return _evaluate_arithmetic(node, rng)
    if isinstance(node, DiceNode):
        return roll_dice(node, rng)
    raise TypeError(f"Unsupported expression node: {node!r}")


def count_dice(node: Optional[Node]) -> int:
    """Total repetitions over every dice node in the tree."""
    if isinstance(node, DiceNode):
        return node.repetitions
    if isinstance(node, ArithmeticNode):
        return count_dice(node.left) + count_dice(node.right)
    return 0


def _evaluate_arithmetic(node: ArithmeticNode, rng: RandomSource) -> RollResult:
    if not node.is_complete:
        raise IncompleteExpressionError(
            f"Operator '{node.operator}' is missing an operand."
        )

    # The right-hand side is rendered first; callers depend on this layout.
    right = evaluate_node(node.right, rng)
    left = evaluate_node(node.left, rng)

    if node.operator == "-":
        return RollResult(
            value=right.value - left.value,
            details=f"({right.details})-({left.details})",
        )
    return RollResult(
        value=right.value + left.value,
        details=f"({right.details})+({left.details})",
    )


def selection_window(repetitions: int, keep: int) -> tuple[int, int]:
    """
    Return the ``[start, end)`` slice of the ascending rolls to sum.

    ``kh<n>`` drops the ``n`` lowest rolls and ``kl<n>`` drops the ``n``
    highest, so the suffix counts discarded dice from the opposite end. The
    window is clamped to the available rolls and never inverted.
    """
    start = 0
    end = repetitions
    if keep < 0:
        end += keep
    elif keep > 0:
        start += keep

    start = min(max(start, 0), repetitions)
    end = min(max(end, start), repetitions)
    return start, end


def roll_dice(node: DiceNode, rng: Optional[RandomSource] = None) -> RollResult:
    rng = rng or random.Random()

    rolls = [rng.randint(1, node.faces) for _ in range(node.repetitions)]
    raw_trace = "{}d{}{}({})".format(
        node.repetitions,
        node.faces,
        node.keep_suffix,
        ",".join(str(roll) for roll in rolls),
    )

    ordered = sorted(rolls)
    start, end = selection_window(node.repetitions, node.keep)
    selected = ordered[start:end]

    return RollResult(
        value=sum(selected),
        details=f"{raw_trace}=>({','.join(str(roll) for roll in selected)})",
    )


__all__ = [
    "RandomSource",
    "count_dice",
    "evaluate",
    "evaluate_node",
    "roll_dice",
    "selection_window",
]
