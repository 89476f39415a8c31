"""Fold classified tokens into a single expression tree."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from .classifier import classify_token
from .errors import ExpressionStructureError
from .nodes import ArithmeticNode, DiceNode, Node, NumericNode
from .tokenizer import tokenize
from ..utils.logger import get_logger

logger = get_logger(__name__)


def build_tree(tokens: Iterable[str]) -> Optional[Node]:
    """
    Accumulate ``tokens`` strictly left to right into one tree.

    Every operator adopts the tree built so far as its ``left`` operand and
    waits for the next operand to fill ``right``. An empty token stream returns
    ``None``; a trailing operator leaves ``right`` unset. Both are rejected at
    evaluation time rather than here.
    """
    root: Optional[Node] = None

    for token in tokens:
        node = classify_token(token)

        if isinstance(node, ArithmeticNode):
            if root is None:
                raise ExpressionStructureError(
                    f"Expression cannot start with an operator ('{token}').", token=token
                )
            root = replace(node, left=root)
            continue

        if root is None:
            root = node
            continue

        if isinstance(root, ArithmeticNode) and root.right is None:
            root = replace(root, right=node)
            continue

        if isinstance(node, DiceNode):
            raise ExpressionStructureError(
                f"A dice token not at the start must be immediately preceded by an operator ('{token}').",
                token=token,
            )

        # No operator to attach a bare number through.
        logger.warning("Dropping operand '%s' that follows a complete expression", token)

    logger.debug("Built expression tree %r", root)
    return root


def parse(expression: str) -> Optional[Node]:
    """Tokenize ``expression`` and build its tree."""
    return build_tree(tokenize(expression))


__all__ = ["build_tree", "parse"]
