"""Dice notation engine exports."""

from .builder import build_tree, parse
from .classifier import classify_arithmetic, classify_dice, classify_numeric, classify_token
from .errors import (
    DiceError,
    DiceLimitError,
    DiceParseError,
    ExpressionStructureError,
    IncompleteExpressionError,
    TokenClassificationError,
)
from .evaluator import RandomSource, count_dice, evaluate, evaluate_node, roll_dice, selection_window
from .nodes import ArithmeticNode, DiceNode, Node, NumericNode, RollResult
from .tokenizer import tokenize

__all__ = [
    "evaluate",
    "evaluate_node",
    "count_dice",
    "roll_dice",
    "selection_window",
    "RandomSource",
    "parse",
    "build_tree",
    "tokenize",
    "classify_token",
    "classify_numeric",
    "classify_arithmetic",
    "classify_dice",
    "Node",
    "NumericNode",
    "ArithmeticNode",
    "DiceNode",
    "RollResult",
    "DiceError",
    "DiceParseError",
    "DiceLimitError",
    "TokenClassificationError",
    "ExpressionStructureError",
    "IncompleteExpressionError",
]
