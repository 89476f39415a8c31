"""Expression tree nodes and the result they evaluate to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

OPERATORS = ("+", "-")


@dataclass(frozen=True)
class NumericNode:
    value: int


@dataclass(frozen=True)
class ArithmeticNode:
    """Binary ``+``/``-`` node; ``right`` stays unset until the next operand arrives."""

    operator: str = "+"
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_complete(self) -> bool:
        return self.left is not None and self.right is not None


@dataclass(frozen=True)
class DiceNode:
    repetitions: int
    faces: int
    keep: int = 0  # +n keep-high suffix, -n keep-low suffix, 0 no selection

    @property
    def keep_suffix(self) -> str:
        if self.keep > 0:
            return f"kh{self.keep}"
        if self.keep < 0:
            return f"kl{-self.keep}"
        return ""


Node = Union[NumericNode, ArithmeticNode, DiceNode]


@dataclass(frozen=True)
class RollResult:
    value: int
    details: str


__all__ = [
    "OPERATORS",
    "Node",
    "NumericNode",
    "ArithmeticNode",
    "DiceNode",
    "RollResult",
]
