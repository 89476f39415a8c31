"""Utility helpers for formatting roll replies."""

from __future__ import annotations

from textwrap import dedent

from ..engine.errors import DiceError
from ..engine.nodes import RollResult


def format_roll_block(expression: str, result: RollResult) -> str:
    """Return the canonical roll block shown to players."""
    return dedent(
        f"""\
        🎲 ROLL: {expression.strip()}
        Details: {result.details}
        Total: {result.value}
        """
    ).strip()


def format_roll_error(expression: str, error: DiceError) -> str:
    return f"⚠️ Could not roll {expression.strip()!r}: {error}"


__all__ = ["format_roll_block", "format_roll_error"]
