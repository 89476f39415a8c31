"""Chat bot bridges."""

from .telegram_bot import TelegramBot, roll_reply

__all__ = ["TelegramBot", "roll_reply"]
