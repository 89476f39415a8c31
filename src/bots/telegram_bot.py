"""Telegram bot bridge for the dice roller."""

from __future__ import annotations

from typing import Optional, Sequence

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from ..config import Settings, get_settings
from ..engine import DiceError, RandomSource, evaluate
from ..utils.formatting import format_roll_block, format_roll_error
from ..utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

USAGE = "Usage: /roll <expression>, for example /roll 2d20kh1+5"


class TelegramBot:
    """High-level coordinator for Telegram interactions."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        if not self.settings.has_telegram_credentials():
            raise RuntimeError("TELEGRAM_BOT_TOKEN is missing. Set it in your .env file.")
        self.rng = self.settings.make_rng()

    def build_application(self) -> Application:
        application = Application.builder().token(self.settings.telegram_bot_token).build()

        application.add_handler(CommandHandler("start", self.handle_start))
        application.add_handler(CommandHandler("roll", self.handle_roll))
        application.add_error_handler(self.handle_error)
        return application

    async def handle_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if not update.message:
            return
        await update.message.reply_text(f"The dice are ready. {USAGE}")

    async def handle_roll(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if not update.message:
            return
        reply = roll_reply(
            context.args or [],
            rng=self.rng,
            max_length=self.settings.max_expression_length,
            max_dice=self.settings.max_dice,
        )
        await update.message.reply_text(reply)

    async def handle_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        if context.error:
            logger.error("Telegram error: %s", context.error)


def roll_reply(
    args: Sequence[str],
    *,
    rng: Optional[RandomSource] = None,
    max_length: int = 200,
    max_dice: Optional[int] = 100,
) -> str:
    """Evaluate the command arguments as one expression and render the reply text."""
    expression = " ".join(args).strip()
    if not expression:
        return USAGE
    if len(expression) > max_length:
        return f"Expression is too long ({len(expression)} characters, limit {max_length})."

    try:
        result = evaluate(expression, rng=rng, max_dice=max_dice)
    except DiceError as exc:
        logger.warning("Rejected roll %r: %s", expression, exc)
        return format_roll_error(expression, exc)
    return format_roll_block(expression, result)


def main() -> None:
    bot = TelegramBot()
    setup_logging(bot.settings.log_level)
    application = bot.build_application()
    application.run_polling()


if __name__ == "__main__":
    main()
