"""
Telegram channel: bot, dispatcher and polling.
"""

import logging
from typing import Optional

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import BotCommand

from salesbot.bot.handlers import register_handlers
from salesbot.config import settings
from salesbot.core.facade import CommerceFacade

logger = logging.getLogger(__name__)


# Shown in the Telegram command menu
BOT_COMMANDS = [
    BotCommand(command="start", description="Empezar"),
    BotCommand(command="help", description="Ayuda"),
    BotCommand(command="clear", description="Empezar de nuevo"),
]


def create_bot(token: Optional[str] = None) -> Bot:
    """
    Raises:
        ValueError: If no token is configured
    """
    token = token or settings.telegram_bot_token
    if not token:
        raise ValueError("Telegram token not provided. Set TELEGRAM_BOT_TOKEN in .env file.")
    return Bot(token=token)


def create_dispatcher(facade: CommerceFacade) -> Dispatcher:
    """Dispatcher with all handlers; `facade` is injected into handler kwargs."""
    dp = Dispatcher(storage=MemoryStorage())
    register_handlers(dp)
    dp["facade"] = facade
    return dp


async def run_polling(facade: CommerceFacade, bot: Optional[Bot] = None) -> None:
    """Poll Telegram until cancelled."""
    bot = bot or create_bot()
    dp = create_dispatcher(facade)

    try:
        await bot.set_my_commands(BOT_COMMANDS)
        logger.info("Telegram bot is starting...")
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
            handle_signals=False,
        )
    finally:
        await bot.session.close()
