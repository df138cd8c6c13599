"""
Salesbot - Main entry point.
Runs the HTTP API and, when configured, the Telegram bot in one event loop.
"""

import asyncio
import logging

import uvicorn

from salesbot.api import create_app
from salesbot.bot.bot import run_polling
from salesbot.config import settings
from salesbot.core.facade import create_facade


# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _log_channel_failure(task: asyncio.Task) -> None:
    """Log the error that ended a channel task."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Channel '{task.get_name()}' stopped: {exc}", exc_info=exc)


async def main() -> None:
    """Main function to run the services."""
    logger.info("Starting Salesbot...")

    facade = await create_facade()
    logger.info(
        f"Catalog: {len(facade.catalog)} products, lead store: {facade.lead_store.kind}"
    )

    app = create_app(facade)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    )
    logger.info(f"HTTP server listening on {settings.port} - BASE_URL={settings.public_base_url}")

    tasks = [asyncio.create_task(server.serve())]
    if settings.telegram_bot_token:
        telegram = asyncio.create_task(run_polling(facade), name="telegram")
        telegram.add_done_callback(_log_channel_failure)
        tasks.append(telegram)
    else:
        logger.info("TELEGRAM_BOT_TOKEN not set, Telegram bot disabled")

    if not settings.twilio_auth_token:
        logger.info("TWILIO_AUTH_TOKEN not set, webhook signatures are not checked")

    try:
        # HTTP server exit (Ctrl+C) ends the process
        await tasks[0]
    finally:
        for task in tasks[1:]:
            task.cancel()
        await asyncio.gather(*tasks[1:], return_exceptions=True)
        await facade.lead_store.close()
        logger.info("Cleanup complete")


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Salesbot stopped")


if __name__ == "__main__":
    run()
