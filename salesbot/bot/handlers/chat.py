"""
Message handler - every text goes through the conversation router.
"""

import logging

from aiogram import F, Router
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Message

from salesbot.bot.handlers.start import main_keyboard, session_id_for
from salesbot.core.conversation import ProductCard, Reply
from salesbot.core.facade import CommerceFacade

router = Router(name="chat")
logger = logging.getLogger(__name__)


async def send_card(message: Message, card: ProductCard) -> None:
    """Send product as photo with caption, plain text if Telegram refuses the image."""
    if card.image_url:
        try:
            await message.answer_photo(photo=card.image_url, caption=card.caption())
            return
        except TelegramAPIError as e:
            logger.warning(f"Could not send photo for {card.name}: {e}")

    await message.answer(f"{card.name} - {card.short_description}\nComprar: {card.buy_link}")


async def send_reply(message: Message, reply: Reply) -> None:
    await message.answer(reply.text, reply_markup=main_keyboard)
    for card in reply.products:
        await send_card(message, card)


@router.message(F.text)
async def handle_message(message: Message, facade: CommerceFacade) -> None:
    """Handle user text through the shared conversation flow."""
    user_query = message.text.strip()

    if not user_query:
        return

    try:
        reply = await facade.handle_message(
            session_id_for(message),
            user_query,
            channel="telegram",
        )
        await send_reply(message, reply)

    except TelegramAPIError as e:
        logger.error(f"Error answering message: {e}", exc_info=True)
