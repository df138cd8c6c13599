"""
Start, help and clear command handlers.
"""

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import KeyboardButton, Message, ReplyKeyboardMarkup

from salesbot.core.facade import CommerceFacade

router = Router(name="start")


CATALOG_BUTTON = "📋 Ver catálogo"
RECOMMEND_BUTTON = "✨ Recomiéndame"


# Keyboard with the two menu options
main_keyboard = ReplyKeyboardMarkup(
    keyboard=[
        [KeyboardButton(text=CATALOG_BUTTON), KeyboardButton(text=RECOMMEND_BUTTON)],
    ],
    resize_keyboard=True,
    input_field_placeholder="Escribe qué te interesa...",
)


HELP_MESSAGE = """Puedo ayudarte así:

• «📋 Ver catálogo»: te muestro las categorías
• «✨ Recomiéndame»: te pregunto qué quieres mejorar y te sugiero productos

Comandos:
/clear: empezar de nuevo
/help: esta ayuda"""


def session_id_for(message: Message) -> str:
    """Telegram session: one per chat."""
    return f"tg:{message.chat.id}"


@router.message(CommandStart())
async def handle_start(message: Message, facade: CommerceFacade) -> None:
    """Handle /start command."""
    await facade.reset_conversation(session_id_for(message), channel="telegram")
    await message.answer(facade.router.greeting().text, reply_markup=main_keyboard)


@router.message(Command("help"))
async def handle_help(message: Message) -> None:
    """Handle /help command."""
    await message.answer(HELP_MESSAGE, reply_markup=main_keyboard)


@router.message(Command("clear"))
async def handle_clear(message: Message, facade: CommerceFacade) -> None:
    """Forget a pending recommendation question."""
    await facade.reset_conversation(session_id_for(message), channel="telegram")
    await message.answer(
        "🔄 Empecemos de nuevo. ¿Quieres ver productos o una recomendación?",
        reply_markup=main_keyboard,
    )
