"""
Conversation router - turns chat messages into replies.
Keeps the per-session Idle / AwaitingTopic state explicit.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from salesbot.core.catalog import CatalogIndex
from salesbot.core.conversation.intents import Intent, IntentMatcher
from salesbot.core.conversation.replies import (
    ASK_TOPIC_MESSAGE,
    FOUND_MESSAGE,
    NO_MATCHES_MESSAGE,
    ProductCard,
    Reply,
    categories_message,
    greeting_message,
)
from salesbot.core.conversation.states import ConversationState, ConversationStateStore

logger = logging.getLogger(__name__)


class ConversationRouter:
    """
    State machine per session:

        IDLE + catalog intent    -> categories, IDLE
        IDLE + recommend intent  -> ask topic, AWAITING_TOPIC
        AWAITING_TOPIC + text    -> matches or "no matches", IDLE
        IDLE + anything else     -> greeting, IDLE
    """

    def __init__(
        self,
        catalog: CatalogIndex,
        intents: IntentMatcher,
        states: Optional[ConversationStateStore] = None,
        match_limit: int = 3,
        assistant_name: str = "Asistente",
        search_when_idle: bool = False,
    ):
        self.catalog = catalog
        self.intents = intents
        self.states = states or ConversationStateStore()
        self.match_limit = match_limit
        self.assistant_name = assistant_name
        self.search_when_idle = search_when_idle
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    @asynccontextmanager
    async def _session_lock(self, session_id: str) -> AsyncIterator[None]:
        """Serialize one session; the lock is dropped once nobody holds or awaits it."""
        lock = self._locks.setdefault(session_id, asyncio.Lock())
        self._lock_users[session_id] = self._lock_users.get(session_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[session_id] -= 1
            if not self._lock_users[session_id]:
                del self._lock_users[session_id]
                del self._locks[session_id]

    def greeting(self) -> Reply:
        return Reply(text=greeting_message(self.assistant_name))

    def state_of(self, session_id: str) -> ConversationState:
        return self.states.get(session_id)

    async def reset(self, session_id: str) -> None:
        """Forget any pending question for the session."""
        async with self._session_lock(session_id):
            self.states.reset(session_id)

    async def handle(self, session_id: str, text: Optional[str]) -> Reply:
        """
        Process one inbound message.

        State is read, the reply computed and the new state written while
        holding the session lock, so messages of one session are serialized.
        """
        async with self._session_lock(session_id):
            state = self.states.get(session_id)
            reply, new_state = self._transition(state, text or "")
            self.states.set(session_id, new_state)

        if new_state is not state:
            logger.debug(f"Session {session_id}: {state.value} -> {new_state.value}")
        return reply

    def _transition(
        self, state: ConversationState, text: str
    ) -> tuple[Reply, ConversationState]:
        if state is ConversationState.AWAITING_TOPIC:
            return self._recommend(text), ConversationState.IDLE

        intent = self.intents.detect(text)

        if intent is Intent.SHOW_CATALOG:
            return Reply(text=categories_message(self.catalog.categories())), ConversationState.IDLE

        if intent is Intent.RECOMMEND:
            return Reply(text=ASK_TOPIC_MESSAGE), ConversationState.AWAITING_TOPIC

        if self.search_when_idle and len(text.strip()) > 2 and len(self.catalog) > 0:
            return self._recommend(text), ConversationState.IDLE

        return self.greeting(), ConversationState.IDLE

    def _recommend(self, text: str) -> Reply:
        products = self.catalog.match(text, self.match_limit)
        if not products:
            return Reply(text=NO_MATCHES_MESSAGE)
        return Reply(
            text=FOUND_MESSAGE,
            products=[ProductCard.from_product(p) for p in products],
        )
