"""
Conversation module for chat channels.
Handles intent detection, per-session state and replies.
"""

from salesbot.core.conversation.intents import Intent, IntentMatcher
from salesbot.core.conversation.replies import ProductCard, Reply
from salesbot.core.conversation.router import ConversationRouter
from salesbot.core.conversation.states import ConversationState, ConversationStateStore

__all__ = [
    # Intents
    "Intent",
    "IntentMatcher",
    # Replies
    "ProductCard",
    "Reply",
    # State machine
    "ConversationRouter",
    "ConversationState",
    "ConversationStateStore",
]
