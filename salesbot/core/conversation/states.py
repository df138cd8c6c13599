"""
Per-session conversation state for chat channels.
"""

from enum import Enum


class ConversationState(Enum):
    """Conversation state enum."""
    IDLE = "idle"                        # Waiting for a command
    AWAITING_TOPIC = "awaiting_topic"    # Asked what the user wants to improve


class ConversationStateStore:
    """In-memory session -> state map. Unknown sessions are IDLE."""

    def __init__(self):
        self._states: dict[str, ConversationState] = {}

    def get(self, session_id: str) -> ConversationState:
        return self._states.get(session_id, ConversationState.IDLE)

    def set(self, session_id: str, state: ConversationState) -> None:
        if state is ConversationState.IDLE:
            self._states.pop(session_id, None)
        else:
            self._states[session_id] = state

    def reset(self, session_id: str) -> None:
        self._states.pop(session_id, None)
