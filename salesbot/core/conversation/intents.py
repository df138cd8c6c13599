"""
Intent detection for chat messages.
Keyword vocabularies compiled to case-insensitive patterns.
"""

import re
from enum import Enum
from typing import Iterable, Optional


class Intent(Enum):
    """Recognized chat intents."""
    SHOW_CATALOG = "show_catalog"
    RECOMMEND = "recommend"


def _compile(keywords: Iterable[str]) -> Optional[re.Pattern]:
    """Keywords match at the start of a word: 'ver' hits 'ver productos', not 'lavar'."""
    words = [re.escape(k.strip()) for k in keywords if k and k.strip()]
    if not words:
        return None
    return re.compile(r'\b(?:' + '|'.join(words) + ')', re.IGNORECASE)


class IntentMatcher:
    """
    Classifies a message as catalog or recommendation intent.

    The two vocabularies must not overlap, otherwise the same message could
    drive the conversation into either state.
    """

    def __init__(
        self,
        catalog_keywords: Iterable[str],
        recommend_keywords: Iterable[str],
        catalog_shortcuts: Iterable[str] = (),
        recommend_shortcuts: Iterable[str] = (),
    ):
        self.catalog_keywords = [k.strip().lower() for k in catalog_keywords if k.strip()]
        self.recommend_keywords = [k.strip().lower() for k in recommend_keywords if k.strip()]
        self.catalog_shortcuts = {s.strip().lower() for s in catalog_shortcuts if s.strip()}
        self.recommend_shortcuts = {s.strip().lower() for s in recommend_shortcuts if s.strip()}

        self._check_overlap()

        self._catalog_pattern = _compile(self.catalog_keywords)
        self._recommend_pattern = _compile(self.recommend_keywords)

    def _check_overlap(self) -> None:
        for a in self.catalog_keywords:
            for b in self.recommend_keywords:
                if a in b or b in a:
                    raise ValueError(f"Intent vocabularies overlap: '{a}' / '{b}'")

        shared = self.catalog_shortcuts & self.recommend_shortcuts
        if shared:
            raise ValueError(f"Intent shortcuts overlap: {sorted(shared)}")

    def detect(self, text: Optional[str]) -> Optional[Intent]:
        """
        Detect intent of a message.

        Returns:
            Intent or None if the message is not a command.
            Catalog intent wins when both vocabularies match.
        """
        if not text or not text.strip():
            return None

        stripped = text.strip().lower()

        if stripped in self.catalog_shortcuts:
            return Intent.SHOW_CATALOG
        if stripped in self.recommend_shortcuts:
            return Intent.RECOMMEND

        if self._catalog_pattern and self._catalog_pattern.search(stripped):
            return Intent.SHOW_CATALOG
        if self._recommend_pattern and self._recommend_pattern.search(stripped):
            return Intent.RECOMMEND

        return None
