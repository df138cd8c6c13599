"""Tests for intent detection."""

import pytest

from salesbot.core.conversation import Intent, IntentMatcher


class TestIntentMatcher:
    """Default Spanish vocabularies with the 1/2 menu shortcuts."""

    def setup_method(self):
        self.matcher = IntentMatcher(
            catalog_keywords=["catalog", "catálogo", "catalogo", "ver", "productos"],
            recommend_keywords=["recom", "suger", "aconsej"],
            catalog_shortcuts=["1"],
            recommend_shortcuts=["2"],
        )

    @pytest.mark.parametrize("text", [
        "ver productos",
        "Quiero ver el catálogo",
        "CATALOGO",
        "1",
        " 1 ",
    ])
    def test_catalog_intent(self, text):
        assert self.matcher.detect(text) is Intent.SHOW_CATALOG

    @pytest.mark.parametrize("text", [
        "Recomiéndame algo",
        "¿qué me sugerirías?",
        "aconsejame",
        "2",
    ])
    def test_recommend_intent(self, text):
        assert self.matcher.detect(text) is Intent.RECOMMEND

    @pytest.mark.parametrize("text", ["hola", "", "   ", None, "lavar platos", "12"])
    def test_no_intent(self, text):
        assert self.matcher.detect(text) is None

    def test_catalog_wins_when_both_match(self):
        assert self.matcher.detect("recomiéndame productos") is Intent.SHOW_CATALOG


class TestVocabularyOverlap:

    def test_overlapping_keywords_rejected(self):
        with pytest.raises(ValueError):
            IntentMatcher(catalog_keywords=["ver", "recomendar"], recommend_keywords=["recom"])

    def test_overlapping_shortcuts_rejected(self):
        with pytest.raises(ValueError):
            IntentMatcher(
                catalog_keywords=["ver"],
                recommend_keywords=["recom"],
                catalog_shortcuts=["1"],
                recommend_shortcuts=["1"],
            )

    def test_empty_vocabulary_detects_nothing(self):
        matcher = IntentMatcher(catalog_keywords=[], recommend_keywords=[])
        assert matcher.detect("ver productos") is None
