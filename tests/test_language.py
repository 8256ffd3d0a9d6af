"""Tests for query language detection and French -> English translation."""

from catalog_search.models.enums import SynonymLanguage
from catalog_search.modules.language.service import (
    build_glossary,
    detect_language,
    get_french_equivalents,
    remove_accents,
    translate_query,
)


# ══════════════════════════════════════════════════════════════════════════════
# Detection
# ══════════════════════════════════════════════════════════════════════════════


class TestDetectLanguage:
    def test_french_phrase(self):
        assert detect_language("canapé en cuir") == SynonymLanguage.FR

    def test_unaccented_french(self):
        assert detect_language("chaise noire") == SynonymLanguage.FR

    def test_english_phrase(self):
        assert detect_language("red leather sofa") == SynonymLanguage.EN

    def test_shared_words_are_not_french_signal(self):
        assert detect_language("sofa") == SynonymLanguage.EN

    def test_empty_query_is_english(self):
        assert detect_language("   ") == SynonymLanguage.EN

    def test_deterministic(self):
        results = {detect_language("lampe de bureau") for _ in range(5)}
        assert results == {SynonymLanguage.FR}


# ══════════════════════════════════════════════════════════════════════════════
# Translation
# ══════════════════════════════════════════════════════════════════════════════


class TestTranslateQuery:
    def test_translates_recognized_terms(self):
        result = translate_query("canapé en cuir")
        assert result.had_translation is True
        assert result.translated_query == "sofa en leather"
        assert [(m.source, m.target) for m in result.matches] == [("canapé", "sofa"), ("cuir", "leather")]
        assert result.detected_language == SynonymLanguage.FR

    def test_longest_phrase_wins(self):
        result = translate_query("salle de bain moderne")
        assert result.translated_query == "bathroom modern"
        assert result.matches[0].source == "salle de bain"

    def test_accent_folded_lookup(self):
        result = translate_query("canape noir")
        assert result.translated_query == "sofa black"

    def test_english_query_is_unchanged(self):
        result = translate_query("oak dining table")
        assert result.translated_query == "oak dining table"
        assert result.matches == []
        assert result.had_translation is False

    def test_identity_entries_are_not_matches(self):
        result = translate_query("table")
        assert result.translated_query == "table"
        assert result.matches == []
        assert result.had_translation is False

    def test_dictionary_entries_extend_glossary(self):
        glossary = build_glossary({"Pouf": "Ottoman"})
        result = translate_query("le pouf", glossary)
        assert result.translated_query == "le ottoman"
        assert result.matches[0].target == "ottoman"


# ══════════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════════


def test_remove_accents():
    assert remove_accents("étagère à café") == "etagere a cafe"


def test_french_equivalents():
    assert set(get_french_equivalents("pillow")) == {"coussin", "oreiller"}
    assert get_french_equivalents("spaceship") == []
