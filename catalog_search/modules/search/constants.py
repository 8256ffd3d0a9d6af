"""Query expansion weights and limits."""

MIN_QUERY_LENGTH = 2
MIN_PHRASE_LENGTH = 3

PHRASE_WEIGHT = 1.0
TOKEN_WEIGHT = 1.0
TRANSLATION_TERM_WEIGHT = 0.9
TRANSLATED_PHRASE_WEIGHT = 0.95
MULTI_WORD_EXPANSION_FACTOR = 0.9

FUZZY_SUGGESTIONS_PER_TOKEN = 2
MAX_EXPANSION_TERMS = 50
