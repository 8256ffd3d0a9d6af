"""Synonym dictionary constants."""

# Term bounds (canonical and synonym)
MIN_TERM_LENGTH = 2
MAX_TERM_LENGTH = 100
MAX_CATEGORY_HINT_LENGTH = 100

# Weight bounds
MIN_WEIGHT = 0.1
MAX_WEIGHT = 1.0
DEFAULT_WEIGHT = 1.0

# Expansion weights
SELF_WEIGHT = 1.0
STEM_WEIGHT = 0.85
STEM_SYNONYM_FACTOR = 0.9
CATEGORY_BOOST = 1.15

# Admin listing
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200
