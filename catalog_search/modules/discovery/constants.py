"""Auto-discovery limits."""

ZERO_RESULT_PATTERN_LIMIT = 50
LOW_RESULT_POPULAR_LIMIT = 50
SESSION_PATTERN_LIMIT = 30
# Aggregated follow-up pairs read before confidence and mapping filters
SESSION_PAIR_SCAN_LIMIT = 500
FUZZY_MATCH_LIMIT = 2
SUCCESSFUL_VOCABULARY_LIMIT = 1000

# Request bounds
DEFAULT_DISCOVERY_DAYS = 30
MAX_DISCOVERY_DAYS = 90
MIN_AUTO_CREATE_CONFIDENCE = 0.5
MAX_AUTO_CREATE_CONFIDENCE = 1.0
