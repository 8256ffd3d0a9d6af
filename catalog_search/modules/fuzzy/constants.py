"""Fuzzy matcher constants."""

# Terms shorter than this never fuzzy-match
MIN_TERM_LENGTH = 2

# Length-tiered maximum edit distance for is_fuzzy_match: (max_length, max_distance)
MAX_DISTANCE_TIERS: list[tuple[int, int]] = [
    (4, 1),
    (7, 2),
]
MAX_DISTANCE_LONG = 3

# Default number of hits returned by find_matches
DEFAULT_MATCH_LIMIT = 3
