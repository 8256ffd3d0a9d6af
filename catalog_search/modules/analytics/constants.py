"""Search analytics constants."""

MAX_QUERY_LENGTH = 255
MAX_LOGGED_EXPANDED_TERMS = 20

# Queries counted as known-good vocabulary need this many searches
SUCCESSFUL_MIN_SEARCHES = 2

# Shorter queries are ignored when mining session follow-ups
MIN_SESSION_QUERY_LENGTH = 2

# Report bounds
MAX_REPORT_DAYS = 365
DEFAULT_REPORT_DAYS = 30
DEFAULT_REPORT_LIMIT = 20
MAX_REPORT_LIMIT = 100
