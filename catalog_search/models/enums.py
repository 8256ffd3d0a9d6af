import enum


class SynonymSource(str, enum.Enum):
    STATIC = "static"
    ADMIN = "admin"
    ANALYTICS = "analytics"
    TRANSLATION = "translation"


class SynonymLanguage(str, enum.Enum):
    EN = "en"
    FR = "fr"


class SuggestionType(str, enum.Enum):
    FUZZY_MATCH = "fuzzy_match"
    SESSION_PATTERN = "session_pattern"
    ZERO_RESULT = "zero_result"


class ConfidenceLevel(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
