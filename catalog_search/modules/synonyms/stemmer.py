"""Light English stemmer for plurals and common verb suffixes."""

from __future__ import annotations

IRREGULAR_PLURALS: dict[str, str] = {
    "shelves": "shelf",
    "knives": "knife",
    "wives": "wife",
    "lives": "life",
    "leaves": "leaf",
    "wolves": "wolf",
    "halves": "half",
    "calves": "calf",
    "selves": "self",
    "loaves": "loaf",
    "thieves": "thief",
    "children": "child",
    "men": "man",
    "women": "woman",
    "feet": "foot",
    "teeth": "tooth",
    "mice": "mouse",
}

_DOUBLED_CONSONANTS = frozenset("bcdfgklmnprstvz")


def stem(word: str) -> str:
    """Strip one common English suffix; words of three letters or fewer are kept."""
    word = word.strip().lower()
    if len(word) <= 3:
        return word
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]

    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith("ves") and len(word) > 4:
        return word[:-3] + "f"
    if word.endswith("es"):
        base = word[:-2]
        if base.endswith(("x", "s", "ch", "sh", "o")):
            return base
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]

    if word.endswith("ing") and len(word) > 5:
        base = word[:-3]
        # running -> run
        if len(base) >= 2 and base[-1] == base[-2] and base[-1] in _DOUBLED_CONSONANTS:
            return base[:-1]
        return base
    if word.endswith("ed") and len(word) > 4:
        if word.endswith("ied"):
            return word[:-3] + "y"
        return word[:-2]
    return word
