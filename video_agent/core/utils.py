"""
Text utilities shared by the generation steps.
"""

import re
import unicodedata
from typing import Callable, Iterable, List, Optional

# Portuguese function words never worth a hashtag or a keyword
STOPWORDS = frozenset(
    {
        "a", "ao", "aos", "as", "com", "como", "da", "das", "de", "do", "dos",
        "e", "em", "na", "nas", "no", "nos", "o", "os", "ou", "para", "pela",
        "pelo", "por", "que", "se", "sem", "sob", "sobre", "um", "uma", "uns",
        "umas", "seu", "sua", "seus", "suas", "mais", "muito", "quando",
        "the", "and", "for", "with", "of", "to", "in",
    }
)

_TRAILING_PUNCTUATION = " .,;:!?…"


def clean_text(text: Optional[str]) -> str:
    """
    Trim a value and collapse internal whitespace runs.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        Cleaned text, possibly empty
    """
    if text is None:
        return ""
    return " ".join(str(text).split())


def fold_accents(text: str) -> str:
    """Remove diacritics ("negócios" -> "negocios")."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def strip_terminal_punctuation(text: str) -> str:
    return text.rstrip(_TRAILING_PUNCTUATION)


def lower_first(text: str) -> str:
    """
    Lowercase the first letter so a field reads naturally mid-sentence.

    Text starting with an acronym ("SEO para iniciantes") is left untouched.
    """
    if not text:
        return text
    if len(text) > 1 and text[1].isupper():
        return text
    return text[0].lower() + text[1:]


def upper_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def word_count(text: str) -> int:
    return len(text.split())


def clip_words(text: str, max_words: int) -> str:
    """Keep at most ``max_words`` words, without trailing punctuation."""
    words = text.split()
    return strip_terminal_punctuation(" ".join(words[:max_words]))


def hashtag_token(text: str) -> str:
    """Accent-free lowercase token with only letters and digits."""
    return re.sub(r"[^0-9a-z]", "", fold_accents(text).lower())


def keywords(text: str, min_length: int = 4) -> List[str]:
    """
    Extract ordered, unique keywords from free text.

    Args:
        text: Source text (theme, pain point...)
        min_length: Shortest accepted keyword, after accent folding

    Returns:
        Keywords in order of first appearance
    """
    found: List[str] = []
    for raw in text.split():
        token = hashtag_token(raw)
        if len(token) < min_length or token in STOPWORDS or token in found:
            continue
        found.append(token)
    return found


def dedupe(items: Iterable[str], key: Callable[[str], str] = str.casefold) -> List[str]:
    """Drop repeated items (compared through ``key``), keeping first occurrences in order."""
    seen = set()
    unique = []
    for item in items:
        marker = key(item)
        if marker in seen:
            continue
        seen.add(marker)
        unique.append(item)
    return unique
