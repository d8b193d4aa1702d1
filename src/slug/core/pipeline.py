"""Transformation pipeline shared by slug generation and parsing"""

from typing import Optional

from slug.core.options import Options


APOSTROPHE = "'"


def strip_apostrophes(text: str) -> str:
    """Drop apostrophes so contractions stay one word ("library's" -> "librarys")."""
    return text.replace(APOSTROPHE, "")


def filter_chars(text: str, options: Options) -> str:
    """Replace every code point rejected by options.keep_if with a single space."""
    return "".join(ch if options.keep_if(ch) else " " for ch in text)


def words(text: str) -> list[str]:
    """Split on ASCII spaces, discarding empty fragments."""
    return [w for w in text.split(" ") if w]


def run(text: str, options: Options) -> Optional[str]:
    """Apply every stage in order; None when no words survive filtering."""
    if options.strip_apostrophes:
        text = strip_apostrophes(text)
    if options.lower_case:
        text = text.lower()
    parts = words(filter_chars(text, options))
    if not parts:
        return None
    return options.separator.join(parts)
