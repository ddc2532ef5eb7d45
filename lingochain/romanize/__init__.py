"""
Romanization of non-Latin target scripts.

This module provides:
- Immutable per-script mapping tables (Telugu, Devanagari, Japanese kana)
- Abugida and syllabary romanization algorithms
- Language-code dispatch via romanize()
"""

from lingochain.romanize.engine import (
    base_language,
    is_romanizable,
    romanize,
    romanize_abugida,
    romanize_syllabary,
    script_for,
    supported_languages,
)
from lingochain.romanize.tables import (
    DEVANAGARI,
    KANA,
    TELUGU,
    AbugidaTable,
    SyllabaryTable,
)

__all__ = [
    "base_language",
    "is_romanizable",
    "romanize",
    "romanize_abugida",
    "romanize_syllabary",
    "script_for",
    "supported_languages",
    "DEVANAGARI",
    "KANA",
    "TELUGU",
    "AbugidaTable",
    "SyllabaryTable",
]
