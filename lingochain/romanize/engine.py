"""
Heuristic romanization of abugida and syllabary scripts.

Two single-pass algorithms share this module:

- romanize_abugida(): Brahmic scripts. Consonants carry an inherent "a"
  that a following vowel sign replaces and a virama removes.
- romanize_syllabary(): Japanese kana. Digraphs are matched before single
  kana, and the small tsu doubles the next consonant.

romanize() picks the algorithm from the target language code. Neither
algorithm raises: unmapped characters are skipped, ASCII passes through, and
an output with nothing left after trimming is reported as None.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from lingochain.romanize.tables import (
    DEVANAGARI,
    KANA,
    TELUGU,
    AbugidaTable,
    SyllabaryTable,
)

logger = logging.getLogger(__name__)

ScriptTable = Union[AbugidaTable, SyllabaryTable]


def _finish(parts: list[str]) -> Optional[str]:
    out = "".join(parts).strip()
    return out or None


def romanize_abugida(text: str, table: AbugidaTable) -> Optional[str]:
    """Romanize Brahmic text with the given mapping table.

    Example:
        >>> romanize_abugida("कि", DEVANAGARI)
        'ki'
        >>> romanize_abugida("क्", DEVANAGARI)
        'k'
        >>> romanize_abugida("\u091C\u093C", DEVANAGARI)
        'za'
    """
    text = text or ""
    parts: list[str] = []
    # True while the last emitted piece is a consonant's implicit vowel
    inherent = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        i += 1
        if table.nukta and ch in table.nukta_letters and text[i:i + 1] == table.nukta:
            ch = table.nukta_letters[ch]
            i += 1

        if ch in table.consonants:
            parts.append(table.consonants[ch])
            parts.append(table.inherent_vowel)
            inherent = True
        elif ch in table.vowels:
            parts.append(table.vowels[ch])
            inherent = False
        elif ch in table.vowel_signs:
            if inherent:
                parts.pop()
            parts.append(table.vowel_signs[ch])
            inherent = False
        elif ch == table.virama:
            if inherent:
                parts.pop()
            inherent = False
        elif ch in table.symbols:
            parts.append(table.symbols[ch])
            inherent = False
        elif ch.isascii():
            parts.append(ch)
            inherent = False

    return _finish(parts)


def romanize_syllabary(text: str, table: SyllabaryTable) -> Optional[str]:
    """Romanize kana text with the given mapping table.

    Example:
        >>> romanize_syllabary("きって", KANA)
        'kitte'
        >>> romanize_syllabary("とうきょう", KANA)
        'toukyou'
    """
    text = text or ""
    parts: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else None

        if ch in table.gemination and nxt is not None:
            sound = table.syllables.get(nxt)
            if sound:
                parts.append(sound[0])
            i += 1
            continue

        if nxt is not None and ch + nxt in table.digraphs:
            parts.append(table.digraphs[ch + nxt])
            i += 2
            continue

        if ch in table.syllables:
            parts.append(table.syllables[ch])
        elif ch.isascii():
            parts.append(ch)
        i += 1

    return _finish(parts)


# ============================================================================
# Dispatch
# ============================================================================

_ALGORITHMS: dict[str, tuple[Callable[[str, ScriptTable], Optional[str]], ScriptTable]] = {
    "ja": (romanize_syllabary, KANA),
    "te": (romanize_abugida, TELUGU),
    "hi": (romanize_abugida, DEVANAGARI),
}


def base_language(code: str) -> str:
    """Strip a region suffix: 'te-IN' -> 'te', 'ja_JP' -> 'ja'."""
    code = (code or "").strip().lower().replace("_", "-")
    return code.split("-", 1)[0]


def is_romanizable(code: str) -> bool:
    """Whether romanize() knows the script for this language code."""
    return base_language(code) in _ALGORITHMS


def supported_languages() -> list[str]:
    """Base language codes with a romanization table."""
    return sorted(_ALGORITHMS)


def script_for(code: str) -> Optional[ScriptTable]:
    """Mapping table used for a language code, or None."""
    entry = _ALGORITHMS.get(base_language(code))
    return entry[1] if entry else None


def romanize(text: str, target_lang: str) -> Optional[str]:
    """Best-effort Latin rendering of text written in target_lang's script.

    Args:
        text: Text in the target language's native script
        target_lang: Language code, optionally with a region suffix

    Returns:
        Latin-letter rendering, or None when the code is not supported
        or nothing in the text could be mapped
    """
    entry = _ALGORITHMS.get(base_language(target_lang))
    if entry is None:
        return None
    algorithm, table = entry
    result = algorithm(text, table)
    logger.debug(f"romanize[{table.script}]: {text!r} -> {result!r}")
    return result
