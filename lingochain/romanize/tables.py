"""
Character mapping tables for phonetic romanization.

This module holds pure data: one table per supported script.

- Abugida tables (Telugu, Devanagari): consonant base sounds, independent
  vowels, dependent vowel signs (matras), extra symbols (anusvara, visarga,
  native digits, danda) and the virama that kills the inherent vowel.
- Syllabary table (Japanese kana): single kana sounds, two-character digraphs
  (kana + small ya/yu/yo, katakana loan-word combinations) and the small tsu
  gemination mark.

All mappings are wrapped in MappingProxyType at import time so there is no
runtime mutation path. Katakana entries are derived from hiragana by the fixed
Unicode offset between the two blocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


def _freeze(mapping: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class AbugidaTable:
    """Mapping table for a Brahmic script.

    Attributes:
        script: Human readable script name
        consonants: Consonant letter -> base sound (no inherent vowel)
        vowels: Independent vowel letter -> sound
        vowel_signs: Dependent vowel sign (matra) -> sound
        symbols: Other marks emitted as-is (anusvara, visarga, digits, danda)
        virama: The vowel-killer character
        nukta: Combining dot that turns some consonants into loan sounds
        nukta_letters: Base consonant -> precomposed letter it forms with nukta
    """
    script: str
    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    vowel_signs: Mapping[str, str]
    symbols: Mapping[str, str]
    virama: str
    inherent_vowel: str = "a"
    nukta: Optional[str] = None
    nukta_letters: Mapping[str, str] = field(default_factory=lambda: _freeze({}))


@dataclass(frozen=True)
class SyllabaryTable:
    """Mapping table for a mora-based script.

    Attributes:
        script: Human readable script name
        syllables: Single character -> sound
        digraphs: Two-character sequence -> sound
        gemination: Marks that double the following consonant
    """
    script: str
    syllables: Mapping[str, str]
    digraphs: Mapping[str, str]
    gemination: frozenset


# ============================================================================
# Telugu
# ============================================================================

TELUGU = AbugidaTable(
    script="Telugu",
    consonants=_freeze({
        "క": "k", "ఖ": "kh", "గ": "g", "ఘ": "gh", "ఙ": "ng",
        "చ": "ch", "ఛ": "chh", "జ": "j", "ఝ": "jh", "ఞ": "ny",
        "ట": "t", "ఠ": "th", "డ": "d", "ఢ": "dh", "ణ": "n",
        "త": "t", "థ": "th", "ద": "d", "ధ": "dh", "న": "n",
        "ప": "p", "ఫ": "ph", "బ": "b", "భ": "bh", "మ": "m",
        "య": "y", "ర": "r", "ఱ": "rr", "ల": "l", "ళ": "l", "వ": "v",
        "శ": "sh", "ష": "sh", "స": "s", "హ": "h",
    }),
    vowels=_freeze({
        "అ": "a", "ఆ": "aa", "ఇ": "i", "ఈ": "ii", "ఉ": "u", "ఊ": "uu",
        "ఋ": "ru", "ౠ": "ruu", "ఎ": "e", "ఏ": "ee", "ఐ": "ai",
        "ఒ": "o", "ఓ": "oo", "ఔ": "au",
    }),
    vowel_signs=_freeze({
        "ా": "aa", "ి": "i", "ీ": "ii", "ు": "u", "ూ": "uu",
        "ృ": "ru", "ౄ": "ruu", "ె": "e", "ే": "ee", "ై": "ai",
        "ొ": "o", "ో": "oo", "ౌ": "au",
    }),
    symbols=_freeze({
        "ఁ": "n", "ం": "m", "ః": "h",
        "౦": "0", "౧": "1", "౨": "2", "౩": "3", "౪": "4",
        "౫": "5", "౬": "6", "౭": "7", "౮": "8", "౯": "9",
    }),
    virama="్",
)


# ============================================================================
# Devanagari (Hindi)
# ============================================================================

DEVANAGARI = AbugidaTable(
    script="Devanagari",
    consonants=_freeze({
        "क": "k", "ख": "kh", "ग": "g", "घ": "gh", "ङ": "ng",
        "च": "ch", "छ": "chh", "ज": "j", "झ": "jh", "ञ": "ny",
        "ट": "t", "ठ": "th", "ड": "d", "ढ": "dh", "ण": "n",
        "त": "t", "थ": "th", "द": "d", "ध": "dh", "न": "n",
        "प": "p", "फ": "ph", "ब": "b", "भ": "bh", "म": "m",
        "य": "y", "र": "r", "ल": "l", "ळ": "l", "व": "v",
        "श": "sh", "ष": "sh", "स": "s", "ह": "h",
        # precomposed nukta letters
        "क़": "q", "ख़": "kh", "ग़": "gh", "ज़": "z",
        "ड़": "r", "ढ़": "rh", "फ़": "f", "य़": "y",
    }),
    vowels=_freeze({
        "अ": "a", "आ": "aa", "इ": "i", "ई": "ii", "उ": "u", "ऊ": "uu",
        "ऋ": "ri", "ए": "e", "ऐ": "ai", "ओ": "o", "औ": "au",
        "ऍ": "e", "ऑ": "o",
    }),
    vowel_signs=_freeze({
        "ा": "aa", "ि": "i", "ी": "ii", "ु": "u", "ू": "uu",
        "ृ": "ri", "े": "e", "ै": "ai", "ो": "o", "ौ": "au",
        "ॅ": "e", "ॉ": "o",
    }),
    symbols=_freeze({
        "ँ": "n", "ं": "n", "ः": "h", "।": ".", "॥": ".",
        "०": "0", "१": "1", "२": "2", "३": "3", "४": "4",
        "५": "5", "६": "6", "७": "7", "८": "8", "९": "9",
    }),
    virama="्",
    nukta="\u093C",
    nukta_letters=_freeze({
        "\u0915": "\u0958", "\u0916": "\u0959", "\u0917": "\u095A", "\u091C": "\u095B",
        "\u0921": "\u095C", "\u0922": "\u095D", "\u092B": "\u095E", "\u092F": "\u095F",
    }),
)


# ============================================================================
# Japanese kana
# ============================================================================

_HIRAGANA = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo", "ん": "n",
    "ゔ": "vu",
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa",
}

# kana ending in -i that combine with small ya/yu/yo
_YOON_PREFIXES = {
    "き": "ky", "ぎ": "gy", "し": "sh", "じ": "j", "ち": "ch", "ぢ": "j",
    "に": "ny", "ひ": "hy", "び": "by", "ぴ": "py", "み": "my", "り": "ry",
}
_YOON_VOWELS = {"ゃ": "a", "ゅ": "u", "ょ": "o"}

_KATAKANA_EXTRAS = {
    "ファ": "fa", "フィ": "fi", "フェ": "fe", "フォ": "fo",
    "ティ": "ti", "ディ": "di", "トゥ": "tu", "ドゥ": "du",
    "ウィ": "wi", "ウェ": "we", "ウォ": "wo",
    "ヴァ": "va", "ヴィ": "vi", "ヴェ": "ve", "ヴォ": "vo",
    "シェ": "she", "ジェ": "je", "チェ": "che",
}

_KATAKANA_OFFSET = ord("ア") - ord("あ")


def _to_katakana(kana: str) -> str:
    return "".join(chr(ord(ch) + _KATAKANA_OFFSET) for ch in kana)


def _build_syllables() -> dict[str, str]:
    table = dict(_HIRAGANA)
    for kana, sound in _HIRAGANA.items():
        table[_to_katakana(kana)] = sound
    return table


def _build_digraphs() -> dict[str, str]:
    table = {}
    for base, prefix in _YOON_PREFIXES.items():
        for small, vowel in _YOON_VOWELS.items():
            table[base + small] = prefix + vowel
            table[_to_katakana(base + small)] = prefix + vowel
    table.update(_KATAKANA_EXTRAS)
    return table


KANA = SyllabaryTable(
    script="Kana",
    syllables=_freeze(_build_syllables()),
    digraphs=_freeze(_build_digraphs()),
    gemination=frozenset({"っ", "ッ"}),
)
