"""
Tests for the romanization engine and mapping tables.

Run with: pytest tests/test_romanize.py -v
"""

import dataclasses

import pytest

from lingochain.romanize import (
    DEVANAGARI,
    KANA,
    TELUGU,
    base_language,
    is_romanizable,
    romanize,
    romanize_abugida,
    romanize_syllabary,
    script_for,
    supported_languages,
)

NUKTA = "\u093C"


class TestAbugida:
    """Inherent vowel, matra and virama handling."""

    def test_consonant_gets_inherent_vowel(self):
        """Test a bare consonant carries the implicit 'a'."""
        assert romanize_abugida("क", DEVANAGARI) == "ka"

    def test_vowel_sign_replaces_inherent_vowel(self):
        """Test a matra overrides the implicit vowel."""
        assert romanize_abugida("कि", DEVANAGARI) == "ki"
        assert romanize_abugida("కి", TELUGU) == "ki"

    def test_virama_kills_inherent_vowel(self):
        """Test the virama drops the implicit vowel and emits nothing."""
        assert romanize_abugida("क्", DEVANAGARI) == "k"
        assert romanize_abugida("క్", TELUGU) == "k"

    def test_independent_vowel_has_no_inherent_vowel(self):
        assert romanize_abugida("अ", DEVANAGARI) == "a"
        assert romanize_abugida("ఆ", TELUGU) == "aa"

    def test_vowel_sign_after_independent_vowel_does_not_eat_it(self):
        """Test only an implicit 'a' is dropped, not a written one."""
        assert romanize_abugida("अि", DEVANAGARI) == "ai"

    def test_orphan_vowel_sign(self):
        assert romanize_abugida("ి", TELUGU) == "i"

    def test_words(self):
        """Test romanizing whole words."""
        assert romanize_abugida("नमस्ते", DEVANAGARI) == "namaste"
        assert romanize_abugida("అమ్మ", TELUGU) == "amma"
        assert romanize_abugida("నమస్కారం", TELUGU) == "namaskaaram"

    def test_telugu_hello(self):
        assert romanize_abugida("హలో", TELUGU) == "haloo"

    def test_native_digits_and_danda(self):
        """Test native digits and the danda map to ASCII."""
        assert romanize_abugida("१२३।", DEVANAGARI) == "123."
        assert romanize_abugida("౧౦", TELUGU) == "10"

    def test_ascii_passes_through(self):
        assert romanize_abugida("नमस्ते, Ravi!", DEVANAGARI) == "namaste, Ravi!"

    def test_unmapped_characters_are_skipped(self):
        """Test characters outside the table are dropped."""
        assert romanize_abugida("क€ख", DEVANAGARI) == "kakha"

    def test_fully_unmapped_input_is_none(self):
        """Test input that maps to nothing gives None."""
        assert romanize_abugida("東京", DEVANAGARI) is None
        assert romanize_abugida("", TELUGU) is None
        assert romanize_abugida("   ", TELUGU) is None


class TestNukta:
    """Consonant + nukta sequences in Devanagari."""

    def test_decomposed_nukta_consonant(self):
        """Test consonant followed by a nukta sign reads as the loan sound."""
        assert romanize_abugida("ज" + NUKTA, DEVANAGARI) == "za"
        assert romanize_abugida("फ" + NUKTA, DEVANAGARI) == "fa"
        assert romanize_abugida("क" + NUKTA, DEVANAGARI) == "qa"

    def test_decomposed_matches_precomposed(self):
        """Test both encodings of a nukta letter romanize the same."""
        decomposed = "ज" + NUKTA + "ि"
        precomposed = "\u095B\u093F"
        assert romanize_abugida(decomposed, DEVANAGARI) == "zi"
        assert romanize_abugida(precomposed, DEVANAGARI) == "zi"

    def test_nukta_consonant_with_virama(self):
        assert romanize_abugida("फ" + NUKTA + "्", DEVANAGARI) == "f"

    def test_nukta_after_other_consonant_is_skipped(self):
        """Test a nukta sign with no loan form leaves the base consonant."""
        assert romanize_abugida("स" + NUKTA, DEVANAGARI) == "sa"

    def test_stray_nukta_is_skipped(self):
        assert romanize_abugida(NUKTA + "क", DEVANAGARI) == "ka"


class TestSyllabary:
    """Digraphs and gemination for kana."""

    def test_single_kana(self):
        """Test plain hiragana."""
        assert romanize_syllabary("ありがとう", KANA) == "arigatou"

    def test_katakana(self):
        assert romanize_syllabary("テレビ", KANA) == "terebi"

    def test_gemination_doubles_leading_consonant(self):
        """Test small tsu doubles the next consonant."""
        assert romanize_syllabary("った", KANA) == "tta"
        assert romanize_syllabary("きって", KANA) == "kitte"
        assert romanize_syllabary("ロック", KANA) == "rokku"

    def test_gemination_uses_first_letter_only(self):
        """Test only the first letter of a multi-letter sound is doubled."""
        assert romanize_syllabary("っち", KANA) == "cchi"

    def test_trailing_gemination_mark_is_dropped(self):
        assert romanize_syllabary("あっ", KANA) == "a"

    def test_gemination_before_unmapped_character(self):
        assert romanize_syllabary("っ東", KANA) is None

    def test_digraphs(self):
        """Test kana + small ya/yu/yo combinations."""
        assert romanize_syllabary("とうきょう", KANA) == "toukyou"
        assert romanize_syllabary("ちゃ", KANA) == "cha"
        assert romanize_syllabary("ジャ", KANA) == "ja"

    def test_katakana_loan_digraphs(self):
        """Test katakana loan-word combinations; the long-vowel bar is skipped."""
        assert romanize_syllabary("ファン", KANA) == "fan"
        assert romanize_syllabary("パーティー", KANA) == "pati"

    def test_kanji_is_skipped(self):
        assert romanize_syllabary("日本ご", KANA) == "go"
        assert romanize_syllabary("東京", KANA) is None

    def test_ascii_passes_through(self):
        assert romanize_syllabary("Tokyo 東京", KANA) == "Tokyo"


class TestDispatch:
    """Language code to algorithm selection."""

    @pytest.mark.parametrize("code", ["te", "te-IN", "TE_in", " hi ", "hi-IN", "ja", "ja-JP"])
    def test_romanizable_codes(self, code):
        """Test region subtags and case are ignored."""
        assert is_romanizable(code)

    @pytest.mark.parametrize("code", ["fr", "en", "ru", "zh-CN", "", "tel"])
    def test_unsupported_codes(self, code):
        """Test unsupported codes never romanize."""
        assert not is_romanizable(code)
        assert romanize("నమస్కారం", code) is None

    def test_base_language(self):
        assert base_language("te-IN") == "te"
        assert base_language("ja_JP") == "ja"
        assert base_language("") == ""

    def test_dispatch_picks_table(self):
        """Test each language reaches its own table."""
        assert romanize("కి", "te-IN") == "ki"
        assert romanize("कि", "hi") == "ki"
        assert romanize("った", "ja-JP") == "tta"

    def test_script_for(self):
        assert script_for("te") is TELUGU
        assert script_for("hi-IN") is DEVANAGARI
        assert script_for("ja") is KANA
        assert script_for("fr") is None

    def test_supported_languages(self):
        assert supported_languages() == ["hi", "ja", "te"]

    @pytest.mark.parametrize("code", ["te", "hi", "ja"])
    def test_ascii_input_is_unchanged(self, code):
        assert romanize("hello, world 42", code) == "hello, world 42"


class TestTables:
    """Mapping tables are immutable."""

    def test_mappings_cannot_be_mutated(self):
        """Test table mappings reject assignment."""
        with pytest.raises(TypeError):
            TELUGU.consonants["క"] = "x"
        with pytest.raises(TypeError):
            KANA.digraphs["きゃ"] = "x"
        with pytest.raises(TypeError):
            DEVANAGARI.nukta_letters["क"] = "x"

    def test_tables_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEVANAGARI.virama = "x"

    def test_katakana_mirrors_hiragana(self):
        """Test katakana entries are derived from hiragana."""
        assert KANA.syllables["カ"] == KANA.syllables["か"] == "ka"
        assert KANA.digraphs["キャ"] == KANA.digraphs["きゃ"] == "kya"

    def test_nukta_letters_are_mapped_consonants(self):
        """Test every nukta form has its own consonant entry."""
        for letter in DEVANAGARI.nukta_letters.values():
            assert letter in DEVANAGARI.consonants
        assert TELUGU.nukta is None
        assert not TELUGU.nukta_letters

    def test_every_table_has_a_kill_or_gemination_mark(self):
        assert TELUGU.virama == "్"
        assert DEVANAGARI.virama == "्"
        assert KANA.gemination == frozenset({"っ", "ッ"})
