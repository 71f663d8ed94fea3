"""
Tests for the Feature Classifier
================================
Tests vowel/diphthong recognition, consonant classes, voicing pairs and
sonority ranks in soundchange.features.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from soundchange.features import (
    load_tables,
    is_vowel,
    is_diphthong,
    is_vocalic,
    is_consonantal,
    is_sonorant,
    is_sibilant,
    is_fricative,
    is_stop,
    is_affricate,
    is_dental,
    is_velar,
    is_nasal,
    is_labial,
    is_round,
    is_front_vowel,
    is_back_vowel,
    is_voiced,
    is_voiceless,
    voiced_counterpart,
    voiceless_counterpart,
    sonority,
)

CLASS_TESTS = [
    is_vowel, is_diphthong, is_vocalic, is_sonorant,
    is_sibilant, is_fricative, is_stop, is_affricate, is_dental, is_velar,
    is_nasal, is_labial, is_round, is_front_vowel, is_back_vowel,
    is_voiced,
]


class TestInventory:
    """Tests for the YAML-backed tables."""

    def test_tables_load(self):
        tables = load_tables()
        assert 'a' in tables.vowels
        assert 'j' in tables.glides
        assert tables.sonority['vocalic'] == 6

    def test_tables_cached(self):
        assert load_tables() is load_tables()


class TestVowels:
    """Tests for is_vowel()."""

    @pytest.mark.parametrize("phon", ["a", "e", "ɛ", "ɔ", "œ", "õ", "a\u0303"])
    def test_single_vowels(self, phon):
        assert is_vowel(phon) is True

    @pytest.mark.parametrize("phon", ["ae", "aj", "k", "aː", "", " "])
    def test_not_vowels(self, phon):
        assert is_vowel(phon) is False


class TestDiphthongs:
    """Tests for is_diphthong()."""

    @pytest.mark.parametrize("phon", ["aj", "ɔj", "je", "ow", "\u0251\u025b\u032f", "aː", "jø"])
    def test_glide_diphthongs(self, phon):
        assert is_diphthong(phon) is True

    @pytest.mark.parametrize("phon", ["au", "ae", "oe"])
    def test_historical_digraphs(self, phon):
        assert is_diphthong(phon) is True

    @pytest.mark.parametrize("phon", ["a", "j", "jw", "ak", "", " "])
    def test_not_diphthongs(self, phon):
        assert is_diphthong(phon) is False

    def test_vocalic_covers_both(self):
        assert is_vocalic("a")
        assert is_vocalic("aj")
        assert not is_vocalic("t")


class TestConsonantClasses:
    """Tests for the symbol-set classes."""

    def test_consonantal(self):
        assert is_consonantal("t")
        assert is_consonantal("tʃ")
        assert not is_consonantal("a")
        assert not is_consonantal(" ")
        assert not is_consonantal("")

    def test_manner(self):
        assert is_stop("k")
        assert is_fricative("s")
        assert is_affricate("tʃ")
        assert is_sonorant("l")
        assert is_nasal("ŋ")
        assert is_sibilant("ʃ")
        assert not is_stop("tʃ")

    def test_place(self):
        assert is_dental("t")
        assert is_velar("k")
        assert is_labial("b")
        assert not is_labial("t")

    def test_vowel_quality(self):
        assert is_front_vowel("e")
        assert is_front_vowel("ej")
        assert is_back_vowel("ɔ")
        assert not is_back_vowel("e")
        assert is_round("o")
        assert is_round("w")

    def test_voicing(self):
        assert is_voiced("d")
        assert is_voiced("a")
        assert is_voiceless("t")
        assert not is_voiceless("d")
        assert not is_voiceless("a")

    def test_voicing_pairs(self):
        assert voiced_counterpart("t") == "d"
        assert voiced_counterpart("θ") == "d"
        assert voiceless_counterpart("z") == "s"
        assert voiced_counterpart("a") == "a"
        assert voiceless_counterpart("t") == "t"


class TestSonority:
    """Tests for sonority()."""

    def test_ranks(self):
        assert sonority("a") == 6
        assert sonority("aj") == 6
        assert sonority("r") == 4
        assert sonority("s") == 3
        assert sonority("ts") == 2
        assert sonority("p") == 1

    def test_ordering(self):
        assert sonority("p") < sonority("ts") < sonority("s") < sonority("l") < sonority("a")

    def test_unknown_is_zero(self):
        assert sonority("☃") == 0
        assert sonority("") == 0


class TestUnknownSymbols:
    """Unrecognized input fails every class test without raising."""

    @pytest.mark.parametrize("phon", ["", " ", "☃", "?"])
    def test_every_class_false(self, phon):
        for test in CLASS_TESTS:
            assert test(phon) is False, test.__name__

    @pytest.mark.parametrize("phon", ["", " "])
    def test_empty_and_boundary_not_consonantal(self, phon):
        assert is_consonantal(phon) is False
        assert is_voiceless(phon) is False

    def test_unknown_symbol_still_consonantal(self):
        # Consonantal means "real and not a nucleus", so clusters like /kw/
        # take part in onset detection without a table entry.
        assert is_consonantal("kw") is True
