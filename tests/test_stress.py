"""
Tests for Stress Placement and IPA Rendering
============================================
Tests assign_stress() policies and override markers, stress-mark
placement in to_ipa(), and diacritic ordering.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from soundchange import Dictum, Segment, scan
from soundchange.stress import (
    assign_stress,
    penult_cluster,
    ultima_cluster,
    takes_stress_mark,
    to_ipa,
)

MARK = "ˈ"


def make(*phons):
    return Dictum([Segment(ipa=p, orthography=p) for p in phons])


def stressed_phons(word):
    return [s.phon for s in word if s.stressed]


class TestRendering:
    """Tests for to_ipa()."""

    def test_mark_before_onset(self):
        word = make("k", "a", "s", "a")
        word[3]["stress"] = True
        assert to_ipa(word) == "kaˈsa"

    def test_word_initial_stress(self):
        word = make("k", "a", "s", "a")
        word[1]["stress"] = True
        assert to_ipa(word) == "ˈkasa"

    def test_monosyllable_unmarked(self):
        word = make("p", "a", "t")
        word[1]["stress"] = True
        assert to_ipa(word) == "pat"

    def test_unstressed_polysyllable_unmarked(self):
        assert to_ipa(make("k", "a", "s", "a")) == "kasa"

    def test_mark_before_onset_cluster(self):
        word = make("a", "p", "r", "i", "k", "u", "s")
        word[3]["stress"] = True
        assert to_ipa(word) == "aˈprikus"

    def test_mark_after_coda(self):
        word = make("a", "r", "t", "a")
        word[3]["stress"] = True
        assert to_ipa(word) == "arˈta"

    def test_method_form(self):
        word = make("k", "a", "s", "a")
        word[3]["stress"] = True
        assert word.to_ipa() == to_ipa(word)

    def test_does_not_mutate(self):
        word = make("k", "a", "s", "a")
        word[1]["stress"] = True
        before = [dict(s.attributes) for s in word]
        to_ipa(word)
        assert [dict(s.attributes) for s in word] == before


class TestDiacritics:
    """Tests for length, retraction and palatalization marks."""

    def test_length(self):
        word = Dictum([Segment(ipa="p"), Segment(ipa="a", long=True)])
        assert to_ipa(word) == "paː"

    def test_length_before_glide(self):
        word = Dictum([Segment(ipa="k"), Segment(ipa="ow", long=True)])
        assert to_ipa(word) == "koːw"

    def test_backing(self):
        word = Dictum([Segment(ipa="a"), Segment(ipa="l", back=True)])
        assert to_ipa(word) == "al\u0320"

    def test_palatalization(self):
        word = Dictum([Segment(ipa="a"), Segment(ipa="n", palatalized=True)])
        assert to_ipa(word) == "anʲ"

    def test_backing_then_palatalization(self):
        word = Dictum([Segment(ipa="l", back=True, palatalized=True)])
        assert to_ipa(word) == "l\u0320ʲ"


class TestStressMarkCount:
    """Exactly one mark per polysyllabic word, none for monosyllables."""

    @pytest.mark.parametrize("text", [
        "casa", "dominus", "amīcus", "columna", "causam", "rosās", "pat", "et", "aprīcus",
    ])
    def test_single_word(self, text):
        word = scan(text)
        expected = 1 if word.syllable_count() > 1 else 0
        assert word.to_ipa().count(MARK) == expected

    def test_phrase_one_mark_per_word(self):
        word = scan("rosa casa!")
        assert word.to_ipa() == "ˈrosa kaˈsa"

    def test_phrase_with_monosyllable(self):
        word = scan("pat casa")
        assert word.to_ipa() == "pat ˈkasa"


class TestTakesStressMark:
    """Tests for takes_stress_mark()."""

    def test_stressed_segment(self):
        assert takes_stress_mark(Segment(ipa="a", stress=True))

    def test_detached_unstressed(self):
        assert not takes_stress_mark(Segment(ipa="k"))

    def test_after_stress(self):
        word = make("k", "a", "s", "a")
        word[1]["stress"] = True
        assert not takes_stress_mark(word[2])

    def test_other_word_stress_ignored(self):
        word = make("p", "a", " ", "k", "a")
        word[4]["stress"] = True
        assert not takes_stress_mark(word[0])
        assert takes_stress_mark(word[3])


class TestClusters:
    """Tests for penult_cluster()/ultima_cluster()."""

    def test_penult_cluster(self):
        assert penult_cluster(list(make("k", "o", "l", "u", "m", "n", "a")))
        assert not penult_cluster(list(make("d", "o", "m", "i", "n", "u", "s")))

    def test_ultima_cluster(self):
        assert ultima_cluster(list(make("k", "a", "s", "a", "n", "t")))
        assert not ultima_cluster(list(make("k", "a", "s", "a", "s")))

    def test_too_few_nuclei(self):
        assert not penult_cluster(list(make("p", "a", "n", "t")))


class TestAssignStress:
    """Tests for assign_stress() placement policies."""

    def test_disyllable_penult(self):
        assert scan("rosa").to_ipa() == "ˈrosa"

    def test_short_open_penult_gives_antepenult(self):
        assert scan("dominus").to_ipa() == "ˈdominus"

    def test_long_penult(self):
        assert scan("amīcus").to_ipa() == "aˈmiːkus"

    def test_closed_penult(self):
        assert scan("columna").to_ipa() == "koˈlumna"

    def test_diphthong_nucleus(self):
        assert scan("causam").to_ipa() == "ˈkausam"

    def test_monosyllable_gets_no_stress(self):
        word = assign_stress(make("p", "a", "t"))
        assert stressed_phons(word) == []

    def test_one_stress_per_subword(self):
        word = assign_stress(make("r", "o", "s", "a", " ", "k", "a", "s", "a"))
        assert [s.pos for s in word if s.stressed] == [1, 6]

    def test_ultima_policy(self):
        assert scan("casa", policy="ultima").to_ipa() == "ˈkasa"
        assert scan("casant", policy="ultima").to_ipa() == "kaˈsant"
        assert scan("rosās", policy="ultima").to_ipa() == "roˈsaːs"

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            assign_stress(make("k", "a", "s", "a"), policy="bogus")


class TestMarkers:
    """Tests for trailing override markers."""

    def test_final(self):
        word = scan("casa!")
        assert word.to_ipa() == "kaˈsa"
        assert word.join() == "casa"

    def test_initial(self):
        assert scan("amīcus^").to_ipa() == "ˈamiːkus"

    def test_right(self):
        assert scan("dominus>").to_ipa() == "doˈminus"

    def test_left(self):
        assert scan("amīcus<").to_ipa() == "ˈamiːkus"

    def test_shift_ignored_on_disyllables(self):
        for text in ("casa<", "casa>"):
            word = scan(text)
            assert word.to_ipa() == "ˈkasa"
            assert word.join() == "casa"

    def test_shift_is_clamped(self):
        # antepenult stress on a trisyllable cannot move further left
        assert scan("dominus<").to_ipa() == "ˈdominus"
        assert scan("amīcus>").to_ipa() == "amiːˈkus"

    def test_unstressed(self):
        word = scan("casa-")
        assert word.to_ipa() == "kasa"
        assert stressed_phons(word) == []
        assert word.join() == "casa"

    def test_marker_consumed_in_phrase(self):
        word = scan("rosa! casa")
        assert word.join() == "rosa casa"
        assert word.to_ipa() == "roˈsa ˈkasa"
