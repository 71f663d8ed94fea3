#!/usr/bin/env python3
"""
Environment Predicates
======================
Segment-level predicates: the feature classes of a segment's phonetic
value, plus position-relative tests built from its neighbors.

All predicates take a Segment and return False for the EMPTY sentinel,
for detached segments and for word-boundary spaces, so rule conditions
never need None checks at word edges.

PREDICATES maps each predicate's rule-facing name to its function; it is
what ``NamedPredicate("intervocalic")`` looks up.
"""

from typing import Callable, Dict

from soundchange import features
from soundchange.segment import Segment


# =============================================================================
# Feature Classes
# =============================================================================

def is_vowel(segment: Segment) -> bool:
    return features.is_vowel(segment.phon)


def is_diphthong(segment: Segment) -> bool:
    return features.is_diphthong(segment.phon)


def is_vocalic(segment: Segment) -> bool:
    return features.is_vocalic(segment.phon)


def is_consonantal(segment: Segment) -> bool:
    return features.is_consonantal(segment.phon)


def is_stressed(segment: Segment) -> bool:
    return segment.stressed


def is_long(segment: Segment) -> bool:
    return segment.long


def is_short(segment: Segment) -> bool:
    """A nucleus without the long flag."""
    return is_vocalic(segment) and not segment.long


def _feature(test: Callable[[str], bool]) -> Callable[[Segment], bool]:
    def predicate(segment: Segment) -> bool:
        return test(segment.phon)
    predicate.__name__ = test.__name__
    predicate.__doc__ = test.__doc__
    return predicate


is_sonorant = _feature(features.is_sonorant)
is_sibilant = _feature(features.is_sibilant)
is_fricative = _feature(features.is_fricative)
is_stop = _feature(features.is_stop)
is_affricate = _feature(features.is_affricate)
is_dental = _feature(features.is_dental)
is_velar = _feature(features.is_velar)
is_nasal = _feature(features.is_nasal)
is_labial = _feature(features.is_labial)
is_round = _feature(features.is_round)
is_front_vowel = _feature(features.is_front_vowel)
is_back_vowel = _feature(features.is_back_vowel)
is_voiced = _feature(features.is_voiced)
is_voiceless = _feature(features.is_voiceless)


def sonority(segment: Segment) -> int:
    return features.sonority(segment.phon)


# =============================================================================
# Position
# =============================================================================

def _placed(segment: Segment) -> bool:
    return bool(segment) and segment.attached and not segment.is_boundary


def is_initial(segment: Segment) -> bool:
    """First in its word: phrase start or right after a boundary space."""
    if not _placed(segment):
        return False
    return segment.prev().is_boundary or segment.pos == 0


def is_final(segment: Segment) -> bool:
    """Last in its word: phrase end or right before a boundary space."""
    if not _placed(segment):
        return False
    return segment.next().is_boundary or segment.pos == len(segment.dictum) - 1


def is_intervocalic(segment: Segment) -> bool:
    if not _placed(segment):
        return False
    return is_vocalic(segment.prev()) and is_vocalic(segment.next())


def in_onset(segment: Segment) -> bool:
    """
    Consonant that belongs to the onset of the following syllable.

    True when the segment is word-initial, when sonority rises into the
    next segment, or when the next segment is itself a nucleus (which
    covers glide-initial diphthongs such as /je/).
    """
    if not _placed(segment) or not is_consonantal(segment):
        return False
    following = segment.next()
    rising = features.sonority(segment.ends_with()) < features.sonority(following.starts_with())
    return is_initial(segment) or rising or is_vocalic(following)


def is_posttonic(segment: Segment) -> bool:
    """Some earlier segment of the same word carries stress."""
    if not _placed(segment):
        return False
    dictum = segment.dictum
    dictum.renumber()
    start, _ = dictum.word_bounds(segment.pos)
    return any(s.stressed for s in dictum[start:segment.pos])


def is_pretonic(segment: Segment) -> bool:
    """Some later segment of the same word carries stress."""
    if not _placed(segment):
        return False
    dictum = segment.dictum
    dictum.renumber()
    _, stop = dictum.word_bounds(segment.pos)
    return any(s.stressed for s in dictum[segment.pos + 1:stop])


def vowels_before(segment: Segment) -> int:
    """Nuclei strictly before this segment."""
    if not segment.attached:
        return 0
    segment.dictum.renumber()
    return sum(1 for s in segment.dictum[:segment.pos] if is_vocalic(s))


def vowels_after(segment: Segment) -> int:
    """Nuclei strictly after this segment."""
    if not segment.attached:
        return 0
    segment.dictum.renumber()
    return sum(1 for s in segment.dictum[segment.pos + 1:] if is_vocalic(s))


# =============================================================================
# Registry
# =============================================================================

PREDICATES: Dict[str, Callable[[Segment], bool]] = {
    'vowel': is_vowel,
    'diphthong': is_diphthong,
    'vocalic': is_vocalic,
    'consonantal': is_consonantal,
    'stressed': is_stressed,
    'long': is_long,
    'short': is_short,
    'sonorant': is_sonorant,
    'sibilant': is_sibilant,
    'fricative': is_fricative,
    'stop': is_stop,
    'affricate': is_affricate,
    'dental': is_dental,
    'velar': is_velar,
    'nasal': is_nasal,
    'labial': is_labial,
    'round': is_round,
    'front_vowel': is_front_vowel,
    'back_vowel': is_back_vowel,
    'voiced': is_voiced,
    'voiceless': is_voiceless,
    'initial': is_initial,
    'final': is_final,
    'intervocalic': is_intervocalic,
    'in_onset': in_onset,
    'posttonic': is_posttonic,
    'pretonic': is_pretonic,
}


__all__ = ['PREDICATES', 'sonority', 'vowels_before', 'vowels_after'] + [
    fn.__name__ for fn in PREDICATES.values()
]
