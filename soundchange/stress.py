#!/usr/bin/env python3
"""
Stress & Surface Rendering
==========================
Primary stress placement on a freshly scanned Dictum, and assembly of the
IPA surface string with stress mark and diacritics.

Stress policies (per sub-word, n = number of nuclei):
- penult: n <= 1 no stress; n == 2 the penult; otherwise the penult if it
  is long or followed by two or more consonants before the final nucleus,
  else the antepenult.
- ultima: the final nucleus if it is long or closed by two or more
  consonants, else the penult.

A trailing marker character on a word overrides the policy (see
``stress.markers`` in app.yaml) and is deleted once applied. The left and
right shift markers leave words of two nuclei on their default stress.

The stress mark goes before the onset that feeds the stressed nucleus:
the leftmost segment from which every segment up to the nucleus is
in-onset. So /kasa/ stressed on the final /a/ renders ``kaˈsa``.
"""

import logging
import re
from typing import List, Optional, Sequence

from soundchange.environment import in_onset, is_consonantal, is_vocalic
from soundchange.segment import Segment
from soundchange.settings import get_setting

logger = logging.getLogger(__name__)

POLICIES = ('penult', 'ultima')

DEFAULT_MARKERS = {
    'final': '!',
    'initial': '^',
    'left': '<',
    'right': '>',
    'unstressed': '-',
}


def _markers() -> dict:
    configured = get_setting('stress.markers') or {}
    return {**DEFAULT_MARKERS, **configured}


# =============================================================================
# Syllable Weight
# =============================================================================

def _consonants_after_nucleus(segments: Sequence[Segment], nucleus_from_end: int) -> Optional[int]:
    """
    Consonants between the ``nucleus_from_end``-th nucleus from the end and
    the next nucleus (or the word end). None if there are not enough nuclei.
    """
    nuclei = 0
    consonants = 0
    for segment in reversed(segments):
        if is_vocalic(segment):
            nuclei += 1
            if nuclei == nucleus_from_end:
                return consonants
            consonants = 0
        elif is_consonantal(segment):
            consonants += 1
    return None


def penult_cluster(segments: Sequence[Segment]) -> bool:
    """The penult is closed: two or more consonants follow it."""
    count = _consonants_after_nucleus(segments, 2)
    return count is not None and count > 1


def ultima_cluster(segments: Sequence[Segment]) -> bool:
    """The word ends in two or more consonants."""
    count = _consonants_after_nucleus(segments, 1)
    return count is not None and count > 1


# =============================================================================
# Stress Assignment
# =============================================================================

def _default_index(nuclei: List[Segment], segments: List[Segment], policy: str) -> Optional[int]:
    n = len(nuclei)
    if n <= 1:
        return None
    if policy == 'ultima':
        return n - 1 if (nuclei[-1].long or ultima_cluster(segments)) else n - 2
    if n == 2:
        return 0
    return n - 2 if (nuclei[-2].long or penult_cluster(segments)) else n - 3


def _stress_subword(segments: List[Segment], policy: str, markers: dict) -> None:
    if not segments:
        return

    marker = None
    last = segments[-1]
    for name, char in markers.items():
        if last.orth == char:
            marker = name
            break

    if marker is not None:
        logger.debug(f"stress override '{marker}' on {''.join(s.orth for s in segments)!r}")
        last.delete()
        segments = segments[:-1]

    nuclei = [s for s in segments if is_vocalic(s)]

    if marker == 'unstressed' or not nuclei:
        return
    if marker == 'final':
        target = len(nuclei) - 1
    elif marker == 'initial':
        target = 0
    else:
        target = _default_index(nuclei, segments, policy)
        if target is None:
            return
        # Shift markers only apply from three nuclei up.
        if len(nuclei) > 2:
            if marker == 'right':
                target += 1
            elif marker == 'left':
                target -= 1
            target = max(0, min(target, len(nuclei) - 1))

    nuclei[target]['stress'] = True


def assign_stress(word, policy: Optional[str] = None):
    """
    Flag one nucleus per sub-word as stressed.

    Args:
        word: a Dictum, normally straight from a scanner
        policy: 'penult' or 'ultima'; defaults to ``stress.policy`` in app.yaml

    Returns:
        The same Dictum, with override markers removed.
    """
    policy = policy or get_setting('stress.policy', 'penult')
    if policy not in POLICIES:
        raise ValueError(f"Unknown stress policy '{policy}'. Available policies: {', '.join(POLICIES)}")

    markers = _markers()
    for segments in word.subwords():
        _stress_subword(segments, policy, markers)
    return word


# =============================================================================
# Surface Rendering
# =============================================================================

def takes_stress_mark(segment: Segment) -> bool:
    """
    Does the stress mark go right before this segment?

    True for the stressed segment itself, and for a segment from which
    every segment up to (not including) its word's stressed nucleus is
    in-onset.
    """
    if segment.stressed:
        return True
    if not segment.attached:
        return False

    dictum = segment.dictum
    dictum.renumber()
    start, stop = dictum.word_bounds(segment.pos)
    stressed = next((s.pos for s in dictum[start:stop] if s.stressed), None)
    if stressed is None or stressed < segment.pos:
        return False
    return all(in_onset(s) for s in dictum[segment.pos:stressed])


def to_ipa(word) -> str:
    """
    Phonetic surface string.

    Monosyllabic words get no stress mark; polysyllables get exactly one,
    before the onset of the stressed syllable. Retraction and
    palatalization diacritics follow the segment; the length mark goes
    before any trailing glides (/oːw/, not /owː/).
    """
    stress_mark = get_setting('ipa.stress_mark', 'ˈ')
    length_mark = get_setting('ipa.length_mark', 'ː')
    backing_mark = get_setting('ipa.backing_mark', '\u0320')
    palatal_mark = get_setting('ipa.palatalization_mark', 'ʲ')

    already_marked = re.compile(re.escape(stress_mark) + r'\S*$')
    trailing_glides = re.compile(r'([jwɥ]*)$')

    word.renumber()
    output = ''

    for segment in word:
        if (not segment.is_boundary
                and word.syllable_count(segment.pos) > 1
                and takes_stress_mark(segment)
                and not already_marked.search(output)):
            output += stress_mark

        output += segment.phon
        if segment['back']:
            output += backing_mark
        if segment['palatalized']:
            output += palatal_mark
        if segment.long:
            output = trailing_glides.sub(lambda m: length_mark + m.group(1), output, count=1)

    return output


__all__ = [
    'POLICIES',
    'penult_cluster',
    'ultima_cluster',
    'assign_stress',
    'takes_stress_mark',
    'to_ipa',
]
