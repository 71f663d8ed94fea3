#!/usr/bin/env python3
"""
Rewrite Primitive
=================
``change`` and ``retro_change`` are the single operation every sound law
is written with:

    # /k/ > /g/ between vowels
    change(word, "k", {"ipa": "g"}, condition=is_intervocalic)

    # final /m/ is lost
    change(word, "m", consequence=lambda s: s.delete(), condition=is_final)

For each segment, in order, the pattern and the optional condition are
tested; on success the patch is merged into the segment and the optional
consequence is called with it. The consequence is where multi-segment
edits happen (deleting or inserting neighbors, metathesis).

The pass is live: an edit made while visiting segment N is visible when
N+1 is tested. There is no simultaneous-application snapshot.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from soundchange.features import voiced_counterpart, voiceless_counterpart
from soundchange.patterns import as_pattern
from soundchange.segment import Segment

logger = logging.getLogger(__name__)

Consequence = Callable[[Segment], Any]
Condition = Callable[[Segment], bool]


def _apply(segment: Segment, pattern, patch, consequence, condition) -> bool:
    if not pattern.matches(segment):
        return False
    if condition is not None and not condition(segment):
        return False
    if patch:
        segment.update(patch)
    if consequence is not None:
        consequence(segment)
    return True


def _first_attached(word, candidates, default: int) -> int:
    """Position of the first candidate still owned by ``word``."""
    for segment in candidates:
        if segment.dictum is word:
            return segment.pos
    return default


def change(word, pattern: Any, patch: Optional[Mapping[str, Any]] = None,
           consequence: Optional[Consequence] = None,
           condition: Optional[Condition] = None) -> int:
    """
    Rewrite every matching segment, left to right.

    Args:
        word: the Dictum to rewrite in place
        pattern: anything ``as_pattern`` accepts
        patch: attributes merged into each matching segment
        consequence: called with each matching segment after patching
        condition: extra test; the segment must satisfy it as well

    Returns:
        Number of segments that matched.
    """
    pattern = as_pattern(pattern)
    matched = 0
    idx = 0

    while idx < len(word):
        segment = word[idx]
        pending = word[idx + 1:]

        if _apply(segment, pattern, patch, consequence, condition):
            matched += 1

        # Resume after the visited segment, wherever edits have moved it,
        # or at the first unvisited segment that is still in the word.
        if segment.dictum is word:
            idx = segment.pos + 1
        else:
            idx = _first_attached(word, pending, len(word))

    logger.debug(f"change {pattern!r}: {matched} of {len(word)} segments matched")
    return matched


def retro_change(word, pattern: Any, patch: Optional[Mapping[str, Any]] = None,
                 consequence: Optional[Consequence] = None,
                 condition: Optional[Condition] = None) -> int:
    """
    Like ``change``, but visits segments right to left.

    Needed where one application feeds the next leftwards, e.g. regressive
    voicing assimilation through a consonant cluster.
    """
    pattern = as_pattern(pattern)
    matched = 0
    idx = len(word) - 1

    while idx >= 0:
        segment = word[idx]
        pending = word[:idx][::-1]

        if _apply(segment, pattern, patch, consequence, condition):
            matched += 1

        if segment.dictum is word:
            idx = segment.pos - 1
        else:
            idx = _first_attached(word, pending, -1)

    logger.debug(f"retro_change {pattern!r}: {matched} of {len(word)} segments matched")
    return matched


# =============================================================================
# Consequence Helpers
# =============================================================================

def delete(segment: Segment) -> None:
    segment.delete()


def delete_next(segment: Segment) -> None:
    segment.next().delete()


def delete_prev(segment: Segment) -> None:
    segment.prev().delete()


def voice(segment: Segment) -> None:
    segment['ipa'] = voiced_counterpart(segment.phon)


def devoice(segment: Segment) -> None:
    segment['ipa'] = voiceless_counterpart(segment.phon)


def metathesize_next(segment: Segment) -> None:
    """Swap this segment's attributes with its right neighbor's."""
    segment.swap_with(segment.next())


__all__ = [
    'change',
    'retro_change',
    'delete',
    'delete_next',
    'delete_prev',
    'voice',
    'devoice',
    'metathesize_next',
]
