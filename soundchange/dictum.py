#!/usr/bin/env python3
"""
Dictum: A Word as a Sequence of Segments
========================================
A Dictum exclusively owns an ordered list of Segments. It may span a
phrase: a segment whose phonetic value is a single space separates
sub-words.

Every structural edit (append, insert, remove, swap) renumbers the
segments, so a Segment's ``pos`` always equals its real index whenever a
neighbor query runs.

The ``features`` dict is a side channel for stage-local configuration
(e.g. ``{"plural": True}``) that rule stages may read.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from soundchange.features import is_vocalic
from soundchange.segment import Segment, EMPTY


class Dictum:
    """Ordered, mutable, exclusively-owned sequence of Segments."""

    def __init__(self, segments: Iterable[Segment] = (), features: Optional[Dict[str, Any]] = None):
        self._segments: List[Segment] = []
        self.features: Dict[str, Any] = dict(features or {})
        for segment in segments:
            self.append(segment)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def _check_adoptable(self, segment: Segment) -> None:
        if not segment:
            raise ValueError("the EMPTY sentinel cannot be added to a Dictum")
        if segment.dictum is not None and segment.dictum is not self:
            raise ValueError(
                f"{segment!r} already belongs to another Dictum; use Segment.copy()"
            )
        if self.index(segment) is not None:
            raise ValueError(f"{segment!r} is already in this Dictum; use Segment.copy()")

    def append(self, segment: Segment) -> Segment:
        self._check_adoptable(segment)
        segment.dictum = self
        segment.pos = len(self._segments)
        self._segments.append(segment)
        return segment

    def insert(self, index: int, *segments: Segment) -> None:
        """Insert segments before ``index``; later segments shift right."""
        if len({id(s) for s in segments}) != len(segments):
            raise ValueError("the same Segment cannot be inserted twice")
        for segment in segments:
            self._check_adoptable(segment)
        for segment in segments:
            segment.dictum = self
        index = max(0, min(index, len(self._segments)))
        self._segments[index:index] = list(segments)
        self.renumber()

    def remove_at(self, index: int) -> Segment:
        """Remove and return the segment at ``index`` (EMPTY if out of range)."""
        if not 0 <= index < len(self._segments):
            return EMPTY
        segment = self._segments.pop(index)
        segment.dictum = None
        self.renumber()
        return segment

    def remove(self, segment: Segment) -> None:
        """Remove a segment by identity; a no-op if it is not here."""
        idx = self.index(segment)
        if idx is not None:
            self.remove_at(idx)

    def swap(self, i: int, j: int) -> None:
        """Reorder two segments in place."""
        if not (0 <= i < len(self._segments) and 0 <= j < len(self._segments)):
            return
        self._segments[i], self._segments[j] = self._segments[j], self._segments[i]
        self.renumber()

    def renumber(self) -> None:
        for idx, segment in enumerate(self._segments):
            segment.pos = idx

    def compact(self) -> 'Dictum':
        """Drop segments whose phonetic and orthographic values are both empty."""
        for segment in [s for s in self._segments if not s.phon and not s.orth]:
            self.remove(segment)
        return self

    def copy(self) -> 'Dictum':
        """Independent deep copy; segments in the copy point at the copy."""
        return copy.deepcopy(self)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(list(self._segments))

    def __reversed__(self) -> Iterator[Segment]:
        return iter(list(reversed(self._segments)))

    def __getitem__(self, key: Union[int, slice]):
        return self._segments[key]

    def get(self, index: int) -> Segment:
        """Segment at ``index``, or EMPTY when out of range (negative included)."""
        if 0 <= index < len(self._segments):
            return self._segments[index]
        return EMPTY

    def index(self, segment: Segment) -> Optional[int]:
        for idx, candidate in enumerate(self._segments):
            if candidate is segment:
                return idx
        return None

    def __repr__(self) -> str:
        return f"Dictum({self.join('ipa')!r})"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def join(self, attribute: str = 'orthography') -> str:
        """Concatenate one attribute across all segments."""
        return ''.join(str(s.get(attribute) or '') for s in self._segments)

    def word_bounds(self, pos: int) -> Tuple[int, int]:
        """``(start, stop)`` of the sub-word containing ``pos``, boundaries excluded."""
        start = pos
        while start > 0 and not self._segments[start - 1].is_boundary:
            start -= 1
        stop = pos + 1
        while stop < len(self._segments) and not self._segments[stop].is_boundary:
            stop += 1
        return start, min(stop, len(self._segments))

    def subwords(self) -> List[List[Segment]]:
        """Segments grouped by sub-word. Views only: ownership stays here."""
        words: List[List[Segment]] = [[]]
        for segment in self._segments:
            if segment.is_boundary:
                words.append([])
            else:
                words[-1].append(segment)
        return words

    def syllable_count(self, pos: Optional[int] = None) -> int:
        """Nuclei in the whole Dictum, or in the sub-word containing ``pos``."""
        if pos is None:
            segments = self._segments
        else:
            start, stop = self.word_bounds(pos)
            segments = self._segments[start:stop]
        return sum(1 for s in segments if is_vocalic(s.phon))

    def is_monosyllable(self, pos: Optional[int] = None) -> bool:
        return self.syllable_count(pos) == 1

    # -------------------------------------------------------------------------
    # Rewriting and rendering
    # -------------------------------------------------------------------------

    def change(self, pattern, patch=None, consequence=None, condition=None) -> int:
        """Forward rewrite pass. See soundchange.rewrite.change."""
        from soundchange.rewrite import change
        return change(self, pattern, patch, consequence, condition)

    def retro_change(self, pattern, patch=None, consequence=None, condition=None) -> int:
        """Right-to-left rewrite pass. See soundchange.rewrite.retro_change."""
        from soundchange.rewrite import retro_change
        return retro_change(self, pattern, patch, consequence, condition)

    def to_ipa(self) -> str:
        from soundchange.stress import to_ipa
        return to_ipa(self)


__all__ = ['Dictum']
