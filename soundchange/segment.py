#!/usr/bin/env python3
"""
Phonetic Segments
=================
A Segment is one phonetic/orthographic unit of a word: a small bag of
named attributes plus a locator (the owning Dictum and its position in it).

Attribute conventions:
    ipa          phonetic value, e.g. "k", "tʃ", "ɔj"
    orthography  spelling of the unit, e.g. "c", "ch", "au"
    stress       primary stress on this nucleus
    long         vowel length
    palatalized  rendered with a trailing ʲ
    back         rendered with a retraction diacritic

Any other key is free for rule-local markers. An absent attribute reads
as None and compares like an empty string / False.

Neighbor lookups never raise: past either edge they return EMPTY, a
sentinel segment on which every predicate is false.
"""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from soundchange.dictum import Dictum


class Segment:
    """One phonetic unit owned by at most one Dictum."""

    def __init__(self, ipa: str = '', orthography: str = '', **attributes: Any):
        self.attributes: Dict[str, Any] = {'ipa': ipa, 'orthography': orthography}
        self.attributes.update(attributes)
        self.dictum: Optional[Dictum] = None
        self.pos: int = 0

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> 'Segment':
        segment = cls()
        segment.attributes.update(attributes)
        return segment

    # -------------------------------------------------------------------------
    # Attribute access
    # -------------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self.attributes.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.attributes

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    @property
    def phon(self) -> str:
        return self.attributes.get('ipa') or ''

    @property
    def orth(self) -> str:
        return self.attributes.get('orthography') or ''

    @property
    def stressed(self) -> bool:
        return bool(self.attributes.get('stress'))

    @property
    def long(self) -> bool:
        return bool(self.attributes.get('long'))

    @property
    def is_boundary(self) -> bool:
        """Word boundary inside a phrase."""
        return self.phon == ' '

    @property
    def attached(self) -> bool:
        return self.dictum is not None

    def update(self, patch: Optional[Mapping[str, Any]] = None, **attributes: Any) -> 'Segment':
        """Merge attributes into this segment; patch values overwrite."""
        if patch:
            self.attributes.update(patch)
        if attributes:
            self.attributes.update(attributes)
        return self

    def starts_with(self) -> str:
        """First character of the phonetic value."""
        return self.phon[:1]

    def ends_with(self) -> str:
        """Last character of the phonetic value."""
        return self.phon[-1:]

    # -------------------------------------------------------------------------
    # Neighbors
    # -------------------------------------------------------------------------

    def prev(self) -> 'Segment':
        if self.dictum is None:
            return EMPTY
        self.dictum.renumber()
        return self.dictum.get(self.pos - 1)

    def next(self) -> 'Segment':
        if self.dictum is None:
            return EMPTY
        self.dictum.renumber()
        return self.dictum.get(self.pos + 1)

    def before_prev(self) -> 'Segment':
        return self.prev().prev()

    def after_next(self) -> 'Segment':
        return self.next().next()

    # -------------------------------------------------------------------------
    # Structural edits
    # -------------------------------------------------------------------------

    def delete(self) -> None:
        """Remove this segment from its Dictum. Deleting twice is a no-op."""
        if self.dictum is not None:
            self.dictum.remove(self)

    def insert_before(self, *segments: 'Segment') -> None:
        if self.dictum is not None:
            self.dictum.renumber()
            self.dictum.insert(self.pos, *segments)

    def insert_after(self, *segments: 'Segment') -> None:
        if self.dictum is not None:
            self.dictum.renumber()
            self.dictum.insert(self.pos + 1, *segments)

    def swap_with(self, other: 'Segment') -> None:
        """Metathesis: exchange attribute sets, leaving positions alone."""
        if not other:
            return
        self.attributes, other.attributes = other.attributes, self.attributes

    def copy(self) -> 'Segment':
        """Detached copy with the same attributes."""
        return Segment.from_attributes(copy.deepcopy(self.attributes))

    def __repr__(self) -> str:
        extras = {k: v for k, v in self.attributes.items()
                  if k not in ('ipa', 'orthography') and v}
        suffix = f" {extras}" if extras else ""
        return f"Segment({self.phon!r}, {self.orth!r}{suffix})"


class _EmptySegment(Segment):
    """The 'no segment here' sentinel. Immutable; its neighbors are itself."""

    def __init__(self):
        super().__init__()
        self.attributes = MappingProxyType({})

    def __bool__(self) -> bool:
        return False

    def __setitem__(self, key: str, value: Any) -> None:
        pass

    def update(self, patch: Optional[Mapping[str, Any]] = None, **attributes: Any) -> 'Segment':
        return self

    def prev(self) -> 'Segment':
        return self

    def next(self) -> 'Segment':
        return self

    def delete(self) -> None:
        pass

    def swap_with(self, other: 'Segment') -> None:
        pass

    def copy(self) -> 'Segment':
        return self

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = _EmptySegment()


__all__ = ['Segment', 'EMPTY']
