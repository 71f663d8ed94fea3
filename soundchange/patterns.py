#!/usr/bin/env python3
"""
Segment Patterns
================
What a rewrite rule matches against. Five variants:

    AttributeEquals({"ipa": "k", "stress": True})  every named attribute equal
    NamedPredicate("intervocalic")                 an environment predicate
    Literal("k")                                   phonetic value equals exactly
    AnyOf(["k", "g"])                              any one alternative (OR)
    Custom(lambda s: ...)                          arbitrary boolean function

``as_pattern`` builds the variant from a plain value by its shape: a
mapping, a string, a list/tuple, or a callable. Names of predicates are
never inferred from strings; a bare string is always a Literal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Tuple

from soundchange.environment import PREDICATES
from soundchange.segment import Segment


def _same(actual: Any, expected: Any) -> bool:
    # An absent attribute reads as empty / false.
    if actual is None or expected is None:
        return not actual and not expected
    return actual == expected


class Pattern(ABC):
    """Base class for segment patterns."""

    @abstractmethod
    def matches(self, segment: Segment) -> bool:
        ...


@dataclass(frozen=True)
class AttributeEquals(Pattern):
    attributes: Mapping[str, Any]

    def __post_init__(self):
        object.__setattr__(self, 'attributes', dict(self.attributes))

    def matches(self, segment: Segment) -> bool:
        return all(_same(segment[key], value) for key, value in self.attributes.items())


@dataclass(frozen=True)
class NamedPredicate(Pattern):
    name: str

    def __post_init__(self):
        if self.name not in PREDICATES:
            available = ', '.join(sorted(PREDICATES))
            raise ValueError(f"Unknown predicate '{self.name}'. Available predicates: {available}")

    def matches(self, segment: Segment) -> bool:
        return bool(PREDICATES[self.name](segment))


@dataclass(frozen=True)
class Literal(Pattern):
    ipa: str

    def matches(self, segment: Segment) -> bool:
        return segment.phon == self.ipa


@dataclass(frozen=True)
class AnyOf(Pattern):
    options: Tuple[Pattern, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'options', tuple(as_pattern(o) for o in self.options))

    def matches(self, segment: Segment) -> bool:
        return any(option.matches(segment) for option in self.options)


@dataclass(frozen=True)
class Custom(Pattern):
    predicate: Callable[[Segment], bool]

    def matches(self, segment: Segment) -> bool:
        return bool(self.predicate(segment))


def as_pattern(value: Any) -> Pattern:
    """
    Build a Pattern from a plain value by its shape.

    Args:
        value: a Pattern (returned as is), a mapping (AttributeEquals),
            a string (Literal), a list or tuple (AnyOf, elements converted
            the same way) or a callable (Custom)

    Raises:
        TypeError: for any other shape
    """
    if isinstance(value, Pattern):
        return value
    if isinstance(value, Mapping):
        return AttributeEquals(value)
    if isinstance(value, str):
        return Literal(value)
    if isinstance(value, (list, tuple)):
        return AnyOf(tuple(value))
    if callable(value):
        return Custom(value)
    raise TypeError(f"Cannot build a segment pattern from {type(value).__name__}: {value!r}")


def match(segment: Segment, pattern: Any) -> bool:
    """Does ``segment`` satisfy ``pattern``? See ``as_pattern`` for accepted shapes."""
    return as_pattern(pattern).matches(segment)


__all__ = [
    'Pattern',
    'AttributeEquals',
    'NamedPredicate',
    'Literal',
    'AnyOf',
    'Custom',
    'as_pattern',
    'match',
]
