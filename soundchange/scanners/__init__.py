#!/usr/bin/env python3
"""
Scanners
========
Turn a raw input string into the initial Dictum of a pipeline.

A scanner (tokenizer) splits the spelling into Segments using the source
language's digraph rules; ``scan`` wraps the result in a Dictum, attaches
the stage-local ``features`` and places primary stress.

Usage:
    from soundchange.scanners import scan

    word = scan("facēre")
    word.join()      # 'facēre'
    word.to_ipa()    # 'faˈkeːre'

    word = scan("rosās", features={"plural": True})
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, Optional

import yaml

from soundchange.dictum import Dictum
from soundchange.segment import Segment
from soundchange.stress import assign_stress

logger = logging.getLogger(__name__)

SCANNERS_DIR = Path(__file__).parent

Tokenizer = Callable[[str], Iterable[Segment]]


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass(frozen=True)
class ScannerConfig:
    """Tokenization rules for one source language."""
    token_pattern: 're.Pattern'
    phonetic: Dict[str, str]
    long_marks: str
    raw: Dict[str, Any]


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the scanners directory."""
    filepath = SCANNERS_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Scanner config not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_latin() -> ScannerConfig:
    """Load the Classical Latin scanner configuration."""
    raw = _load_yaml('latin.yaml')
    if not raw.get('token_pattern'):
        raise ValueError("latin.token_pattern must be set in latin.yaml")

    return ScannerConfig(
        token_pattern=re.compile(raw['token_pattern'], re.IGNORECASE),
        phonetic={str(k): str(v) for k, v in (raw.get('phonetic') or {}).items()},
        long_marks=raw.get('long_marks', ''),
        raw=raw,
    )


# =============================================================================
# Tokenizers
# =============================================================================

def _strip_marks(token: str) -> str:
    decomposed = unicodedata.normalize('NFD', token)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def tokenize_latin(text: str) -> Iterator[Segment]:
    """
    Split Latin spelling into Segments.

    The orthography of each segment is the token exactly as written, so
    ``join()`` on the result gives back the input. A macron marks the
    vowel long; macrons and breves are dropped from the phonetic value.
    """
    config = load_latin()

    for token in config.token_pattern.findall(text):
        decomposed = unicodedata.normalize('NFD', token)
        base = _strip_marks(token).lower()
        phon = config.phonetic.get(base, base)

        segment = Segment(ipa=phon, orthography=token)
        if any(mark in decomposed for mark in config.long_marks):
            segment['long'] = True
        yield segment


# =============================================================================
# Construction Entry Point
# =============================================================================

def scan(text: str, features: Optional[Dict[str, Any]] = None,
         tokenizer: Tokenizer = tokenize_latin,
         policy: Optional[str] = None) -> Dictum:
    """
    Build the initial Dictum for ``text``.

    Args:
        text: the source spelling, possibly several space-separated words,
            each optionally ending in a stress override marker
        features: stage-local configuration, e.g. ``{"plural": True}``
        tokenizer: source-specific tokenizer yielding Segments
        policy: stress policy; see soundchange.stress.assign_stress

    Returns:
        A stressed Dictum with override markers consumed.
    """
    word = Dictum(tokenizer(text), features=features)
    assign_stress(word, policy)
    logger.debug(f"scanned {text!r} -> [{word.to_ipa()}]")
    return word


__all__ = [
    'ScannerConfig',
    'load_latin',
    'tokenize_latin',
    'scan',
]
