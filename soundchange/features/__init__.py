#!/usr/bin/env python3
"""
Phonetic Feature Classifier
===========================
Maps a phonetic value (an IPA string such as ``"a"``, ``"tʃ"`` or ``"ɔj"``)
to the linguistic classes sound-change rules condition on.

Every function here is a pure function of the string. Unknown symbols,
the empty string and the word-boundary space simply fail every class
test (sonority 0); nothing raises.

Usage:
    from soundchange.features import is_vowel, is_diphthong, sonority

    is_vowel("õ")        # True
    is_diphthong("ɔj")   # True
    sonority("l")        # 4
"""

import yaml
from pathlib import Path
from typing import Dict, FrozenSet, Any
from dataclasses import dataclass
from functools import lru_cache


# =============================================================================
# Configuration Path
# =============================================================================

FEATURES_DIR = Path(__file__).parent
INVENTORY_FILE = 'inventory.yaml'

CLASS_NAMES = (
    'sonorant', 'sibilant', 'fricative', 'stop', 'affricate', 'dental',
    'velar', 'nasal', 'labial', 'round', 'voiced', 'back_vowel',
)


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass(frozen=True)
class FeatureTables:
    """Symbol tables loaded from inventory.yaml."""
    vowels: FrozenSet[str]
    diphthong_vowels: FrozenSet[str]
    glides: FrozenSet[str]
    nasalization: str
    nonsyllabic: str
    length: str
    digraph_diphthongs: FrozenSet[str]
    classes: Dict[str, FrozenSet[str]]
    front_vowel_initials: FrozenSet[str]
    sonority: Dict[str, int]
    devoice: Dict[str, str]
    voice: Dict[str, str]
    raw: Dict[str, Any]

    def in_class(self, name: str, phon: str) -> bool:
        return phon in self.classes.get(name, frozenset())


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the features directory."""
    filepath = FEATURES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Feature inventory not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _require(cfg: Dict[str, Any], key: str, context: str):
    value = cfg.get(key)
    if value is None:
        raise ValueError(f"{context}.{key} must be set in {INVENTORY_FILE}")
    return value


@lru_cache(maxsize=1)
def load_tables() -> FeatureTables:
    """Load and validate the phonetic symbol inventory."""
    raw = _load_yaml(INVENTORY_FILE)

    chars = _require(raw, 'characters', 'inventory')
    classes_cfg = _require(raw, 'classes', 'inventory')
    classes = {}
    for name in CLASS_NAMES:
        classes[name] = frozenset(str(s) for s in _require(classes_cfg, name, 'classes'))

    voicing = _require(raw, 'voicing', 'inventory')

    return FeatureTables(
        vowels=frozenset(_require(chars, 'vowels', 'characters')),
        diphthong_vowels=frozenset(_require(chars, 'diphthong_vowels', 'characters')),
        glides=frozenset(_require(chars, 'glides', 'characters')),
        nasalization=_require(chars, 'nasalization', 'characters'),
        nonsyllabic=_require(chars, 'nonsyllabic', 'characters'),
        length=_require(chars, 'length', 'characters'),
        digraph_diphthongs=frozenset(raw.get('digraph_diphthongs') or []),
        classes=classes,
        front_vowel_initials=frozenset(_require(raw, 'front_vowel_initials', 'inventory')),
        sonority=dict(_require(raw, 'sonority', 'inventory')),
        devoice=dict(_require(voicing, 'devoice', 'voicing')),
        voice=dict(_require(voicing, 'voice', 'voicing')),
        raw=raw,
    )


def reload_tables() -> FeatureTables:
    """Clear the cached inventory and load it again."""
    load_tables.cache_clear()
    return load_tables()


# =============================================================================
# Nuclei
# =============================================================================

def is_vowel(phon: str) -> bool:
    """
    True for a single vowel, optionally nasalized.

    Exactly one character must come from the vowel inventory and every
    other character must be the nasalization mark.
    """
    if not phon:
        return False
    t = load_tables()
    nuclei = sum(1 for ch in phon if ch in t.vowels)
    others = sum(1 for ch in phon if ch not in t.vowels and ch != t.nasalization)
    return nuclei == 1 and others == 0


def is_diphthong(phon: str) -> bool:
    """
    True for a vowel combined with a glide, non-syllabic or length mark.

    Historical digraphs such as ``au`` and ``ae`` count as diphthongs even
    without a glide character.
    """
    if not phon:
        return False
    t = load_tables()
    if phon in t.digraph_diphthongs:
        return True

    modifiers = t.glides | {t.nonsyllabic, t.length}
    allowed = t.diphthong_vowels | modifiers | {t.nasalization}

    has_nucleus = any(ch in t.diphthong_vowels for ch in phon)
    has_modifier = any(ch in modifiers for ch in phon)
    return has_nucleus and has_modifier and all(ch in allowed for ch in phon)


def is_vocalic(phon: str) -> bool:
    """Syllable nucleus: a vowel or a diphthong."""
    return is_vowel(phon) or is_diphthong(phon)


def is_consonantal(phon: str) -> bool:
    """Anything real that is not a nucleus. Empty and boundary values are neither."""
    if not phon or phon.isspace():
        return False
    return not is_vocalic(phon)


# =============================================================================
# Consonant Classes
# =============================================================================

def is_sonorant(phon: str) -> bool:
    return load_tables().in_class('sonorant', phon)


def is_sibilant(phon: str) -> bool:
    return load_tables().in_class('sibilant', phon)


def is_fricative(phon: str) -> bool:
    return load_tables().in_class('fricative', phon)


def is_stop(phon: str) -> bool:
    return load_tables().in_class('stop', phon)


def is_affricate(phon: str) -> bool:
    return load_tables().in_class('affricate', phon)


def is_dental(phon: str) -> bool:
    return load_tables().in_class('dental', phon)


def is_velar(phon: str) -> bool:
    return load_tables().in_class('velar', phon)


def is_nasal(phon: str) -> bool:
    return load_tables().in_class('nasal', phon)


def is_labial(phon: str) -> bool:
    """Labial consonants (the ones that vocalize to /w/ before a consonant)."""
    return load_tables().in_class('labial', phon)


def is_round(phon: str) -> bool:
    return load_tables().in_class('round', phon)


# =============================================================================
# Vowel Quality & Voicing
# =============================================================================

def is_front_vowel(phon: str) -> bool:
    """Front quality, judged by the first character (so ``ej`` counts)."""
    if not phon:
        return False
    return phon[0] in load_tables().front_vowel_initials


def is_back_vowel(phon: str) -> bool:
    return load_tables().in_class('back_vowel', phon)


def is_voiced(phon: str) -> bool:
    """Voiced consonants plus every nucleus."""
    return load_tables().in_class('voiced', phon) or is_vocalic(phon)


def is_voiceless(phon: str) -> bool:
    return is_consonantal(phon) and not is_voiced(phon)


def voiced_counterpart(phon: str) -> str:
    """Voiced partner of a voiceless obstruent; anything else comes back unchanged."""
    return load_tables().voice.get(phon, phon)


def voiceless_counterpart(phon: str) -> str:
    """Voiceless partner of a voiced obstruent; anything else comes back unchanged."""
    return load_tables().devoice.get(phon, phon)


# =============================================================================
# Sonority
# =============================================================================

def sonority(phon: str) -> int:
    """
    Ordinal sonority rank.

    Returns
    -------
    int
        6 for nuclei, 4 sonorants, 3 fricatives, 2 affricates, 1 stops,
        0 for anything else. Only meaningful relative to other ranks.
    """
    ranks = load_tables().sonority
    if is_vocalic(phon):
        return ranks['vocalic']
    for name in ('sonorant', 'fricative', 'affricate', 'stop'):
        if load_tables().in_class(name, phon):
            return ranks[name]
    return 0


__all__ = [
    'FeatureTables',
    'load_tables',
    'reload_tables',
    'is_vowel',
    'is_diphthong',
    'is_vocalic',
    'is_consonantal',
    'is_sonorant',
    'is_sibilant',
    'is_fricative',
    'is_stop',
    'is_affricate',
    'is_dental',
    'is_velar',
    'is_nasal',
    'is_labial',
    'is_round',
    'is_front_vowel',
    'is_back_vowel',
    'is_voiced',
    'is_voiceless',
    'voiced_counterpart',
    'voiceless_counterpart',
    'sonority',
]
