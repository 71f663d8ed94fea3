#!/usr/bin/env python3
"""
soundchange - Historical Sound Change Engine
============================================

Pushes a written word through ordered, context-sensitive rewrite rules,
producing a phonetic surface form and an evolved spelling at every stage.

Quick Start
-----------
    from soundchange import scan, change, voice, run_stages, is_intervocalic

    word = scan("lupum")

    def lenition(w):
        change(w, ["p", "t", "k"], consequence=voice, condition=is_intervocalic)

    trace = run_stages(word, [("lenition", lenition)])
    trace.final.to_ipa()   # 'ˈlubum'
    trace.final.join()     # 'lupum' (spelling is a rule's business too)

Modules
-------
    soundchange.features     - phonetic feature classifier
    soundchange.segment      - Segment and the EMPTY sentinel
    soundchange.dictum       - Dictum, the word as a segment sequence
    soundchange.environment  - neighbor and position predicates
    soundchange.patterns     - segment patterns and match()
    soundchange.rewrite      - change() / retro_change()
    soundchange.stress       - stress placement and to_ipa()
    soundchange.scanners     - raw string -> initial Dictum
    soundchange.pipeline     - staged runs with per-stage snapshots
    soundchange.ui           - rich table of a stage trace
"""

__version__ = "0.1.0"
__author__ = "soundchange"

import sys
from pathlib import Path

# Ensure parent directory is in path for imports
_parent = Path(__file__).parent.parent
if str(_parent) not in sys.path:
    sys.path.insert(0, str(_parent))

# =============================================================================
# Submodule Imports
# =============================================================================

from . import features
from . import segment
from . import dictum
from . import environment
from . import patterns
from . import rewrite
from . import stress
from . import scanners
from . import pipeline
from . import ui

# =============================================================================
# Public API
# =============================================================================

from .segment import Segment, EMPTY
from .dictum import Dictum
from .environment import (
    PREDICATES,
    is_vocalic,
    is_consonantal,
    is_initial,
    is_final,
    is_intervocalic,
    in_onset,
    is_posttonic,
    is_pretonic,
    vowels_before,
    vowels_after,
)
from .patterns import (
    Pattern,
    AttributeEquals,
    NamedPredicate,
    Literal,
    AnyOf,
    Custom,
    as_pattern,
    match,
)
from .rewrite import change, retro_change, voice, devoice
from .stress import assign_stress, takes_stress_mark, to_ipa
from .scanners import scan, tokenize_latin
from .pipeline import Snapshot, StageTrace, run_stage, run_stages


__all__ = [
    'Segment',
    'EMPTY',
    'Dictum',
    'PREDICATES',
    'is_vocalic',
    'is_consonantal',
    'is_initial',
    'is_final',
    'is_intervocalic',
    'in_onset',
    'is_posttonic',
    'is_pretonic',
    'vowels_before',
    'vowels_after',
    'Pattern',
    'AttributeEquals',
    'NamedPredicate',
    'Literal',
    'AnyOf',
    'Custom',
    'as_pattern',
    'match',
    'change',
    'retro_change',
    'voice',
    'devoice',
    'assign_stress',
    'takes_stress_mark',
    'to_ipa',
    'scan',
    'tokenize_latin',
    'Snapshot',
    'StageTrace',
    'run_stage',
    'run_stages',
]
