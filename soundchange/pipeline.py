#!/usr/bin/env python3
"""
Stage Pipeline
==============
Runs an ordered list of named stages over a Dictum, keeping a snapshot
after each one.

Each stage receives its own deep copy of the previous snapshot, so it
may mutate freely without disturbing earlier snapshots. A stage either
returns a Dictum (used as its result) or None (the mutated copy is used).

Branches are two stage lists run from the same snapshot:

    common = run_stages(scan("causam"), COMMON_STAGES)
    east = run_stages(common.final, EAST_STAGES)
    west = run_stages(common.final, WEST_STAGES)
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from soundchange.dictum import Dictum

logger = logging.getLogger(__name__)

StageFunction = Callable[[Dictum], Optional[Dictum]]
Stage = Tuple[str, StageFunction]


@dataclass
class Snapshot:
    """The Dictum as it stood after one named stage."""
    name: str
    dictum: Dictum

    @property
    def ipa(self) -> str:
        return self.dictum.to_ipa()

    @property
    def spelling(self) -> str:
        return self.dictum.join()


@dataclass
class StageTrace:
    """Initial Dictum plus one snapshot per stage, in order."""
    initial: Dictum
    snapshots: List[Snapshot] = field(default_factory=list)

    @property
    def final(self) -> Dictum:
        return self.snapshots[-1].dictum if self.snapshots else self.initial

    def __len__(self) -> int:
        return len(self.snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.snapshots)

    def __getitem__(self, key: Union[int, str]) -> Snapshot:
        if isinstance(key, str):
            for snapshot in self.snapshots:
                if snapshot.name == key:
                    return snapshot
            raise KeyError(key)
        return self.snapshots[key]

    def changed(self) -> Iterator[Snapshot]:
        """Snapshots whose IPA differs from the one before."""
        previous = self.initial.to_ipa()
        for snapshot in self.snapshots:
            current = snapshot.ipa
            if current != previous:
                yield snapshot
            previous = current


def run_stage(dictum: Dictum, stage: StageFunction) -> Dictum:
    """Apply one stage to a deep copy of ``dictum``."""
    working = dictum.copy()
    result = stage(working)
    if result is None:
        return working
    if not isinstance(result, Dictum):
        raise TypeError(f"stage returned {type(result).__name__}, expected Dictum or None")
    return result


def run_stages(dictum: Dictum, stages: Sequence[Stage]) -> StageTrace:
    """
    Run ``stages`` in order, starting from a copy of ``dictum``.

    Args:
        dictum: starting point; never mutated
        stages: ``(name, function)`` pairs

    Returns:
        StageTrace with one snapshot per stage.
    """
    trace = StageTrace(initial=dictum.copy())
    current = trace.initial

    for name, stage in stages:
        current = run_stage(current, stage)
        trace.snapshots.append(Snapshot(name=name, dictum=current))
        logger.debug(f"{name}: {current.join()} [{current.to_ipa()}]")

    return trace


__all__ = [
    'Stage',
    'Snapshot',
    'StageTrace',
    'run_stage',
    'run_stages',
]
