"""
Overlap table: co-active seconds per (reference speaker, system speaker) pair.
Sparse; only pairs that were ever co-active are stored.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from rttm_der.scoring.models import ErrorInterval


class OverlapTable:
    """ref -> sys -> seconds, in first-insertion order."""

    def __init__(self) -> None:
        self._totals: dict[str, dict[str, float]] = {}

    def add(self, ref_speaker: str, sys_speaker: str, duration: float) -> None:
        row = self._totals.setdefault(ref_speaker, {})
        row[sys_speaker] = row.get(sys_speaker, 0.0) + duration

    def add_interval(self, interval: ErrorInterval) -> None:
        """Credit the interval duration to every co-active pair."""
        if not interval.ref_speakers or not interval.sys_speakers:
            return
        duration = interval.duration
        for ref_speaker in interval.ref_speakers:
            for sys_speaker in interval.sys_speakers:
                self.add(ref_speaker, sys_speaker, duration)

    def get(self, ref_speaker: str, sys_speaker: str) -> float:
        return self._totals.get(ref_speaker, {}).get(sys_speaker, 0.0)

    def pairs(self) -> Iterator[tuple[str, str, float]]:
        """Flatten to (ref, sys, seconds) in insertion order."""
        for ref_speaker, row in self._totals.items():
            for sys_speaker, duration in row.items():
                yield ref_speaker, sys_speaker, duration

    def __len__(self) -> int:
        return sum(len(row) for row in self._totals.values())

    @classmethod
    def from_intervals(cls, intervals: Iterable[ErrorInterval]) -> "OverlapTable":
        table = cls()
        for interval in intervals:
            table.add_interval(interval)
        return table
