"""
Timeline boundaries and activity sweep.

All segment starts/ends from both timelines form one sorted list of breakpoints.
Each consecutive pair (t0, t1) is an atomic interval; a segment is active in it
when start <= t0 < end. Activity is tracked monotonically while walking the
breakpoints: segments sorted by start are admitted through a pointer, active
ones sit in a min-heap keyed by end. No per-interval rescan of all segments.

Active speakers are ordered by their earliest-admitted segment that is still
active: when a speaker's first segment ends while a later one of theirs is
active, the speaker moves behind anyone admitted in between. This order feeds
the overlap table and so the "input" tie-break of the speaker mapping.
"""
from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Sequence

from rttm_der.scoring.models import ErrorInterval, Segment


def build_boundaries(reference: Sequence[Segment], system: Sequence[Segment]) -> list[float]:
    """Sorted, de-duplicated starts and ends of both timelines. NaN and +/-inf are dropped."""
    points: set[float] = set()
    for seg in (*reference, *system):
        points.add(seg.start)
        points.add(seg.end)
    return sorted(p for p in points if math.isfinite(p))


class ActiveSpeakers:
    """
    Speakers active at a monotonically increasing time t.
    advance(t) must be called with non-decreasing t.
    """

    def __init__(self, segments: Sequence[Segment]) -> None:
        # NaN compares false against everything; such segments can never be active
        self._pending = sorted(
            (s for s in segments if not (math.isnan(s.start) or math.isnan(s.end))),
            key=lambda s: s.start,
        )
        self._next = 0
        self._ends: list[tuple[float, int, str]] = []

    def advance(self, t: float) -> tuple[str, ...]:
        """Admit segments with start <= t, retire those with end <= t; return active speakers."""
        while self._next < len(self._pending) and self._pending[self._next].start <= t:
            seg = self._pending[self._next]
            heapq.heappush(self._ends, (seg.end, self._next, seg.speaker_id))
            self._next += 1
        while self._ends and self._ends[0][0] <= t:
            heapq.heappop(self._ends)
        # Only the active segments are scanned; admission index = position in start order
        first_admitted: dict[str, int] = {}
        for _, index, speaker_id in self._ends:
            if index < first_admitted.get(speaker_id, index + 1):
                first_admitted[speaker_id] = index
        return tuple(sorted(first_admitted, key=first_admitted.__getitem__))


@dataclass(frozen=True)
class SweepResult:
    intervals: tuple[ErrorInterval, ...]
    scored: float  # seconds where the reference has at least one active speaker


def sweep(reference: Sequence[Segment], system: Sequence[Segment]) -> SweepResult:
    """Partition the merged timeline into unclassified atomic intervals."""
    times = build_boundaries(reference, system)
    ref_active = ActiveSpeakers(reference)
    sys_active = ActiveSpeakers(system)

    intervals: list[ErrorInterval] = []
    scored = 0.0
    for t0, t1 in zip(times, times[1:]):
        ref_speakers = ref_active.advance(t0)
        sys_speakers = sys_active.advance(t0)
        interval = ErrorInterval(
            start=t0,
            end=t1,
            ref_speakers=ref_speakers,
            sys_speakers=sys_speakers,
        )
        if ref_speakers:
            scored += interval.duration
        intervals.append(interval)
    return SweepResult(intervals=tuple(intervals), scored=scored)
