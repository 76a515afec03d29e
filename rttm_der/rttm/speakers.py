"""Speaker inventory of a timeline."""
from __future__ import annotations

from typing import Iterable

from rttm_der.scoring.models import Segment


def list_speakers(segments: Iterable[Segment]) -> list[str]:
    """Distinct speaker ids in first-seen order."""
    return list(dict.fromkeys(seg.speaker_id for seg in segments))


def speech_time_by_speaker(segments: Iterable[Segment]) -> dict[str, float]:
    """Total seconds per speaker (overlapping turns of one speaker are counted twice)."""
    totals: dict[str, float] = {}
    for seg in segments:
        totals[seg.speaker_id] = totals.get(seg.speaker_id, 0.0) + seg.duration
    return totals
