"""
Collar: symmetric padding of segment boundaries to forgive small timing differences.
Padding may make same-speaker segments overlap; nothing is merged.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from rttm_der.scoring.models import Segment


def apply_collar(segments: Iterable[Segment], collar: float) -> list[Segment]:
    """Return new segments with start = max(0, start - collar), end = end + collar."""
    if collar < 0:
        raise ValueError(f"collar must be >= 0, got {collar}")
    if collar == 0:
        return list(segments)
    return [
        replace(seg, start=max(0.0, seg.start - collar), end=seg.end + collar)
        for seg in segments
    ]
