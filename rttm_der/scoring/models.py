"""
Data model for DER scoring.

- Segment: one speaker turn [start, end) in seconds; caller-owned, never mutated.
- ErrorInterval: one atomic interval of the merged timeline, with the reference
  and system speakers active in it and its classification.
- DERMetrics / DERResult: what a scoring call returns; read-only for the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Segment:
    """
    One speaker turn. end > start is expected but not enforced;
    zero-length segments contribute zero duration.
    """

    id: str
    speaker_id: str
    start: float
    end: float

    @property
    def duration(self) -> float:
        return max(0.0, self.end - self.start)


class ErrorType(str, Enum):
    OK = "OK"
    MS = "MS"  # missed speech: reference speaks, system silent
    FA = "FA"  # false alarm: system speaks, reference silent
    SER = "SER"  # speaker error: both speak, no correctly mapped speaker


@dataclass(frozen=True)
class ErrorInterval:
    """
    Atomic interval [start, end): speaker activity is constant inside it.
    Built unclassified (OK) by the sweep; the classifier returns a copy with type set.
    Speaker ids are distinct and kept in activation order so iteration is deterministic.
    """

    start: float
    end: float
    type: ErrorType = ErrorType.OK
    ref_speakers: tuple[str, ...] = ()
    sys_speakers: tuple[str, ...] = ()

    @property
    def duration(self) -> float:
        return max(0.0, self.end - self.start)


@dataclass(frozen=True)
class DERMetrics:
    """Percentages of scored reference speech. DER = MS + FA + SER by construction."""

    MS: float = 0.0
    FA: float = 0.0
    SER: float = 0.0
    DER: float = 0.0
    scored: float = 0.0  # seconds of reference speech
    missed_time: float = 0.0
    false_alarm_time: float = 0.0
    speaker_error_time: float = 0.0


@dataclass(frozen=True)
class DERResult:
    """Ordered error intervals, metrics and the system -> reference speaker mapping."""

    intervals: tuple[ErrorInterval, ...] = ()
    metrics: DERMetrics = field(default_factory=DERMetrics)
    mapping: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
