"""
Schemas for the DER scoring API.

Inputs: reference and system timelines (segment lists or RTTM text), optional collar
and tie-break. Output: metrics, classified intervals (for overlay) and the
system -> reference speaker mapping.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SegmentIn(BaseModel):
    """One speaker turn as sent by the client."""

    id: str | None = Field(None, description="Client segment id; generated from speaker/start/end when absent")
    speaker_id: str = Field(
        ..., min_length=1, pattern=r"^\S+$", description="Speaker label (no whitespace: RTTM columns are space-separated)"
    )
    start: float = Field(..., description="Start time in seconds")
    end: float = Field(..., description="End time in seconds (end > start expected)")


class ScoringOptions(BaseModel):
    collar: float | None = Field(
        None,
        ge=0.0,
        description="Forgiveness collar in seconds; default from DER_DEFAULT_COLLAR",
    )
    tie_break: Literal["input", "speaker_id"] | None = Field(
        None,
        description="Greedy mapping tie-break; default from DER_TIE_BREAK",
    )


class DERRequest(ScoringOptions):
    """Request body for POST /api/der."""

    reference: list[SegmentIn] = Field(default_factory=list, description="Ground-truth segments")
    system: list[SegmentIn] = Field(default_factory=list, description="Hypothesis segments")


class DERRttmRequest(ScoringOptions):
    """Request body for POST /api/der/rttm and POST /api/der/corpus."""

    reference_rttm: str = Field("", description="Reference RTTM text")
    system_rttm: str = Field("", description="System RTTM text")


class MetricsOut(BaseModel):
    MS: float = Field(..., description="Missed speech, % of scored time")
    FA: float = Field(..., description="False alarm, % of scored time")
    SER: float = Field(..., description="Speaker error, % of scored time")
    DER: float = Field(..., description="MS + FA + SER")
    scored: float = Field(..., description="Scored reference speech in seconds")
    missed_time: float = 0.0
    false_alarm_time: float = 0.0
    speaker_error_time: float = 0.0


class IntervalOut(BaseModel):
    start: float
    end: float
    type: Literal["OK", "MS", "FA", "SER"]
    ref_speakers: list[str] = Field(default_factory=list)
    sys_speakers: list[str] = Field(default_factory=list)


class DERResponse(BaseModel):
    """Response body for POST /api/der and POST /api/der/rttm."""

    metrics: MetricsOut
    intervals: list[IntervalOut] = Field(default_factory=list)
    mapping: dict[str, str] = Field(default_factory=dict, description="system speaker -> reference speaker")


class FileScore(BaseModel):
    file_id: str
    metrics: MetricsOut
    mapping: dict[str, str] = Field(default_factory=dict)


class CorpusDERResponse(BaseModel):
    """Response body for POST /api/der/corpus. Corpus metrics are time-weighted over all files."""

    files: list[FileScore] = Field(default_factory=list)
    metrics: MetricsOut
