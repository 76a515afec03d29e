"""Schemas for the RTTM conversion API."""
from __future__ import annotations

from pydantic import BaseModel, Field

from rttm_der.schemas.der import SegmentIn


class RttmParseRequest(BaseModel):
    """Request body for POST /api/rttm/parse."""

    text: str = Field(..., description="RTTM text")


class SpeakerOut(BaseModel):
    id: str
    speech_time: float = Field(0.0, description="Total seconds of this speaker's turns")


class SegmentOut(BaseModel):
    id: str
    speaker_id: str
    start: float
    end: float


class RttmParseResponse(BaseModel):
    segments: list[SegmentOut] = Field(default_factory=list, description="Sorted by start")
    speakers: list[SpeakerOut] = Field(default_factory=list, description="First-seen order")


class RttmFormatRequest(BaseModel):
    """Request body for POST /api/rttm/format."""

    segments: list[SegmentIn] = Field(default_factory=list)
    file_id: str | None = Field(
        None, pattern=r"^\S+$", description="Written in column 2; default RTTM_DEFAULT_FILE_ID"
    )
    media_name: str | None = Field(
        None,
        description="Optional media file name; file_id is derived from it (extension stripped) when file_id is absent",
    )


class RttmFormatResponse(BaseModel):
    text: str
