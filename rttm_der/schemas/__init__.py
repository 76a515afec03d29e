"""Pydantic schemas for API request/response."""
from rttm_der.schemas.der import (
    CorpusDERResponse,
    DERRequest,
    DERResponse,
    DERRttmRequest,
    FileScore,
    IntervalOut,
    MetricsOut,
    SegmentIn,
)
from rttm_der.schemas.rttm import (
    RttmFormatRequest,
    RttmFormatResponse,
    RttmParseRequest,
    RttmParseResponse,
    SegmentOut,
    SpeakerOut,
)

__all__ = [
    "CorpusDERResponse",
    "DERRequest",
    "DERResponse",
    "DERRttmRequest",
    "FileScore",
    "IntervalOut",
    "MetricsOut",
    "SegmentIn",
    "RttmFormatRequest",
    "RttmFormatResponse",
    "RttmParseRequest",
    "RttmParseResponse",
    "SegmentOut",
    "SpeakerOut",
]
