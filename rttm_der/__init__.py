"""rttm-der: Diarization Error Rate scoring for RTTM timelines."""
from rttm_der.scoring import DERMetrics, DERResult, ErrorInterval, ErrorType, Segment, compute_der
from rttm_der.rttm import format_rttm, parse_rttm

__all__ = [
    "DERMetrics",
    "DERResult",
    "ErrorInterval",
    "ErrorType",
    "Segment",
    "compute_der",
    "format_rttm",
    "parse_rttm",
]
