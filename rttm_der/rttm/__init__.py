"""RTTM text <-> segment list adapters."""
from .parser import parse_rttm, parse_rttm_by_file, parse_rttm_line, segment_id
from .speakers import list_speakers, speech_time_by_speaker
from .writer import file_id_from_name, format_rttm

__all__ = [
    "parse_rttm",
    "parse_rttm_by_file",
    "parse_rttm_line",
    "segment_id",
    "list_speakers",
    "speech_time_by_speaker",
    "file_id_from_name",
    "format_rttm",
]
