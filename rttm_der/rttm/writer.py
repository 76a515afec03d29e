"""
RTTM writer: one SPEAKER row per segment, sorted by start.

start/duration are written with 3 decimals; duration is floored at
RTTM_MIN_DURATION so no zero-length rows are emitted.
"""
from __future__ import annotations

import os
from typing import Iterable, Optional

from rttm_der.config import get_settings
from rttm_der.scoring.models import Segment


def file_id_from_name(name: Optional[str], default: Optional[str] = None) -> str:
    """File id from a media/file name: basename without its last extension ("a/meeting.wav" -> "meeting")."""
    fallback = default or get_settings().RTTM_DEFAULT_FILE_ID
    base = os.path.basename((name or "").strip())
    stem, _ = os.path.splitext(base)
    return stem or fallback


def _check_token(kind: str, value: str) -> str:
    """RTTM columns are whitespace-separated; a value with whitespace would shift the columns."""
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"RTTM {kind} must be a non-empty token without whitespace, got {value!r}")
    return value


def _format_rttm_line(seg: Segment, file_id: str, channel: int, min_duration: float) -> str:
    """SPEAKER <file> <chnl> <tbeg> <tdur> <ortho> <stype> <name> <conf>"""
    _check_token("speaker id", seg.speaker_id)
    duration = max(min_duration, seg.end - seg.start)
    return f"SPEAKER {file_id} {channel} {seg.start:.3f} {duration:.3f} <NA> <NA> {seg.speaker_id} <NA>"


def format_rttm(
    segments: Iterable[Segment],
    file_id: Optional[str] = None,
    channel: Optional[int] = None,
    min_duration: Optional[float] = None,
) -> str:
    """Serialize segments to RTTM text (trailing newline included). ValueError on ids containing whitespace."""
    settings = get_settings()
    file_id = _check_token("file id", file_id or settings.RTTM_DEFAULT_FILE_ID)
    channel = channel if channel is not None else settings.RTTM_CHANNEL
    min_duration = min_duration if min_duration is not None else settings.RTTM_MIN_DURATION
    lines = [
        _format_rttm_line(seg, file_id, channel, min_duration)
        for seg in sorted(segments, key=lambda s: s.start)
    ]
    return "\n".join(lines) + "\n"
