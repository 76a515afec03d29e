"""
RTTM reader: tolerant, line-oriented.

Line shape: SPEAKER <file-id> <chnl> <tbeg> <tdur> <NA> <NA> <name> <NA>
- Blank lines, ';' comments and non-SPEAKER lines are skipped.
- tbeg/tdur must be finite decimal numbers and tdur > 0, otherwise the line is skipped.
- Skips are logged at DEBUG only; heterogeneous annotation sources are expected.
"""
from __future__ import annotations

import logging
import math
import re

from rttm_der.scoring.models import Segment

logger = logging.getLogger(__name__)

UNKNOWN_SPEAKER = "unknown"

_LINE_SPLIT = re.compile(r"\r?\n")
_FIELD_SPLIT = re.compile(r"\s+")
# Plain decimal numbers only: no inf/nan words, no digit-group underscores
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def segment_id(speaker_id: str, start: float, end: float) -> str:
    """Stable id for a parsed turn: <speaker>_<start>_<end> at millisecond precision."""
    return f"{speaker_id}_{start:.3f}_{end:.3f}"


def _parse_float(value: str | None) -> float | None:
    """Finite float from a plain decimal token, else None (overflow like 1e400 is rejected too)."""
    if value is None or not _NUMBER.fullmatch(value):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_rttm_line(line: str) -> tuple[str, Segment] | None:
    """Parse one line into (file_id, segment), or None when the line is not a usable SPEAKER row."""
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(";"):
        return None
    fields = _FIELD_SPLIT.split(trimmed)
    if fields[0] != "SPEAKER":
        return None

    start = _parse_float(fields[3] if len(fields) > 3 else None)
    duration = _parse_float(fields[4] if len(fields) > 4 else None)
    if start is None or duration is None or not duration > 0:
        logger.debug("Skipping RTTM line (bad start/duration): %s", trimmed)
        return None

    file_id = fields[1] if len(fields) > 1 else ""
    speaker_id = fields[7] if len(fields) > 7 and fields[7] else UNKNOWN_SPEAKER
    end = start + duration
    if not math.isfinite(end):
        logger.debug("Skipping RTTM line (end overflows): %s", trimmed)
        return None
    return file_id, Segment(id=segment_id(speaker_id, start, end), speaker_id=speaker_id, start=start, end=end)


def parse_rttm(text: str) -> list[Segment]:
    """All SPEAKER rows of an RTTM text as segments, sorted by start (stable)."""
    segments: list[Segment] = []
    for line in _LINE_SPLIT.split(text or ""):
        parsed = parse_rttm_line(line)
        if parsed is not None:
            segments.append(parsed[1])
    segments.sort(key=lambda s: s.start)
    return segments


def parse_rttm_by_file(text: str) -> dict[str, list[Segment]]:
    """Group SPEAKER rows by <file-id> (first-seen order); each group sorted by start."""
    grouped: dict[str, list[Segment]] = {}
    for line in _LINE_SPLIT.split(text or ""):
        parsed = parse_rttm_line(line)
        if parsed is None:
            continue
        file_id, seg = parsed
        grouped.setdefault(file_id, []).append(seg)
    for segments in grouped.values():
        segments.sort(key=lambda s: s.start)
    return grouped
