"""
DER scoring service: request schemas -> domain segments -> compute_der -> response schemas.

- Scoring is CPU-only and synchronous; async wrappers run it in the default executor
  so the event loop stays responsive.
- Corpus scoring splits RTTM texts by <file-id> and scores each file on its own;
  corpus metrics are recomputed from summed seconds (time-weighted), not averaged.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Sequence

from rttm_der.config import Settings, get_settings
from rttm_der.rttm import (
    file_id_from_name,
    format_rttm,
    list_speakers,
    parse_rttm,
    parse_rttm_by_file,
    segment_id,
    speech_time_by_speaker,
)
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
    RttmParseResponse,
    SegmentOut,
    SpeakerOut,
)
from rttm_der.scoring import DERMetrics, DERResult, Segment, compute_der, metrics_from_times

logger = logging.getLogger(__name__)


class TimelineTooLargeError(ValueError):
    """A timeline exceeds MAX_SEGMENTS_PER_TIMELINE."""


def to_segments(items: Iterable[SegmentIn]) -> list[Segment]:
    """Schema segments -> domain segments; missing ids are generated like the RTTM parser does."""
    return [
        Segment(
            id=item.id or segment_id(item.speaker_id, item.start, item.end),
            speaker_id=item.speaker_id,
            start=item.start,
            end=item.end,
        )
        for item in items
    ]


def _resolve_options(
    collar: float | None, tie_break: str | None, settings: Settings
) -> tuple[float, str]:
    """Fill defaults from settings and enforce the collar ceiling."""
    resolved_collar = settings.DER_DEFAULT_COLLAR if collar is None else collar
    if resolved_collar < 0:
        raise ValueError(f"collar must be >= 0, got {resolved_collar}")
    if resolved_collar > settings.DER_MAX_COLLAR:
        raise ValueError(f"collar {resolved_collar} exceeds DER_MAX_COLLAR ({settings.DER_MAX_COLLAR})")
    return resolved_collar, tie_break or settings.DER_TIE_BREAK


def _check_size(name: str, segments: Sequence, settings: Settings) -> None:
    if len(segments) > settings.MAX_SEGMENTS_PER_TIMELINE:
        raise TimelineTooLargeError(
            f"{name} has {len(segments)} segments; limit is {settings.MAX_SEGMENTS_PER_TIMELINE}"
        )


def metrics_out(metrics: DERMetrics) -> MetricsOut:
    return MetricsOut(
        MS=metrics.MS,
        FA=metrics.FA,
        SER=metrics.SER,
        DER=metrics.DER,
        scored=metrics.scored,
        missed_time=metrics.missed_time,
        false_alarm_time=metrics.false_alarm_time,
        speaker_error_time=metrics.speaker_error_time,
    )


def result_to_response(result: DERResult) -> DERResponse:
    return DERResponse(
        metrics=metrics_out(result.metrics),
        intervals=[
            IntervalOut(
                start=iv.start,
                end=iv.end,
                type=iv.type.value,
                ref_speakers=list(iv.ref_speakers),
                sys_speakers=list(iv.sys_speakers),
            )
            for iv in result.intervals
        ],
        mapping=dict(result.mapping),
    )


def score_segments(
    reference: Sequence[Segment],
    system: Sequence[Segment],
    collar: float | None = None,
    tie_break: str | None = None,
) -> DERResult:
    """Score two domain timelines with settings-backed defaults and size guard."""
    settings = get_settings()
    resolved_collar, resolved_tie_break = _resolve_options(collar, tie_break, settings)
    _check_size("reference", reference, settings)
    _check_size("system", system, settings)
    if reference and not system:
        logger.warning("System timeline is empty; every reference second counts as missed speech")

    result = compute_der(reference, system, collar=resolved_collar, tie_break=resolved_tie_break)
    logger.info(
        "Scored %d ref / %d sys segments (collar=%.3f): DER=%.2f%% MS=%.2f%% FA=%.2f%% SER=%.2f%%",
        len(reference),
        len(system),
        resolved_collar,
        result.metrics.DER,
        result.metrics.MS,
        result.metrics.FA,
        result.metrics.SER,
    )
    return result


def score_request(request: DERRequest) -> DERResponse:
    result = score_segments(
        to_segments(request.reference),
        to_segments(request.system),
        collar=request.collar,
        tie_break=request.tie_break,
    )
    return result_to_response(result)


def score_rttm_request(request: DERRttmRequest) -> DERResponse:
    result = score_segments(
        parse_rttm(request.reference_rttm),
        parse_rttm(request.system_rttm),
        collar=request.collar,
        tie_break=request.tie_break,
    )
    return result_to_response(result)


def score_corpus_request(request: DERRttmRequest) -> CorpusDERResponse:
    """
    Score every file id present in the reference RTTM.
    System rows whose file id has no reference are ignored (logged); a reference
    file with no system rows is scored against an empty system timeline.
    """
    reference_files = parse_rttm_by_file(request.reference_rttm)
    system_files = parse_rttm_by_file(request.system_rttm)
    orphans = [fid for fid in system_files if fid not in reference_files]
    if orphans:
        logger.warning("System file ids without reference ignored: %s", ", ".join(orphans))

    files: list[FileScore] = []
    scored = missed = false_alarm = speaker_error = 0.0
    for file_id, reference in reference_files.items():
        result = score_segments(
            reference,
            system_files.get(file_id, []),
            collar=request.collar,
            tie_break=request.tie_break,
        )
        m = result.metrics
        scored += m.scored
        missed += m.missed_time
        false_alarm += m.false_alarm_time
        speaker_error += m.speaker_error_time
        files.append(FileScore(file_id=file_id, metrics=metrics_out(m), mapping=dict(result.mapping)))

    corpus = metrics_from_times(scored, missed, false_alarm, speaker_error)
    logger.info("Corpus of %d files: DER=%.2f%% over %.3fs scored", len(files), corpus.DER, corpus.scored)
    return CorpusDERResponse(files=files, metrics=metrics_out(corpus))


def parse_rttm_text(text: str) -> RttmParseResponse:
    segments = parse_rttm(text)
    totals = speech_time_by_speaker(segments)
    return RttmParseResponse(
        segments=[
            SegmentOut(id=s.id, speaker_id=s.speaker_id, start=s.start, end=s.end) for s in segments
        ],
        speakers=[SpeakerOut(id=spk, speech_time=totals[spk]) for spk in list_speakers(segments)],
    )


def format_rttm_request(request: RttmFormatRequest) -> RttmFormatResponse:
    file_id = request.file_id or file_id_from_name(request.media_name)
    return RttmFormatResponse(text=format_rttm(to_segments(request.segments), file_id=file_id))


async def run_in_executor(func, *args):
    """Run a sync scoring call in the default executor so the event loop is not blocked."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)
