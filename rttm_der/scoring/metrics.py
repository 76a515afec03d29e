"""
Metric aggregation: classified durations -> percentages of scored reference speech.

FA is normalized by reference speech time (not by reference + false alarm);
compare against external DER tools only when they use the same convention.
"""
from __future__ import annotations

from typing import Iterable

from rttm_der.scoring.models import DERMetrics, ErrorInterval, ErrorType


def _percent(seconds: float, scored: float) -> float:
    return seconds / scored * 100 if scored > 0 else 0.0


def metrics_from_times(
    scored: float,
    missed_time: float,
    false_alarm_time: float,
    speaker_error_time: float,
) -> DERMetrics:
    """Build metrics from error seconds. Silent reference (scored == 0) gives all zeros."""
    ms = _percent(missed_time, scored)
    fa = _percent(false_alarm_time, scored)
    ser = _percent(speaker_error_time, scored)
    return DERMetrics(
        MS=ms,
        FA=fa,
        SER=ser,
        DER=ms + fa + ser,
        scored=scored,
        missed_time=missed_time,
        false_alarm_time=false_alarm_time,
        speaker_error_time=speaker_error_time,
    )


def aggregate(intervals: Iterable[ErrorInterval], scored: float) -> DERMetrics:
    totals = {ErrorType.MS: 0.0, ErrorType.FA: 0.0, ErrorType.SER: 0.0}
    for interval in intervals:
        if interval.type in totals:
            totals[interval.type] += interval.duration
    return metrics_from_times(
        scored=scored,
        missed_time=totals[ErrorType.MS],
        false_alarm_time=totals[ErrorType.FA],
        speaker_error_time=totals[ErrorType.SER],
    )
