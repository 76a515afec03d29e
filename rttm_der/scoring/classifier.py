"""
Interval classification: OK / MS / FA / SER from the active speaker sets and the mapping.

- ref only -> MS; sys only -> FA; neither -> OK.
- both: OK if at least one system speaker maps to an active reference speaker, else SER.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping

from rttm_der.scoring.models import ErrorInterval, ErrorType


def classify_interval(interval: ErrorInterval, mapping: Mapping[str, str]) -> ErrorType:
    ref, sys = interval.ref_speakers, interval.sys_speakers
    if ref and not sys:
        return ErrorType.MS
    if sys and not ref:
        return ErrorType.FA
    if not ref:
        return ErrorType.OK
    # One correctly mapped system speaker is enough
    if any(mapping.get(s) in ref for s in sys):
        return ErrorType.OK
    return ErrorType.SER


def classify_intervals(
    intervals: Iterable[ErrorInterval], mapping: Mapping[str, str]
) -> tuple[ErrorInterval, ...]:
    """Return classified copies, in the same order."""
    return tuple(replace(iv, type=classify_interval(iv, mapping)) for iv in intervals)
