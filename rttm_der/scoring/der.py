"""
compute_der: score a system diarization timeline against a reference one.

Pipeline (strictly forward): collar -> boundaries + activity sweep -> overlap
table -> greedy mapping -> interval classification -> metric aggregation.
Pure function of its inputs; no state survives a call, so concurrent calls
on different inputs need no locking.
"""
from __future__ import annotations

import logging
from typing import Sequence

from rttm_der.scoring.classifier import classify_intervals
from rttm_der.scoring.collar import apply_collar
from rttm_der.scoring.mapping import greedy_mapping
from rttm_der.scoring.metrics import aggregate
from rttm_der.scoring.models import DERResult, Segment
from rttm_der.scoring.overlap import OverlapTable
from rttm_der.scoring.timeline import sweep

logger = logging.getLogger(__name__)


def compute_der(
    reference: Sequence[Segment],
    system: Sequence[Segment],
    collar: float = 0.0,
    tie_break: str = "input",
) -> DERResult:
    """
    Compute MS / FA / SER / DER (percent of scored reference speech).

    - reference, system: segment lists; empty lists give empty intervals and zero metrics.
    - collar: seconds padded on both sides of every segment (>= 0).
    - tie_break: "input" or "speaker_id"; see scoring.mapping.
    Returns DERResult with intervals tiling [min boundary, max boundary) in order.
    """
    ref = apply_collar(sorted(reference, key=lambda s: s.start), collar)
    hyp = apply_collar(sorted(system, key=lambda s: s.start), collar)

    swept = sweep(ref, hyp)
    table = OverlapTable.from_intervals(swept.intervals)
    mapping = greedy_mapping(table, tie_break=tie_break)
    intervals = classify_intervals(swept.intervals, mapping)
    metrics = aggregate(intervals, swept.scored)

    logger.debug(
        "DER %.2f%% (MS %.2f, FA %.2f, SER %.2f) over %.3fs scored, %d intervals, %d mapped speakers",
        metrics.DER,
        metrics.MS,
        metrics.FA,
        metrics.SER,
        metrics.scored,
        len(intervals),
        len(mapping),
    )
    return DERResult(intervals=intervals, metrics=metrics, mapping=mapping)
