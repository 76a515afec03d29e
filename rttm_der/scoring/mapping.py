"""
Greedy speaker mapping: system speaker id -> reference speaker id.

Longest-overlap-first: pairs are taken in descending overlap order and committed
when neither side is already claimed. This is a greedy approximation of a
maximum-weight bipartite matching, NOT the optimal (Hungarian) assignment, and
DER numbers can differ from scorers that use optimal assignment. Changing it
changes scores, so it stays greedy.

Tie-break among equal overlaps:
- "input": stable sort, insertion order of the overlap table (default).
- "speaker_id": secondary sort on (ref, sys) ids, reproducible across implementations.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from rttm_der.scoring.overlap import OverlapTable

logger = logging.getLogger(__name__)

TIE_BREAKS = ("input", "speaker_id")


def greedy_mapping(table: OverlapTable, tie_break: str = "input") -> Mapping[str, str]:
    """Return a read-only, injective sys -> ref mapping. Speakers without positive overlap stay unmapped."""
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")

    candidates = [(ref, sys, d) for ref, sys, d in table.pairs() if d > 0]
    if tie_break == "speaker_id":
        candidates.sort(key=lambda p: (p[0], p[1]))
    candidates.sort(key=lambda p: p[2], reverse=True)

    used_ref: set[str] = set()
    used_sys: set[str] = set()
    sys_to_ref: dict[str, str] = {}
    for ref, sys, _ in candidates:
        if ref in used_ref or sys in used_sys:
            continue
        used_ref.add(ref)
        used_sys.add(sys)
        sys_to_ref[sys] = ref

    logger.debug("Greedy mapping: %d pairs considered, %d committed", len(candidates), len(sys_to_ref))
    return MappingProxyType(sys_to_ref)
