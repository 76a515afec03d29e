"""
DER scoring core: sweep-line timeline partition plus greedy speaker mapping.

- No audio analysis; inputs are labeled time segments only.
- Mapping is greedy longest-overlap-first, not optimal assignment.
"""
from .collar import apply_collar
from .der import compute_der
from .mapping import greedy_mapping
from .metrics import aggregate, metrics_from_times
from .models import DERMetrics, DERResult, ErrorInterval, ErrorType, Segment
from .overlap import OverlapTable
from .timeline import build_boundaries, sweep

__all__ = [
    "apply_collar",
    "compute_der",
    "greedy_mapping",
    "aggregate",
    "metrics_from_times",
    "DERMetrics",
    "DERResult",
    "ErrorInterval",
    "ErrorType",
    "Segment",
    "OverlapTable",
    "build_boundaries",
    "sweep",
]
