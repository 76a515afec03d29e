"""Services: DER scoring and RTTM conversion on top of the scoring core."""
from rttm_der.services.der_service import (
    TimelineTooLargeError,
    format_rttm_request,
    parse_rttm_text,
    run_in_executor,
    score_corpus_request,
    score_request,
    score_rttm_request,
    score_segments,
)

__all__ = [
    "TimelineTooLargeError",
    "format_rttm_request",
    "parse_rttm_text",
    "run_in_executor",
    "score_corpus_request",
    "score_request",
    "score_rttm_request",
    "score_segments",
]
