"""
FastAPI app: HTTP API for diarization scoring and RTTM conversion.

- POST /api/der: score system vs reference segment lists (MS / FA / SER / DER + error intervals).
- POST /api/der/rttm: same, from two RTTM texts.
- POST /api/der/corpus: per-file and time-weighted corpus DER from multi-file RTTM texts.
- POST /api/rttm/parse, POST /api/rttm/format: RTTM text <-> segments.

Every call is stateless; nothing is stored between requests.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from rttm_der.config import get_settings
from rttm_der.logging_config import configure_logging
from rttm_der.schemas.der import CorpusDERResponse, DERRequest, DERResponse, DERRttmRequest
from rttm_der.schemas.rttm import (
    RttmFormatRequest,
    RttmFormatResponse,
    RttmParseRequest,
    RttmParseResponse,
)
from rttm_der.services.der_service import (
    TimelineTooLargeError,
    format_rttm_request,
    parse_rttm_text,
    run_in_executor,
    score_corpus_request,
    score_request,
    score_rttm_request,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    settings = get_settings()
    logger.info(
        "DER scorer ready (default collar=%.3fs, tie_break=%s)",
        settings.DER_DEFAULT_COLLAR,
        settings.DER_TIE_BREAK,
    )
    yield


app = FastAPI(
    title="RTTM DER Scorer",
    description="Diarization Error Rate scoring with greedy speaker mapping",
    lifespan=lifespan,
)


async def _score(func, request):
    """Run a scoring call off the event loop; map precondition errors to HTTP errors."""
    try:
        return await run_in_executor(func, request)
    except TimelineTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Scoring failed: %s", e)
        raise HTTPException(status_code=500, detail="Scoring failed")


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.post("/api/der", response_model=DERResponse)
async def der(request: DERRequest) -> DERResponse:
    """
    Score system segments against reference segments.
    Output: metrics (percent of scored reference speech), classified intervals for overlay,
    system -> reference speaker mapping.
    """
    return await _score(score_request, request)


@app.post("/api/der/rttm", response_model=DERResponse)
async def der_rttm(request: DERRttmRequest) -> DERResponse:
    """Same as /api/der, with both timelines given as RTTM text. Malformed lines are skipped."""
    return await _score(score_rttm_request, request)


@app.post("/api/der/corpus", response_model=CorpusDERResponse)
async def der_corpus(request: DERRttmRequest) -> CorpusDERResponse:
    """Score each reference <file-id> separately; corpus metrics are weighted by scored time."""
    return await _score(score_corpus_request, request)


@app.post("/api/rttm/parse", response_model=RttmParseResponse)
async def rttm_parse(request: RttmParseRequest) -> RttmParseResponse:
    return parse_rttm_text(request.text)


@app.post("/api/rttm/format", response_model=RttmFormatResponse)
async def rttm_format(request: RttmFormatRequest) -> RttmFormatResponse:
    """Segments -> RTTM text, sorted by start, 3 decimals, minimum duration RTTM_MIN_DURATION."""
    try:
        return format_rttm_request(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
