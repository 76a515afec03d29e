import pytest
from fastapi.testclient import TestClient

from rttm_der.scoring.models import Segment


def seg(speaker_id, start, end, seg_id=None):
    """Shorthand segment builder."""
    return Segment(id=seg_id or f"{speaker_id}_{start}_{end}", speaker_id=speaker_id, start=start, end=end)


@pytest.fixture
def make_segment():
    return seg


@pytest.fixture
def two_speaker_reference():
    """
    A speaks [0, 10), B speaks [10, 20), A again [20, 25).
    """
    return [seg("A", 0.0, 10.0), seg("B", 10.0, 20.0), seg("A", 20.0, 25.0)]


@pytest.fixture
def client(monkeypatch):
    """
    HTTP client against the app with default settings.
    Env vars that could leak in from the shell are cleared.
    """
    for name in ("DER_DEFAULT_COLLAR", "DER_MAX_COLLAR", "DER_TIE_BREAK", "MAX_SEGMENTS_PER_TIMELINE", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    from rttm_der.main import app

    with TestClient(app) as c:
        yield c
