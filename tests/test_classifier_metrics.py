import pytest

from rttm_der.scoring.classifier import classify_interval, classify_intervals
from rttm_der.scoring.metrics import aggregate, metrics_from_times
from rttm_der.scoring.models import ErrorInterval, ErrorType


@pytest.mark.parametrize(
    "ref, sys, expected",
    [
        (("A",), (), ErrorType.MS),
        ((), ("1",), ErrorType.FA),
        ((), (), ErrorType.OK),
        (("A",), ("1",), ErrorType.OK),
        (("A",), ("2",), ErrorType.SER),
        (("B",), ("3",), ErrorType.SER),  # "3" is unmapped
        (("A", "B"), ("2", "1"), ErrorType.OK),  # one correct system speaker suffices
    ],
)
def test_classify_interval(ref, sys, expected):
    mapping = {"1": "A", "2": "B"}
    interval = ErrorInterval(0.0, 1.0, ref_speakers=ref, sys_speakers=sys)

    assert classify_interval(interval, mapping) is expected


def test_classify_intervals_returns_new_ordered_intervals():
    intervals = (
        ErrorInterval(0.0, 1.0, ref_speakers=("A",)),
        ErrorInterval(1.0, 2.0, sys_speakers=("1",)),
    )

    classified = classify_intervals(intervals, {})

    assert [iv.type for iv in classified] == [ErrorType.MS, ErrorType.FA]
    assert [iv.type for iv in intervals] == [ErrorType.OK, ErrorType.OK]
    assert [(iv.start, iv.end) for iv in classified] == [(0.0, 1.0), (1.0, 2.0)]


def test_aggregate_percentages_of_scored_time():
    intervals = [
        ErrorInterval(0.0, 6.0, ErrorType.OK, ("A",), ("1",)),
        ErrorInterval(6.0, 7.0, ErrorType.MS, ("A",), ()),
        ErrorInterval(7.0, 9.0, ErrorType.SER, ("B",), ("1",)),
        ErrorInterval(9.0, 10.0, ErrorType.FA, (), ("1",)),
    ]

    metrics = aggregate(intervals, scored=9.0)

    assert metrics.MS == pytest.approx(100 / 9)
    assert metrics.SER == pytest.approx(200 / 9)
    assert metrics.FA == pytest.approx(100 / 9)
    assert metrics.DER == pytest.approx(metrics.MS + metrics.FA + metrics.SER)
    assert metrics.missed_time == pytest.approx(1.0)
    assert metrics.speaker_error_time == pytest.approx(2.0)
    assert metrics.false_alarm_time == pytest.approx(1.0)


def test_zero_scored_time_gives_zero_metrics():
    metrics = metrics_from_times(scored=0.0, missed_time=0.0, false_alarm_time=5.0, speaker_error_time=0.0)

    assert (metrics.MS, metrics.FA, metrics.SER, metrics.DER) == (0.0, 0.0, 0.0, 0.0)
    assert metrics.false_alarm_time == 5.0
