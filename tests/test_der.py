import random

import pytest

from rttm_der.scoring import ErrorType, Segment, compute_der


def seg(speaker_id, start, end, seg_id=None):
    return Segment(id=seg_id or f"{speaker_id}_{start}_{end}", speaker_id=speaker_id, start=start, end=end)


def _random_timeline(rng, speakers, count, horizon=60.0):
    segments = []
    for i in range(count):
        start = round(rng.uniform(0, horizon), 2)
        segments.append(seg(rng.choice(speakers), start, round(start + rng.uniform(0.1, 8.0), 2), f"s{i}"))
    return segments


def test_empty_inputs_give_empty_result():
    result = compute_der([], [])

    assert result.intervals == ()
    assert dict(result.mapping) == {}
    m = result.metrics
    assert (m.MS, m.FA, m.SER, m.DER, m.scored) == (0.0, 0.0, 0.0, 0.0, 0.0)


def test_single_speaker_perfect_match():
    result = compute_der([seg("A", 0.0, 10.0)], [seg("1", 0.0, 10.0)])

    assert dict(result.mapping) == {"1": "A"}
    assert [(iv.start, iv.end, iv.type) for iv in result.intervals] == [(0.0, 10.0, ErrorType.OK)]
    assert result.metrics.scored == pytest.approx(10.0)
    assert result.metrics.DER == 0.0


def test_missing_system_is_total_miss():
    result = compute_der([seg("A", 0.0, 10.0)], [])

    assert [(iv.start, iv.end, iv.type) for iv in result.intervals] == [(0.0, 10.0, ErrorType.MS)]
    assert result.metrics.MS == pytest.approx(100.0)
    assert result.metrics.FA == 0.0
    assert result.metrics.SER == 0.0
    assert result.metrics.scored == pytest.approx(10.0)


def test_false_alarm_is_normalized_by_reference_speech():
    result = compute_der([seg("A", 0.0, 5.0)], [seg("1", 0.0, 5.0), seg("2", 5.0, 10.0)])

    assert result.metrics.scored == pytest.approx(5.0)
    assert result.metrics.FA == pytest.approx(100.0)
    assert result.metrics.MS == 0.0
    assert result.metrics.SER == 0.0
    assert [iv.type for iv in result.intervals] == [ErrorType.OK, ErrorType.FA]


def test_perfect_match_with_relabelled_speakers(two_speaker_reference):
    system = [seg({"A": "spk0", "B": "spk1"}[s.speaker_id], s.start, s.end) for s in two_speaker_reference]

    result = compute_der(two_speaker_reference, system)

    assert dict(result.mapping) == {"spk0": "A", "spk1": "B"}
    assert result.metrics.DER == 0.0
    assert result.metrics.scored == pytest.approx(25.0)


def test_perfect_match_identical_segments(two_speaker_reference):
    result = compute_der(two_speaker_reference, list(two_speaker_reference))

    m = result.metrics
    assert (m.MS, m.FA, m.SER, m.DER) == (0.0, 0.0, 0.0, 0.0)
    assert m.scored == pytest.approx(25.0)


def test_speaker_confusion_counts_as_ser(two_speaker_reference):
    # System labels everything as one speaker: B's 10 seconds become speaker error.
    result = compute_der(two_speaker_reference, [seg("1", 0.0, 25.0)])

    assert dict(result.mapping) == {"1": "A"}
    assert result.metrics.speaker_error_time == pytest.approx(10.0)
    assert result.metrics.SER == pytest.approx(40.0)
    assert result.metrics.DER == pytest.approx(40.0)


def test_collar_bridges_short_reference_gap():
    reference = [seg("A", 0.0, 5.0), seg("A", 5.2, 10.0)]
    system = [seg("1", 0.0, 10.0)]

    strict = compute_der(reference, system)
    forgiving = compute_der(reference, system, collar=0.25)

    assert strict.metrics.false_alarm_time == pytest.approx(0.2)
    assert strict.metrics.scored == pytest.approx(9.8)
    assert forgiving.metrics.DER == 0.0
    assert forgiving.metrics.scored == pytest.approx(10.25)


def test_collar_is_applied_to_both_timelines_alike():
    # Both sides move together, so a start shift is not forgiven.
    result = compute_der([seg("A", 1.0, 5.0)], [seg("1", 1.2, 5.0)], collar=0.25)

    assert result.metrics.missed_time == pytest.approx(0.2)


def test_unsorted_input_is_accepted():
    reference = [seg("B", 5.0, 10.0), seg("A", 0.0, 5.0)]
    system = [seg("2", 5.0, 10.0), seg("1", 0.0, 5.0)]

    result = compute_der(reference, system)

    assert result.metrics.DER == 0.0
    assert dict(result.mapping) == {"1": "A", "2": "B"}


def test_inputs_are_not_modified(two_speaker_reference):
    before = list(two_speaker_reference)

    compute_der(two_speaker_reference, [seg("1", 0.0, 3.0)], collar=0.5)

    assert two_speaker_reference == before


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_partition_and_metric_identity_hold_for_random_timelines(seed):
    rng = random.Random(seed)
    reference = _random_timeline(rng, ["A", "B", "C"], 25)
    system = _random_timeline(rng, ["1", "2", "3", "4"], 30)

    result = compute_der(reference, system, collar=0.1)
    intervals = result.intervals

    starts = [s.start for s in reference + system]
    ends = [s.end for s in reference + system]
    assert intervals[0].start == pytest.approx(max(0.0, min(starts) - 0.1))
    assert intervals[-1].end == pytest.approx(max(ends) + 0.1)
    for prev, nxt in zip(intervals, intervals[1:]):
        assert prev.start < prev.end
        assert prev.end == nxt.start

    m = result.metrics
    assert m.DER == pytest.approx(m.MS + m.FA + m.SER)
    assert m.missed_time + m.speaker_error_time <= m.scored + 1e-9

    values = list(result.mapping.values())
    assert len(values) == len(set(values))


def test_non_finite_boundaries_are_ignored():
    result = compute_der([seg("A", 0.0, 4.0)], [seg("1", 0.0, float("inf")), seg("2", float("nan"), 2.0)])

    assert [(iv.start, iv.end) for iv in result.intervals] == [(0.0, 2.0), (2.0, 4.0)]
    assert result.metrics.DER == 0.0


def test_input_tie_break_follows_order_of_still_active_turns():
    # A-1 and B-1 overlap 4s each; B's turn is the earliest active one when "1" first speaks.
    reference = [
        seg("A", 0.0, 2.0),
        seg("B", 1.0, 5.0),
        seg("A", 1.5, 5.0),
        seg("A", 6.0, 7.0),
        seg("B", 8.0, 9.0),
    ]
    system = [seg("1", 2.0, 5.0), seg("1", 6.0, 7.0), seg("1", 8.0, 9.0)]

    result = compute_der(reference, system)

    assert dict(result.mapping) == {"1": "B"}
