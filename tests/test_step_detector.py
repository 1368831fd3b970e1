import threading

import pytest

from step_pipeline.detection.step_detector import DetectorState, StepDetector
from step_pipeline.detection.threshold import ThresholdChannel

def feed(detector, values):
    return [detector.update(v) for v in values]

@pytest.fixture
def detector():
    return StepDetector(threshold=10.0, inactive_periods=12)

def test_starts_armed_with_default_threshold():
    detector = StepDetector()
    assert detector.armed
    assert detector.threshold == 12.72
    assert detector.inactive_counter == 0

def test_single_spike_fires_once(detector):
    events = feed(detector, [0.0] * 20 + [15.0] + [0.0] * 30)
    assert events.count(True) == 1
    assert events.index(True) == 20

def test_no_refire_within_refractory_window(detector):
    assert detector.update(15.0)
    # Twelve more samples must elapse, even above threshold
    assert feed(detector, [15.0] * 12) == [False] * 12
    assert detector.state is DetectorState.REFRACTORY
    assert detector.update(15.0)

def test_value_dropping_below_threshold_does_not_rearm(detector):
    detector.update(15.0)
    detector.update(0.0)
    assert detector.state is DetectorState.REFRACTORY
    assert not detector.update(15.0)

def test_rearms_after_refractory_length(detector):
    detector.update(15.0)
    assert feed(detector, [0.0] * 12) == [False] * 12
    assert detector.inactive_counter == 12
    assert detector.state is DetectorState.REFRACTORY

    # The next evaluation re-arms first, then finds nothing over threshold
    assert not detector.update(0.0)
    assert detector.state is DetectorState.ARMED
    assert detector.inactive_counter == 1

def test_rearm_and_fire_in_same_evaluation(detector):
    detector.update(15.0)
    feed(detector, [0.0] * 12)
    assert detector.update(15.0)
    assert detector.state is DetectorState.REFRACTORY
    assert detector.inactive_counter == 0

def test_armed_counter_wraps_without_firing(detector):
    feed(detector, [0.0] * 12)
    assert detector.inactive_counter == 12
    detector.update(0.0)
    assert detector.inactive_counter == 1
    assert detector.armed

def test_value_equal_to_threshold_does_not_fire(detector):
    assert not detector.update(10.0)

def test_threshold_change_applies_on_next_sample(detector):
    detector.on_threshold_change(5.0)
    assert detector.update(6.0)

def test_threshold_change_keeps_counter_and_state(detector):
    detector.update(15.0)
    feed(detector, [0.0] * 5)
    detector.on_threshold_change(1.0)
    assert detector.inactive_counter == 5
    assert detector.state is DetectorState.REFRACTORY

def test_reset_rearms_and_keeps_threshold(detector):
    detector.on_threshold_change(3.0)
    detector.update(15.0)
    detector.reset()
    assert detector.armed
    assert detector.inactive_counter == 0
    assert detector.threshold == 3.0

def test_shared_channel_updates_detector():
    channel = ThresholdChannel(10.0)
    detector = StepDetector(threshold_channel=channel)
    channel.on_threshold_change(2.0)
    assert detector.threshold == 2.0
    assert detector.update(2.5)

def test_channel_rejects_non_finite():
    channel = ThresholdChannel(10.0)
    with pytest.raises(ValueError):
        channel.on_threshold_change(float('nan'))
    with pytest.raises(ValueError):
        channel.on_threshold_change(float('inf'))
    assert channel.value == 10.0

def test_channel_reads_during_concurrent_writes():
    channel = ThresholdChannel(10.0)
    written = {10.0} | {float(v) for v in range(1, 5001)}

    def tune():
        for v in range(1, 5001):
            channel.on_threshold_change(float(v))

    tuner = threading.Thread(target=tune)
    reads = []
    tuner.start()
    while tuner.is_alive():
        reads.append(channel.value)
    tuner.join()
    reads.append(channel.value)

    assert all(v in written for v in reads)
    # One writer pushing increasing values: a reader never goes backwards
    after_start = [v for v in reads if v != 10.0]
    assert all(b >= a for a, b in zip(after_start, after_start[1:]))
    assert reads[-1] == 5000.0
