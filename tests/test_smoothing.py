import pytest

from step_pipeline.core.channels import ChannelTable
from step_pipeline.core.errors import ChannelIndexError
from step_pipeline.physics.smoothing import ExponentialMovingAverage

@pytest.fixture
def ema():
    return ExponentialMovingAverage(ChannelTable(count=2), alpha=0.1)

def test_first_output_from_zero(ema):
    assert ema.smooth(0, 10.0) == pytest.approx(1.0)
    assert ema.channels[0].previous == pytest.approx(1.0)

def test_constant_input_converges(ema):
    for _ in range(30):
        out = ema.smooth(0, 10.0)
    assert abs(out - 10.0) < 0.5
    assert out == pytest.approx(10.0 * (1 - 0.9 ** 30))

def test_channels_are_independent(ema):
    ema.smooth(0, 10.0)
    ema.smooth(0, 10.0)
    assert ema.smooth(1, 10.0) == pytest.approx(1.0)
    assert ema.channels[0].previous == pytest.approx(1.9)

def test_unknown_channel(ema):
    with pytest.raises(ChannelIndexError):
        ema.smooth(2, 1.0)
